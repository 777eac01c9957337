"""
Domain Services Package

Architectural Intent:
- Contains domain services implementing the deployment's pure logic
- Hashing, version naming and remote command construction
"""

from bindeploy.domain.services.content_hasher import ContentHasher
from bindeploy.domain.services.version_namer import VersionNamer

__all__ = [
    "ContentHasher",
    "VersionNamer",
]
