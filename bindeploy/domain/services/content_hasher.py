"""
Content Hasher

Architectural Intent:
- Produces a stable digest of an artifact's bytes
- Streams the file in fixed-size chunks; target binaries may be large
- Digest depends on content only, never on chunk size or platform
- BLAKE3 by default so version names match existing deployments; any
  fixed-size hashlib algorithm can be configured instead
"""

import hashlib
import logging
from pathlib import Path
from typing import Any, Union
from blake3 import blake3
from bindeploy.domain.value_objects.content_digest import ContentDigest

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = "blake3"
DEFAULT_CHUNK_SIZE = 64 * 1024


def _new_hasher(algorithm: str) -> Any:
    if algorithm == "blake3":
        return blake3()
    return hashlib.new(algorithm)


class ContentHasher:
    def __init__(
        self,
        algorithm: str = DEFAULT_ALGORITHM,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        if algorithm != "blake3":
            if algorithm not in hashlib.algorithms_available:
                raise ValueError(f"Unsupported hash algorithm: {algorithm}")
            # Variable-length digests (shake_*) need an explicit length
            if hashlib.new(algorithm).digest_size == 0:
                raise ValueError(f"Unsupported hash algorithm: {algorithm}")
        self.algorithm = algorithm
        self.chunk_size = chunk_size

    def hash_file(self, path: Union[str, Path]) -> ContentDigest:
        """
        Returns the digest of the file at path.

        Raises IOError if the file cannot be opened or a read fails; no
        partial digest is ever returned.
        """
        hasher = _new_hasher(self.algorithm)
        with open(path, "rb") as f:
            while chunk := f.read(self.chunk_size):
                hasher.update(chunk)
        digest = ContentDigest(hasher.hexdigest())
        logger.debug("%s digest of %s: %s", self.algorithm, path, digest)
        return digest
