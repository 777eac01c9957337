"""
Remote Layout Value Object

Architectural Intent:
- Encodes the remote filesystem convention other tooling depends on:
    {server_path}/versions/{version}  immutable, append-only artifact store
    {server_path}/{binary_name}       mutable activation symlink
"""

import posixpath
from dataclasses import dataclass
from bindeploy.domain.value_objects.segments import validate_segment
from bindeploy.domain.value_objects.version_name import RemoteVersionName

VERSIONS_DIR = "versions"


@dataclass(frozen=True)
class RemoteLayout:
    """
    Value Object describing where artifacts and the activation link live.
    """
    server_path: str
    binary_name: str

    def __post_init__(self) -> None:
        if not self.server_path:
            raise ValueError("Server path cannot be empty")
        validate_segment(self.binary_name, "Binary name")

    @property
    def root(self) -> str:
        # "/srv/app/" -> "/srv/app", but "/" stays "/"
        stripped = self.server_path.rstrip("/")
        return stripped or "/"

    @property
    def versions_dir(self) -> str:
        return posixpath.join(self.root, VERSIONS_DIR)

    @property
    def link_path(self) -> str:
        return posixpath.join(self.root, self.binary_name)

    def artifact_path(self, version_name: RemoteVersionName) -> str:
        return posixpath.join(self.versions_dir, str(version_name))
