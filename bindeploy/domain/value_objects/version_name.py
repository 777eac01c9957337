"""
Remote Version Name Value Object

Architectural Intent:
- Canonical identity of one deployed artifact
- Doubles as the file name under {server_path}/versions/
- Format is fixed: {binary}-{timestamp}-{commit}-{digest}; external tooling
  parses deployed version directories, so it must not change
"""

from dataclasses import dataclass
from bindeploy.domain.value_objects.commit_id import CommitIdentifier
from bindeploy.domain.value_objects.content_digest import ContentDigest
from bindeploy.domain.value_objects.segments import validate_segment


@dataclass(frozen=True)
class RemoteVersionName:
    """
    Value Object representing the versioned remote file name of an artifact.
    """
    binary_name: str
    timestamp: int
    commit: CommitIdentifier
    digest: ContentDigest

    def __post_init__(self) -> None:
        validate_segment(self.binary_name, "Binary name")
        if self.timestamp < 0:
            raise ValueError(f"Timestamp must be non-negative, got {self.timestamp}")

    def __str__(self) -> str:
        return f"{self.binary_name}-{self.timestamp}-{self.commit}-{self.digest}"

    @staticmethod
    def parse(name: str, binary_name: str) -> "RemoteVersionName":
        """
        Parses a deployed file name back into its components.

        The binary name may itself contain hyphens, so it has to be known up
        front. The timestamp is the first field after it and the digest the
        last; whatever sits in between is the commit identifier.
        """
        prefix = f"{binary_name}-"
        if not name.startswith(prefix):
            raise ValueError(f"{name!r} is not a version of {binary_name!r}")

        rest = name[len(prefix):]
        timestamp, sep, tail = rest.partition("-")
        commit, sep2, digest = tail.rpartition("-")
        if not sep or not sep2 or not timestamp.isdigit():
            raise ValueError(f"Malformed version name: {name!r}")

        return RemoteVersionName(
            binary_name=binary_name,
            timestamp=int(timestamp),
            commit=CommitIdentifier(commit),
            digest=ContentDigest(digest),
        )
