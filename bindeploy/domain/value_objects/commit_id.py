"""
Commit Identifier Value Object

Architectural Intent:
- Opaque source-control revision of the repository performing the deploy
- Ends up inside a remote file name, so it must be a safe path segment
"""

from dataclasses import dataclass
from bindeploy.domain.value_objects.segments import validate_segment


@dataclass(frozen=True)
class CommitIdentifier:
    """
    Value Object representing a source-control revision identifier.
    """
    value: str

    def __post_init__(self) -> None:
        validate_segment(self.value, "Commit identifier")

    @staticmethod
    def from_output(output: str) -> "CommitIdentifier":
        """Builds an identifier from raw command output (trailing newline etc.)."""
        return CommitIdentifier(output.strip())

    def __str__(self) -> str:
        return self.value
