"""
Source Control Port

Architectural Intent:
- Port interface for reading the revision of the repository being deployed
- Implemented by GitAdapter
"""

from abc import ABC, abstractmethod
from bindeploy.domain.value_objects.commit_id import CommitIdentifier


class SourceControlPort(ABC):
    """
    Port interface for the local source-control system.
    """

    @abstractmethod
    async def current_revision(self) -> CommitIdentifier:
        """
        Returns the revision currently checked out.
        Raises SourceControlError if it cannot be determined.
        """
        pass
