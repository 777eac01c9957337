"""
Remote Shell Port

Architectural Intent:
- Port interface for the SSH transport a deployment runs over
- Two capabilities: run a shell command, copy a local file
- Implemented by adapters (Fabric, plain ssh/scp, test doubles)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from bindeploy.domain.value_objects.remote_target import RemoteTarget


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a remote command that actually ran."""
    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class RemoteShellPort(ABC):
    """
    Port interface for executing commands and copying files on a remote host.

    Transport failures (unreachable host, authentication, broken session)
    raise ConnectionError; a command that ran and exited non-zero is
    reported through CommandResult instead.
    """

    @abstractmethod
    async def run(self, target: RemoteTarget, command: str) -> CommandResult:
        """
        Executes a shell command string on the target.
        """
        pass

    @abstractmethod
    async def put(self, target: RemoteTarget, local_path: str, remote_path: str) -> None:
        """
        Copies a local file to remote_path on the target.
        Raises OSError (ConnectionError included) on failure.
        """
        pass
