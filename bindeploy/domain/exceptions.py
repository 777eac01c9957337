"""
Deployment exceptions.

Every failure is fatal to the invocation; these types tell the operator
which step broke. Local read failures surface as the built-in IOError.
"""

from typing import Optional


class DeployError(Exception):
    """Base class for deployment failures."""
    pass


class SourceControlError(DeployError):
    """
    Raised when the current commit identifier cannot be obtained.

    Examples:
        - git not installed
        - not inside a repository
        - repository has no commits yet
    """
    pass


class RemoteCommandError(DeployError):
    """
    Raised when a remote operation fails: directory creation, copy,
    symlink, chmod or restart.
    """

    def __init__(
        self,
        step: str,
        message: str,
        command: Optional[str] = None,
        exit_code: Optional[int] = None,
        stderr: str = "",
    ) -> None:
        self.step = step
        self.command = command
        self.exit_code = exit_code
        self.stderr = stderr
        details = f"{step} failed: {message}"
        if exit_code is not None:
            details += f" (exit code {exit_code})"
        if stderr:
            details += f"\n{stderr.strip()}"
        super().__init__(details)
