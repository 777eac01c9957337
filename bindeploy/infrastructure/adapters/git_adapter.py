"""
Git Adapter

Architectural Intent:
- Infrastructure adapter implementing SourceControlPort
- Reads the checked-out revision with `git rev-parse HEAD`
- Uses subprocess for git CLI operations wrapped in async

All failures (non-zero exit, timeout, missing git binary) surface as
SourceControlError with a descriptive message rather than raw subprocess
errors.
"""

import asyncio
import logging
import subprocess
from pathlib import Path
from typing import Optional, Union
from bindeploy.domain.exceptions import SourceControlError
from bindeploy.domain.ports.source_control_port import SourceControlPort
from bindeploy.domain.value_objects.commit_id import CommitIdentifier

logger = logging.getLogger(__name__)

_SUBPROCESS_TIMEOUT = 30  # seconds


class GitAdapter(SourceControlPort):
    def __init__(self, repo_path: Optional[Union[str, Path]] = None):
        self.repo_path = Path(repo_path) if repo_path else None

    def _rev_parse_head(self) -> CommitIdentifier:
        cmd = ["git", "rev-parse", "HEAD"]
        try:
            result = subprocess.run(
                cmd,
                cwd=self.repo_path,
                capture_output=True,
                text=True,
                check=True,
                timeout=_SUBPROCESS_TIMEOUT,
            )
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            raise SourceControlError(
                f"git command failed: {' '.join(cmd)}\nExit code {e.returncode}: {stderr}"
            ) from e
        except subprocess.TimeoutExpired as e:
            raise SourceControlError(
                f"git command timed out after {_SUBPROCESS_TIMEOUT}s: {' '.join(cmd)}"
            ) from e
        except FileNotFoundError as e:
            raise SourceControlError(
                "git executable not found. Ensure git is installed and on PATH."
            ) from e

        try:
            commit = CommitIdentifier.from_output(result.stdout)
        except ValueError as e:
            raise SourceControlError(f"Unexpected output from git rev-parse: {e}") from e
        logger.debug("Current revision: %s", commit)
        return commit

    async def current_revision(self) -> CommitIdentifier:
        return await asyncio.get_running_loop().run_in_executor(
            None, self._rev_parse_head
        )
