"""Tests for GitAdapter."""

import subprocess
import pytest
from unittest.mock import patch, MagicMock
from bindeploy.domain.exceptions import SourceControlError
from bindeploy.domain.value_objects.commit_id import CommitIdentifier
from bindeploy.infrastructure.adapters.git_adapter import GitAdapter

SHA = "9fceb02d0ae598e95dc970b74767f19372d61af8"


class TestGitAdapter:
    @pytest.mark.asyncio
    async def test_current_revision(self, tmp_path):
        adapter = GitAdapter(tmp_path)
        completed = MagicMock(stdout=f"{SHA}\n", stderr="", returncode=0)

        with patch("subprocess.run", return_value=completed) as mock_run:
            commit = await adapter.current_revision()

        assert commit == CommitIdentifier(SHA)
        args, kwargs = mock_run.call_args
        assert args[0] == ["git", "rev-parse", "HEAD"]
        assert kwargs["cwd"] == tmp_path
        assert kwargs["check"] is True

    @pytest.mark.asyncio
    async def test_defaults_to_working_directory(self):
        adapter = GitAdapter()
        completed = MagicMock(stdout=f"{SHA}\n", stderr="", returncode=0)

        with patch("subprocess.run", return_value=completed) as mock_run:
            await adapter.current_revision()

        assert mock_run.call_args.kwargs["cwd"] is None

    @pytest.mark.asyncio
    async def test_not_a_repository(self):
        adapter = GitAdapter()
        error = subprocess.CalledProcessError(
            128, ["git", "rev-parse", "HEAD"],
            stderr="fatal: not a git repository\n",
        )

        with patch("subprocess.run", side_effect=error):
            with pytest.raises(SourceControlError, match="not a git repository"):
                await adapter.current_revision()

    @pytest.mark.asyncio
    async def test_git_missing(self):
        adapter = GitAdapter()

        with patch("subprocess.run", side_effect=FileNotFoundError):
            with pytest.raises(SourceControlError, match="git executable not found"):
                await adapter.current_revision()

    @pytest.mark.asyncio
    async def test_timeout(self):
        adapter = GitAdapter()
        error = subprocess.TimeoutExpired(["git", "rev-parse", "HEAD"], 30)

        with patch("subprocess.run", side_effect=error):
            with pytest.raises(SourceControlError, match="timed out"):
                await adapter.current_revision()

    @pytest.mark.asyncio
    async def test_empty_output(self):
        adapter = GitAdapter()
        completed = MagicMock(stdout="\n", stderr="", returncode=0)

        with patch("subprocess.run", return_value=completed):
            with pytest.raises(SourceControlError, match="Unexpected output"):
                await adapter.current_revision()
