"""
Transfer Artifact Use Case

Architectural Intent:
- Ensures the remote versions/ directory exists, then copies the local
  artifact into it under its version name
- No retry and no cleanup: the store is append-only and a half-copied file
  under a unique name is never activated
"""

import logging
from pathlib import Path
from typing import Union
from bindeploy.application.use_cases.remote_steps import run_step
from bindeploy.domain.exceptions import RemoteCommandError
from bindeploy.domain.ports.remote_shell_port import RemoteShellPort
from bindeploy.domain.services import remote_commands
from bindeploy.domain.value_objects.remote_layout import RemoteLayout
from bindeploy.domain.value_objects.remote_target import RemoteTarget
from bindeploy.domain.value_objects.version_name import RemoteVersionName

logger = logging.getLogger(__name__)


class TransferArtifact:
    def __init__(self, remote_shell: RemoteShellPort):
        self.remote_shell = remote_shell

    async def ensure_versions_dir(self, target: RemoteTarget, layout: RemoteLayout) -> None:
        """Idempotent: succeeds silently when the directory already exists."""
        await run_step(
            self.remote_shell,
            target,
            "create versions directory",
            remote_commands.make_dirs(layout.versions_dir),
        )

    async def execute(
        self,
        target: RemoteTarget,
        layout: RemoteLayout,
        local_path: Union[str, Path],
        version_name: RemoteVersionName,
    ) -> str:
        await self.ensure_versions_dir(target, layout)

        remote_path = layout.artifact_path(version_name)
        logger.info("Copying %s to %s:%s", local_path, target, remote_path)
        try:
            await self.remote_shell.put(target, str(local_path), remote_path)
        except OSError as e:
            raise RemoteCommandError(
                "copy artifact", f"{local_path} -> {target}:{remote_path}: {e}"
            ) from e
        return remote_path
