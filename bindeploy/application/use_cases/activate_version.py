"""
Activate Version Use Case

Architectural Intent:
- Repoints {server_path}/{binary_name} at a transferred artifact, marks it
  executable and restarts the service
- Each sub-step is a separate remote command; the first failure aborts the
  rest, so the restart never runs against a broken link
- No automatic rollback: a failure may leave the link missing

Strategies:
- "replace": rm -f link, then ln -s. Leaves a short window with no link.
- "rename":  ln -sfn to a temporary name, then mv -T over the link, which is
             an atomic rename on typical filesystems.
"""

import logging
from bindeploy.application.use_cases.remote_steps import run_step
from bindeploy.domain.ports.remote_shell_port import RemoteShellPort
from bindeploy.domain.services import remote_commands
from bindeploy.domain.value_objects.remote_layout import RemoteLayout
from bindeploy.domain.value_objects.remote_target import RemoteTarget
from bindeploy.domain.value_objects.version_name import RemoteVersionName

logger = logging.getLogger(__name__)

STRATEGIES = ("replace", "rename")


class ActivateVersion:
    def __init__(self, remote_shell: RemoteShellPort, strategy: str = "replace"):
        if strategy not in STRATEGIES:
            raise ValueError(
                f"Unknown activation strategy {strategy!r}, expected one of {STRATEGIES}"
            )
        self.remote_shell = remote_shell
        self.strategy = strategy

    def plan(
        self,
        layout: RemoteLayout,
        version_name: RemoteVersionName,
        restart_command: str,
    ) -> list[tuple[str, str]]:
        """Ordered (step, command) pairs this activation will run."""
        artifact = layout.artifact_path(version_name)
        link = layout.link_path

        if self.strategy == "rename":
            tmp_link = f"{link}.tmp-{version_name}"
            steps = [
                ("create temporary link", remote_commands.create_link_forced(artifact, tmp_link)),
                ("swap activation link", remote_commands.rename_over(tmp_link, link)),
            ]
        else:
            steps = [
                ("remove activation link", remote_commands.remove_link(link)),
                ("create activation link", remote_commands.create_link(artifact, link)),
            ]

        steps.append(("mark executable", remote_commands.make_executable(link)))
        steps.append(("restart service", remote_commands.detached(restart_command)))
        return steps

    async def execute(
        self,
        target: RemoteTarget,
        layout: RemoteLayout,
        version_name: RemoteVersionName,
        restart_command: str,
    ) -> None:
        if not restart_command:
            raise ValueError("restart_command cannot be empty")

        for step, command in self.plan(layout, version_name, restart_command):
            await run_step(self.remote_shell, target, step, command)
        logger.info("Activated %s on %s", version_name, target)
