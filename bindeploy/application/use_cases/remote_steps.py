"""
Remote Step Helper

Architectural Intent:
- Runs one discrete remote operation and maps any failure to
  RemoteCommandError tagged with the step that broke
- Shared by TransferArtifact and ActivateVersion
"""

import logging
from bindeploy.domain.exceptions import RemoteCommandError
from bindeploy.domain.ports.remote_shell_port import RemoteShellPort, CommandResult
from bindeploy.domain.value_objects.remote_target import RemoteTarget

logger = logging.getLogger(__name__)


async def run_step(
    remote_shell: RemoteShellPort,
    target: RemoteTarget,
    step: str,
    command: str,
) -> CommandResult:
    context = {"target": str(target), "step": step, "command": command}
    logger.debug("[%s] %s: %s", target, step, command, extra=context)
    try:
        result = await remote_shell.run(target, command)
    except ConnectionError as e:
        raise RemoteCommandError(step, str(e), command=command) from e

    if not result.ok:
        logger.error(
            "[%s] %s exited %d: %s", target, step, result.exit_code, result.stderr,
            extra={**context, "exit_code": result.exit_code},
        )
        raise RemoteCommandError(
            step,
            f"remote command returned non-zero status on {target}",
            command=command,
            exit_code=result.exit_code,
            stderr=result.stderr,
        )
    return result
