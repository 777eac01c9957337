"""
Fabric Adapter

Architectural Intent:
- Infrastructure adapter implementing RemoteShellPort via Fabric/SSH
- Runs remote commands and copies artifacts over SFTP
- Blocking Fabric calls run in the default executor

Security:
- SSH connections use connect_timeout, allow_agent, look_for_keys
- Authentication relies on pre-configured keys/agent; no passwords handled
"""

import asyncio
import logging
from typing import Callable, TypeVar
from fabric import Connection
from paramiko.ssh_exception import SSHException
from bindeploy.domain.ports.remote_shell_port import RemoteShellPort, CommandResult
from bindeploy.domain.value_objects.remote_target import RemoteTarget

logger = logging.getLogger(__name__)

T = TypeVar("T")


def sftp_path(remote_path: str) -> str:
    """SFTP resolves relative paths against the login directory but does
    not expand '~', so '~/x' becomes 'x'."""
    if remote_path == "~":
        return "."
    if remote_path.startswith("~/"):
        return remote_path[2:]
    return remote_path


class FabricAdapter(RemoteShellPort):
    """Adapter implementing RemoteShellPort via Fabric/SSH."""

    def __init__(self, connect_timeout: int = 30, forward_agent: bool = False):
        self.connect_timeout = connect_timeout
        self.forward_agent = forward_agent

    def _get_connection(self, target: RemoteTarget) -> Connection:
        return Connection(
            host=target.host,
            user=target.user,
            port=target.port,
            connect_timeout=self.connect_timeout,
            forward_agent=self.forward_agent,
            connect_kwargs={
                "allow_agent": True,
                "look_for_keys": True,
            },
        )

    async def _with_connection(
        self, target: RemoteTarget, fn: Callable[[Connection], T]
    ) -> T:
        def _call() -> T:
            conn = self._get_connection(target)
            try:
                return fn(conn)
            except (SSHException, EOFError) as e:
                raise ConnectionError(f"SSH session to {target} failed: {e}") from e
            finally:
                conn.close()

        return await asyncio.get_running_loop().run_in_executor(None, _call)

    async def run(self, target: RemoteTarget, command: str) -> CommandResult:
        def _run(conn: Connection) -> CommandResult:
            result = conn.run(command, hide=True, warn=True, in_stream=False)
            return CommandResult(
                exit_code=result.exited,
                stdout=result.stdout,
                stderr=result.stderr,
            )

        try:
            return await self._with_connection(target, _run)
        except ConnectionError:
            raise
        except OSError as e:
            # socket-level failures: refused, unreachable, timed out
            raise ConnectionError(f"Cannot reach {target}: {e}") from e

    async def put(self, target: RemoteTarget, local_path: str, remote_path: str) -> None:
        def _put(conn: Connection) -> None:
            conn.put(local_path, remote=sftp_path(remote_path))
            logger.debug("Uploaded %s to %s:%s", local_path, target, remote_path)

        await self._with_connection(target, _put)
