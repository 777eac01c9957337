"""
Deploy Binary Use Case

Architectural Intent:
- Orchestrates one deployment: hash -> commit id -> name -> transfer -> activate
- Strictly linear; each step is awaited before the next begins
- Short-circuits on the first failure and re-raises it unchanged
- Records progress on the Deployment aggregate and publishes its events
"""

import asyncio
import logging
from typing import Optional
from bindeploy.application.dtos.deployment_dtos import (
    DeploymentRequest,
    DeploymentResponse,
)
from bindeploy.application.use_cases.activate_version import ActivateVersion
from bindeploy.application.use_cases.transfer_artifact import TransferArtifact
from bindeploy.domain.entities.deployment import Deployment
from bindeploy.domain.ports.event_bus_port import EventBusPort
from bindeploy.domain.ports.source_control_port import SourceControlPort
from bindeploy.domain.services.content_hasher import ContentHasher
from bindeploy.domain.services.version_namer import VersionNamer
from bindeploy.domain.value_objects.remote_layout import RemoteLayout
from bindeploy.domain.value_objects.remote_target import RemoteTarget

logger = logging.getLogger(__name__)


class DeployBinary:
    def __init__(
        self,
        hasher: ContentHasher,
        source_control: SourceControlPort,
        namer: VersionNamer,
        transfer: TransferArtifact,
        activate: ActivateVersion,
        event_bus: Optional[EventBusPort] = None,
    ):
        self.hasher = hasher
        self.source_control = source_control
        self.namer = namer
        self.transfer = transfer
        self.activate = activate
        self.event_bus = event_bus

    async def execute(self, request: DeploymentRequest) -> DeploymentResponse:
        target = RemoteTarget.parse(request.server_ssh)
        layout = RemoteLayout(request.server_path, request.binary_name)
        local_path = request.output_file_path
        logger.debug("Deploying %s", request)

        deployment = Deployment(target=target, binary_name=request.binary_name).start()

        try:
            logger.info("Hashing %s", local_path)
            loop = asyncio.get_running_loop()
            digest = await loop.run_in_executor(None, self.hasher.hash_file, local_path)
            deployment = deployment.hashed(digest)

            commit = await self.source_control.current_revision()
            version_name = self.namer.name(request.binary_name, commit, digest)
            logger.info("Remote version name: %s", version_name)
            deployment = deployment.named(version_name)

            artifact_path = await self.transfer.execute(
                target, layout, local_path, version_name
            )
            deployment = deployment.transferred(artifact_path)

            await self.activate.execute(
                target, layout, version_name, request.resolved_restart_command
            )
            deployment = deployment.complete()
        except Exception as e:
            stage = deployment.status.name
            deployment = deployment.fail(str(e))
            logger.error("Deployment failed during %s: %s", stage, e)
            await self._publish(deployment)
            raise

        await self._publish(deployment)
        return DeploymentResponse(
            version_name=str(version_name),
            artifact_path=artifact_path,
            link_path=layout.link_path,
            target=str(target),
        )

    async def _publish(self, deployment: Deployment) -> None:
        if self.event_bus is not None:
            await self.event_bus.publish(list(deployment.domain_events))
