"""
Composition Root

Architectural Intent:
- Dependency injection composition root for bindeploy
- Single place where all adapters and use cases are wired together
- No adapter instantiation should occur outside this module

Design Decisions:
- Uses a simple dataclass container instead of a DI framework
- Factory function creates and wires all dependencies from DeployConfig
"""

from dataclasses import dataclass
from typing import Optional
from bindeploy.application.use_cases.activate_version import ActivateVersion
from bindeploy.application.use_cases.deploy_binary import DeployBinary
from bindeploy.application.use_cases.transfer_artifact import TransferArtifact
from bindeploy.domain.events.deployment_events import (
    DeploymentStartedEvent,
    DeploymentStageChangedEvent,
    DeploymentCompletedEvent,
    DeploymentFailedEvent,
)
from bindeploy.domain.services.content_hasher import ContentHasher
from bindeploy.domain.services.version_namer import VersionNamer
from bindeploy.infrastructure.adapters.fabric_adapter import FabricAdapter
from bindeploy.infrastructure.adapters.git_adapter import GitAdapter
from bindeploy.infrastructure.config import DeployConfig
from bindeploy.infrastructure.event_bus import EventBus, log_event
from bindeploy.infrastructure.telemetry.otel_exporter import OTELExporter, create_exporter


@dataclass
class BindeployContainer:
    """DI container holding all wired dependencies."""

    config: DeployConfig
    fabric_adapter: FabricAdapter
    git_adapter: GitAdapter
    hasher: ContentHasher
    namer: VersionNamer
    event_bus: EventBus
    telemetry: OTELExporter
    transfer: TransferArtifact
    activate: ActivateVersion
    deploy_binary: DeployBinary


def create_container(
    config: Optional[DeployConfig] = None,
    repo_path: Optional[str] = None,
) -> BindeployContainer:
    """Create and wire all dependencies."""
    config = config or DeployConfig()

    fabric_adapter = FabricAdapter(
        connect_timeout=config.ssh.connect_timeout,
        forward_agent=config.ssh.forward_agent,
    )
    git_adapter = GitAdapter(repo_path)
    hasher = ContentHasher(config.hashing.algorithm, config.hashing.chunk_size)
    namer = VersionNamer()

    event_bus = EventBus()
    for event_type in (
        DeploymentStartedEvent,
        DeploymentStageChangedEvent,
        DeploymentCompletedEvent,
        DeploymentFailedEvent,
    ):
        event_bus.subscribe(event_type, log_event)

    telemetry = create_exporter(
        endpoint=config.telemetry.endpoint,
        insecure=config.telemetry.insecure,
    )
    telemetry.subscribe(event_bus)

    transfer = TransferArtifact(fabric_adapter)
    activate = ActivateVersion(fabric_adapter, strategy=config.activation.strategy)
    deploy_binary = DeployBinary(
        hasher, git_adapter, namer, transfer, activate, event_bus=event_bus
    )

    return BindeployContainer(
        config=config,
        fabric_adapter=fabric_adapter,
        git_adapter=git_adapter,
        hasher=hasher,
        namer=namer,
        event_bus=event_bus,
        telemetry=telemetry,
        transfer=transfer,
        activate=activate,
        deploy_binary=deploy_binary,
    )
