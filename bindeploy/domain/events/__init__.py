"""
Domain Events Package

Architectural Intent:
- Contains domain events raised by the Deployment aggregate
- Events are the primary mechanism for cross-boundary communication
"""

from bindeploy.domain.events.event_base import DomainEvent
from bindeploy.domain.events.deployment_events import (
    DeploymentStartedEvent,
    DeploymentStageChangedEvent,
    DeploymentCompletedEvent,
    DeploymentFailedEvent,
)

__all__ = [
    "DomainEvent",
    "DeploymentStartedEvent",
    "DeploymentStageChangedEvent",
    "DeploymentCompletedEvent",
    "DeploymentFailedEvent",
]
