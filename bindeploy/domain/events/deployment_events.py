"""
Deployment Domain Events

Published by the DeployBinary use case once a deployment reaches a
terminal state, in the order they were raised.
"""

from dataclasses import dataclass
from typing import Any
from bindeploy.domain.events.event_base import DomainEvent


@dataclass(frozen=True)
class DeploymentStartedEvent(DomainEvent):
    target: str = ""
    binary_name: str = ""


@dataclass(frozen=True)
class DeploymentStageChangedEvent(DomainEvent):
    stage: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "stage": self.stage}


@dataclass(frozen=True)
class DeploymentCompletedEvent(DomainEvent):
    version_name: str = ""
    binary_name: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "version_name": self.version_name}


@dataclass(frozen=True)
class DeploymentFailedEvent(DomainEvent):
    stage: str = ""
    binary_name: str = ""
    error_message: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "stage": self.stage,
            "error_message": self.error_message,
        }
