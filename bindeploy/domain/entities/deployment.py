"""
Deployment Module

Architectural Intent:
- Deployment aggregate tracks one invocation through the linear pipeline
- Lifecycle managed through state transitions enforced by domain methods
- All state changes produce new instances to ensure auditability
- Domain events published for cross-context communication (logging, telemetry)

State machine:
    PENDING -> HASHING -> NAMING -> TRANSFERRING -> ACTIVATING -> COMPLETED
Any non-terminal state may move to FAILED. No state is re-entered.
"""

from __future__ import annotations
from enum import Enum, auto
from typing import Optional, Any
from bindeploy.domain.events.deployment_events import (
    DeploymentStartedEvent,
    DeploymentStageChangedEvent,
    DeploymentCompletedEvent,
    DeploymentFailedEvent,
)
from bindeploy.domain.value_objects.content_digest import ContentDigest
from bindeploy.domain.value_objects.remote_target import RemoteTarget
from bindeploy.domain.value_objects.version_name import RemoteVersionName


class DeploymentStatus(Enum):
    PENDING = auto()
    HASHING = auto()
    NAMING = auto()
    TRANSFERRING = auto()
    ACTIVATING = auto()
    COMPLETED = auto()
    FAILED = auto()

    @property
    def is_terminal(self) -> bool:
        return self in (DeploymentStatus.COMPLETED, DeploymentStatus.FAILED)


class Deployment:
    __slots__ = (
        "_target",
        "_binary_name",
        "_status",
        "_digest",
        "_version_name",
        "_artifact_path",
        "_failed_stage",
        "_error_message",
        "_domain_events",
    )

    def __init__(
        self,
        target: RemoteTarget,
        binary_name: str,
        status: DeploymentStatus = DeploymentStatus.PENDING,
        digest: Optional[ContentDigest] = None,
        version_name: Optional[RemoteVersionName] = None,
        artifact_path: Optional[str] = None,
        failed_stage: Optional[DeploymentStatus] = None,
        error_message: Optional[str] = None,
        domain_events: tuple = (),
    ):
        self._target = target
        self._binary_name = binary_name
        self._status = status
        self._digest = digest
        self._version_name = version_name
        self._artifact_path = artifact_path
        self._failed_stage = failed_stage
        self._error_message = error_message
        self._domain_events = domain_events

    @property
    def aggregate_id(self) -> str:
        return f"{self._binary_name}@{self._target}"

    @property
    def target(self) -> RemoteTarget:
        return self._target

    @property
    def binary_name(self) -> str:
        return self._binary_name

    @property
    def status(self) -> DeploymentStatus:
        return self._status

    @property
    def digest(self) -> Optional[ContentDigest]:
        return self._digest

    @property
    def version_name(self) -> Optional[RemoteVersionName]:
        return self._version_name

    @property
    def artifact_path(self) -> Optional[str]:
        return self._artifact_path

    @property
    def failed_stage(self) -> Optional[DeploymentStatus]:
        return self._failed_stage

    @property
    def error_message(self) -> Optional[str]:
        return self._error_message

    @property
    def domain_events(self) -> tuple:
        return self._domain_events

    def _evolve(self, event: Any, **changes: Any) -> "Deployment":
        state = {
            "target": self._target,
            "binary_name": self._binary_name,
            "status": self._status,
            "digest": self._digest,
            "version_name": self._version_name,
            "artifact_path": self._artifact_path,
            "failed_stage": self._failed_stage,
            "error_message": self._error_message,
        }
        state.update(changes)
        return Deployment(**state, domain_events=self._domain_events + (event,))

    def _advance(self, expected: DeploymentStatus, new: DeploymentStatus, **changes: Any) -> "Deployment":
        if self._status != expected:
            raise ValueError(
                f"Deployment must be {expected.name} to move to {new.name}, "
                f"is {self._status.name}"
            )
        event = DeploymentStageChangedEvent(
            aggregate_id=self.aggregate_id, stage=new.name
        )
        return self._evolve(event, status=new, **changes)

    def start(self) -> "Deployment":
        if self._status != DeploymentStatus.PENDING:
            raise ValueError("Deployment can only start from PENDING state")
        return self._evolve(
            DeploymentStartedEvent(
                aggregate_id=self.aggregate_id,
                target=str(self._target),
                binary_name=self._binary_name,
            ),
            status=DeploymentStatus.HASHING,
        )

    def hashed(self, digest: ContentDigest) -> "Deployment":
        return self._advance(
            DeploymentStatus.HASHING, DeploymentStatus.NAMING, digest=digest
        )

    def named(self, version_name: RemoteVersionName) -> "Deployment":
        return self._advance(
            DeploymentStatus.NAMING,
            DeploymentStatus.TRANSFERRING,
            version_name=version_name,
        )

    def transferred(self, artifact_path: str) -> "Deployment":
        return self._advance(
            DeploymentStatus.TRANSFERRING,
            DeploymentStatus.ACTIVATING,
            artifact_path=artifact_path,
        )

    def complete(self) -> "Deployment":
        if self._status != DeploymentStatus.ACTIVATING:
            raise ValueError("Deployment must be ACTIVATING to complete")
        return self._evolve(
            DeploymentCompletedEvent(
                aggregate_id=self.aggregate_id,
                version_name=str(self._version_name),
                binary_name=self._binary_name,
            ),
            status=DeploymentStatus.COMPLETED,
        )

    def fail(self, message: str) -> "Deployment":
        if self._status.is_terminal:
            raise ValueError(f"Deployment already {self._status.name}")
        return self._evolve(
            DeploymentFailedEvent(
                aggregate_id=self.aggregate_id,
                stage=self._status.name,
                binary_name=self._binary_name,
                error_message=message,
            ),
            status=DeploymentStatus.FAILED,
            failed_stage=self._status,
            error_message=message,
        )

    def __repr__(self) -> str:
        return (
            f"Deployment(target={self._target}, binary_name={self._binary_name}, "
            f"status={self._status}, version_name={self._version_name}, "
            f"error_message={self._error_message})"
        )
