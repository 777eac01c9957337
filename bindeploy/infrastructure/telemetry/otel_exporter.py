"""
OpenTelemetry Exporter for bindeploy

Architectural Intent:
- Exports deployment outcome metrics to OTLP-compatible backends
- Subscribes to deployment domain events on the event bus
- Disabled unless an endpoint is configured

Security:
- Endpoint defaults to empty string (must be explicitly configured)
- Non-localhost http:// endpoints rejected unless insecure=True
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Any
from urllib.parse import urlparse
import logging
from datetime import datetime, UTC

from bindeploy.domain.events.deployment_events import (
    DeploymentCompletedEvent,
    DeploymentFailedEvent,
)
from bindeploy.domain.ports.event_bus_port import EventBusPort

logger = logging.getLogger(__name__)


@dataclass
class OTELConfig:
    endpoint: str = ""
    service_name: str = "bindeploy"
    insecure: bool = False

    def __post_init__(self) -> None:
        if self.endpoint:
            parsed = urlparse(self.endpoint)
            is_localhost = parsed.hostname in ("localhost", "127.0.0.1", "::1")
            if parsed.scheme == "http" and not is_localhost and not self.insecure:
                raise ValueError(
                    f"Non-localhost HTTP endpoint '{self.endpoint}' requires "
                    "insecure=True or use https://. "
                    "Set insecure=True to explicitly allow plaintext export."
                )


class OTELExporter:
    """
    Records one counter increment per finished deployment.

    Metrics are buffered locally regardless of SDK availability so that
    the outcome of a run can be inspected in tests and debug output.
    """

    def __init__(self, config: OTELConfig):
        self.config = config
        self._initialized = False
        self._metrics_buffer: list[dict[str, Any]] = []
        self._meter: Any = None
        self._provider: Any = None
        self._counters: dict[str, Any] = {}

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def buffered_metrics(self) -> list[dict[str, Any]]:
        return list(self._metrics_buffer)

    def initialize(self) -> None:
        """Initialize OpenTelemetry SDK and the OTLP metric exporter."""
        if not self.config.endpoint:
            logger.debug("OTEL endpoint not configured, telemetry disabled")
            return

        try:
            from opentelemetry import metrics
            from opentelemetry.sdk.metrics import MeterProvider
            from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
            from opentelemetry.sdk.resources import Resource, SERVICE_NAME
            from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import (
                OTLPMetricExporter,
            )
        except ImportError:
            logger.warning("OpenTelemetry SDK not installed, telemetry disabled")
            return

        resource = Resource(attributes={SERVICE_NAME: self.config.service_name})
        reader = PeriodicExportingMetricReader(
            OTLPMetricExporter(endpoint=self.config.endpoint, insecure=self.config.insecure)
        )
        self._provider = MeterProvider(resource=resource, metric_readers=[reader])
        metrics.set_meter_provider(self._provider)
        self._meter = metrics.get_meter(__name__)
        self._initialized = True

    def _get_counter(self, name: str) -> Any:
        if name not in self._counters and self._meter:
            self._counters[name] = self._meter.create_counter(name)
        return self._counters.get(name)

    def record_metric(
        self,
        name: str,
        value: float,
        attributes: Optional[dict[str, str]] = None,
    ) -> None:
        """Record a counter increment."""
        self._metrics_buffer.append(
            {
                "name": name,
                "value": value,
                "attributes": attributes or {},
                "timestamp": datetime.now(UTC).isoformat(),
            }
        )

        if self._initialized:
            counter = self._get_counter(name)
            if counter:
                counter.add(value, attributes=attributes or {})

    async def on_completed(self, event: DeploymentCompletedEvent) -> None:
        self.record_metric(
            "bindeploy.deploy.completed",
            1,
            attributes={"binary_name": event.binary_name},
        )

    async def on_failed(self, event: DeploymentFailedEvent) -> None:
        self.record_metric(
            "bindeploy.deploy.failed",
            1,
            attributes={"binary_name": event.binary_name, "stage": event.stage},
        )

    def subscribe(self, event_bus: EventBusPort) -> None:
        event_bus.subscribe(DeploymentCompletedEvent, self.on_completed)
        event_bus.subscribe(DeploymentFailedEvent, self.on_failed)

    def shutdown(self) -> None:
        """Flush pending metrics; the process exits right after a deploy."""
        if self._provider is not None:
            self._provider.shutdown()
            self._provider = None
            self._initialized = False


def create_exporter(
    endpoint: Optional[str] = None,
    insecure: bool = False,
    service_name: str = "bindeploy",
) -> OTELExporter:
    """Factory function to create OTEL exporter."""
    config = OTELConfig(
        endpoint=endpoint or "",
        service_name=service_name,
        insecure=insecure,
    )
    exporter = OTELExporter(config)
    exporter.initialize()
    return exporter
