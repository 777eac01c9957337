"""
Domain Ports Package

Architectural Intent:
- Contains port interfaces (abstract contracts) for external dependencies
- Ports define what the domain needs, adapters implement how
- Follows Hexagonal Architecture principles
"""

from bindeploy.domain.ports.remote_shell_port import RemoteShellPort, CommandResult
from bindeploy.domain.ports.source_control_port import SourceControlPort
from bindeploy.domain.ports.event_bus_port import EventBusPort

__all__ = [
    "RemoteShellPort",
    "CommandResult",
    "SourceControlPort",
    "EventBusPort",
]
