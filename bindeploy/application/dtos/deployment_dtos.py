"""
Deployment DTOs

Architectural Intent:
- Data Transfer Objects for the deploy use case boundary
- Input validation at the application boundary
- Decouples CLI arguments from the domain model
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_BUILD_DIR = "./target/x86_64-unknown-linux-musl/release"
DEFAULT_RESTART_TEMPLATE = "systemctl restart {binary_name}"


@dataclass(frozen=True)
class DeploymentRequest:
    server_ssh: str
    server_path: str
    binary_name: str
    restart_command: Optional[str] = None
    build_dir: str = DEFAULT_BUILD_DIR

    def __post_init__(self) -> None:
        if not self.server_ssh:
            raise ValueError("server_ssh cannot be empty")
        if not self.server_path:
            raise ValueError("server_path cannot be empty")
        if not self.binary_name:
            raise ValueError("binary_name cannot be empty")

    @property
    def resolved_restart_command(self) -> str:
        if self.restart_command:
            return self.restart_command
        return DEFAULT_RESTART_TEMPLATE.format(binary_name=self.binary_name)

    @property
    def output_file_path(self) -> Path:
        return Path(self.build_dir) / self.binary_name


@dataclass(frozen=True)
class DeploymentResponse:
    version_name: str
    artifact_path: str
    link_path: str
    target: str
