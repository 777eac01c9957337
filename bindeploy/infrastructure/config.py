"""
Configuration Module

Architectural Intent:
- Centralized configuration loading from a JSON file
- Provides typed access to all bindeploy settings
- Falls back to sensible defaults when config file is absent
- Environment variables override file-based config

Design Decisions:
- Config is a frozen dataclass for immutability after load
- Nested config sections map to sub-dataclasses
- CLI flags override the loaded config at the call site
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import dataclasses
import json
import logging
import os

from bindeploy.application.dtos.deployment_dtos import (
    DEFAULT_BUILD_DIR,
    DEFAULT_RESTART_TEMPLATE,
)
from bindeploy.domain.services.content_hasher import (
    DEFAULT_ALGORITHM,
    DEFAULT_CHUNK_SIZE,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildConfig:
    """Local build output location."""
    output_dir: str = DEFAULT_BUILD_DIR


@dataclass(frozen=True)
class HashingConfig:
    """Content hasher settings."""
    algorithm: str = DEFAULT_ALGORITHM
    chunk_size: int = DEFAULT_CHUNK_SIZE


@dataclass(frozen=True)
class SSHConfig:
    """SSH transport settings."""
    connect_timeout: int = 30
    forward_agent: bool = False


@dataclass(frozen=True)
class ActivationConfig:
    """Activation link and restart settings."""
    strategy: str = "replace"  # "replace" or "rename"
    restart_template: str = DEFAULT_RESTART_TEMPLATE


@dataclass(frozen=True)
class TelemetryConfig:
    """OpenTelemetry configuration."""
    endpoint: str = ""
    insecure: bool = False


@dataclass(frozen=True)
class DeployConfig:
    """Root configuration for bindeploy."""
    build: BuildConfig = field(default_factory=BuildConfig)
    hashing: HashingConfig = field(default_factory=HashingConfig)
    ssh: SSHConfig = field(default_factory=SSHConfig)
    activation: ActivationConfig = field(default_factory=ActivationConfig)
    telemetry: TelemetryConfig = field(default_factory=TelemetryConfig)
    log_level: str = "WARNING"

    def restart_command_for(self, binary_name: str) -> str:
        """Raises ValueError if the template uses fields other than {binary_name}."""
        template = self.activation.restart_template
        try:
            return template.format(binary_name=binary_name)
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(
                f"Invalid restart_template {template!r}: only {{binary_name}} "
                f"may be substituted, literal braces must be doubled ({e!r})"
            ) from e


def _env_override(data: dict, prefix: str = "BINDEPLOY") -> dict:
    """Override config values with environment variables.

    Environment variables follow the pattern BINDEPLOY_SECTION_KEY.
    For example: BINDEPLOY_BUILD_OUTPUT_DIR=./dist, BINDEPLOY_LOG_LEVEL=INFO.
    The section is split off at the first underscore after the prefix; a
    name matching a top-level field (log_level) is taken whole.
    """
    top_level = {f.name for f in dataclasses.fields(DeployConfig)
                 if f.type == "str"}
    for key, value in os.environ.items():
        if not key.startswith(f"{prefix}_"):
            continue
        name = key[len(prefix) + 1:].lower()
        if name in top_level:
            data[name] = value
            continue
        parts = name.split("_", 1)
        if len(parts) == 2:
            section, field_name = parts
            if not isinstance(data.get(section), dict):
                data[section] = {}
            data[section][field_name] = value
    return data


def _parse_config_file(path: Path) -> dict:
    """Parse a JSON config file. Returns empty dict on failure."""
    try:
        with open(path) as f:
            return json.load(f)
    except FileNotFoundError:
        logger.debug("Config file not found: %s", path)
        return {}
    except json.JSONDecodeError as e:
        logger.warning("Invalid config file %s: %s", path, e)
        return {}


def _build_sub_config(cls, data: dict):
    """Build a sub-config dataclass from a dict, ignoring unknown keys."""
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in data.items() if k in valid_fields}

    # Convert string numbers to int/bool
    for f in dataclasses.fields(cls):
        if f.name in filtered and isinstance(filtered[f.name], str):
            if f.type == "int":
                filtered[f.name] = int(filtered[f.name])
            elif f.type == "bool":
                filtered[f.name] = filtered[f.name].lower() in ("true", "1", "yes")

    return cls(**filtered)


def load_config(
    path: Optional[str] = None,
    env_prefix: str = "BINDEPLOY",
) -> DeployConfig:
    """Load configuration from file and environment variables.

    Priority (highest to lowest):
    1. Environment variables (BINDEPLOY_SECTION_KEY)
    2. Config file values
    3. Defaults

    Args:
        path: Path to config file (JSON). Defaults to bindeploy.json in CWD.
        env_prefix: Environment variable prefix. Defaults to BINDEPLOY.
    """
    config_path = Path(path) if path else Path("bindeploy.json")
    data = _parse_config_file(config_path)
    data = _env_override(data, env_prefix)

    return DeployConfig(
        build=_build_sub_config(BuildConfig, data.get("build", {})),
        hashing=_build_sub_config(HashingConfig, data.get("hashing", {})),
        ssh=_build_sub_config(SSHConfig, data.get("ssh", {})),
        activation=_build_sub_config(ActivationConfig, data.get("activation", {})),
        telemetry=_build_sub_config(TelemetryConfig, data.get("telemetry", {})),
        log_level=data.get("log_level", "WARNING"),
    )
