"""
Centralized Logging

Architectural Intent:
- Human-readable or structured JSON logging on stderr, under the
  "bindeploy" logger; stdout is reserved for command output
- Remote steps attach `target`, `step` and `command` through `extra=`;
  the JSON formatter lifts them into top-level keys
- paramiko's transport chatter is kept at WARNING unless debugging
"""

import json
import logging
import sys
from datetime import datetime, UTC
from typing import Optional, TextIO

CONTEXT_FIELDS = ("target", "step", "command", "exit_code")

HUMAN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per line, timestamped when the record was created."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in CONTEXT_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                entry[name] = value if isinstance(value, (int, float)) else str(value)
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def resolve_level(name: str, default: int = logging.WARNING) -> int:
    """Map a level name from config ("info", "DEBUG") to a logging level."""
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else default


def configure_logging(
    level: int = logging.INFO,
    json_format: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """Install a single handler on the "bindeploy" logger and return it.

    Calling it again replaces the previous handler, so the CLI can apply
    config and flags in any order.
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(JSONFormatter() if json_format else logging.Formatter(HUMAN_FORMAT))

    logger = logging.getLogger("bindeploy")
    logger.setLevel(level)
    logger.handlers.clear()
    logger.addHandler(handler)

    logging.getLogger("paramiko").setLevel(
        logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    )
    return handler
