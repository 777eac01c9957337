"""
Remote Target Value Object

Architectural Intent:
- Immutable value object representing the SSH destination of a deployment
- Validates hostname format (DNS, IPv4, IPv6), port bounds, non-empty user
- Supports IPv6 bracket notation in parse() (e.g., user@[::1]:22)
"""

import getpass
import re
from dataclasses import dataclass

# RFC 1123 hostname: labels of alnum/hyphens, dot-separated
_HOSTNAME_RE = re.compile(
    r"^(?!-)[A-Za-z0-9-]{1,63}(?<!-)(\.[A-Za-z0-9-]{1,63})*$"
)

# Simple IPv4 pattern
_IPV4_RE = re.compile(
    r"^(\d{1,3})\.(\d{1,3})\.(\d{1,3})\.(\d{1,3})$"
)

# IPv6 pattern (simplified, accepts ::1, fe80::1, etc.)
_IPV6_RE = re.compile(r"^[0-9a-fA-F:]+$")


def _is_valid_hostname(host: str) -> bool:
    """Validate hostname as DNS name, IPv4, or IPv6."""
    if not host:
        return False

    m = _IPV4_RE.match(host)
    if m:
        return all(0 <= int(g) <= 255 for g in m.groups())

    if _IPV6_RE.match(host) and ":" in host:
        return True

    if _HOSTNAME_RE.match(host) and len(host) <= 253:
        return True

    return False


@dataclass(frozen=True)
class RemoteTarget:
    """
    Value Object representing the remote host a binary is deployed to.
    """
    host: str
    user: str
    port: int = 22

    def __post_init__(self) -> None:
        if not self.user:
            raise ValueError("Target user cannot be empty")
        if not (1 <= self.port <= 65535):
            raise ValueError(f"Port must be 1-65535, got {self.port}")
        if not _is_valid_hostname(self.host):
            raise ValueError(f"Invalid hostname: {self.host!r}")

    def __str__(self) -> str:
        host = f"[{self.host}]" if ":" in self.host else self.host
        if self.port == 22:
            return f"{self.user}@{host}"
        return f"{self.user}@{host}:{self.port}"

    @staticmethod
    def parse(connection_string: str) -> "RemoteTarget":
        """
        Parses 'user@host', 'user@host:port', 'user@[::1]:port' or a bare
        'host' (current local user) into a RemoteTarget.
        """
        host = connection_string.strip()
        if not host:
            raise ValueError("SSH target cannot be empty")

        port = 22
        if "@" in host:
            user, host = host.split("@", 1)
        else:
            user = getpass.getuser()

        if host.startswith("["):
            bracket_end = host.find("]")
            if bracket_end == -1:
                raise ValueError(f"Unterminated IPv6 bracket in: {connection_string}")
            remainder = host[bracket_end + 1:]
            host = host[1:bracket_end]
            if remainder.startswith(":"):
                port = int(remainder[1:])
        elif host.count(":") == 1:
            host, port_str = host.split(":", 1)
            try:
                port = int(port_str)
            except ValueError:
                raise ValueError(f"Invalid port in: {connection_string}")

        return RemoteTarget(host=host, user=user, port=port)
