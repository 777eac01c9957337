"""
Path Segment Validation

Architectural Intent:
- Components of a remote version name are used verbatim as a remote path
  segment, so they are validated instead of escaped
- Shared by value objects and domain services
"""

import re

# Letters, digits, dot, underscore, plus, hyphen; no leading '-' or '.'
_SEGMENT_RE = re.compile(r"^[A-Za-z0-9_+][A-Za-z0-9._+-]*$")


def is_safe_segment(value: str) -> bool:
    """True if value can be used as a single remote path segment."""
    return bool(value) and len(value) <= 255 and bool(_SEGMENT_RE.match(value))


def validate_segment(value: str, label: str) -> None:
    """Raises ValueError if value is not a safe path segment."""
    if not value:
        raise ValueError(f"{label} cannot be empty")
    if not is_safe_segment(value):
        raise ValueError(f"{label} is not a safe path segment: {value!r}")
