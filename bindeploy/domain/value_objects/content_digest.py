from dataclasses import dataclass
import re

@dataclass(frozen=True)
class ContentDigest:
    """
    Value Object representing the hex digest of an artifact's byte content.
    Ensures that the digest format is valid.
    """
    value: str

    def __post_init__(self):
        if not self._is_valid(self.value):
            raise ValueError(f"Invalid content digest format: {self.value}")

    @staticmethod
    def _is_valid(value: str) -> bool:
        # Lowercase hex, at least 8 chars (short test digests included)
        return bool(re.match(r'^[0-9a-f]{8,128}$', value))

    def __str__(self):
        return self.value
