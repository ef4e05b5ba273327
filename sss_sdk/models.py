"""
Data models for SSS SDK
"""

from dataclasses import dataclass

from .errors import InvalidArgumentError

MIN_SHARES = 3
MAX_SHARES = 255
MIN_THRESHOLD = 2
MAX_THRESHOLD = 255
MAX_INDEX = 255


@dataclass(frozen=True)
class Share:
    """
    One participant's share of a secret.

    ``index`` is the x-coordinate the share was sampled at (1-255; 0 is the
    secret itself) and ``value`` holds one y-coordinate per secret byte.
    """
    index: int
    value: bytes

    def __post_init__(self):
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            raise InvalidArgumentError(f"Share index must be an int, got {self.index!r}")
        if not 1 <= self.index <= MAX_INDEX:
            raise InvalidArgumentError(f"Share index should be 1-{MAX_INDEX}, got {self.index}")
        if not isinstance(self.value, (bytes, bytearray, memoryview)):
            raise InvalidArgumentError("Share value must be bytes")
        # normalize so the share stays immutable
        object.__setattr__(self, "value", bytes(self.value))

    def __str__(self) -> str:
        return f"{self.index}:{self.value.hex()}"


@dataclass
class SharingConfig:
    """Configuration for splitting a secret"""
    threshold: int = 2
    total_shares: int = 3

    def validate(self) -> None:
        """Raise InvalidArgumentError unless MIN <= threshold <= total_shares <= MAX"""
        if not MIN_SHARES <= self.total_shares <= MAX_SHARES:
            raise InvalidArgumentError(f"n should be {MIN_SHARES}-{MAX_SHARES}")
        if not MIN_THRESHOLD <= self.threshold <= MAX_THRESHOLD:
            raise InvalidArgumentError(f"k should be {MIN_THRESHOLD}-{MAX_THRESHOLD}")
        if self.threshold > self.total_shares:
            raise InvalidArgumentError("n should be larger than or equal to k")
