"""
(K, N)-threshold Shamir's Secret Sharing over GF(2^8)

Each secret byte is the constant term of its own random polynomial of degree
K - 1; share i carries the value of every such polynomial at x = i.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from .errors import InvalidArgumentError
from .finite_field import GF256, default_field
from .matrix import GF256Matrix
from .models import MAX_INDEX, Share, SharingConfig
from .polynomial import GF256Polynomial, Point, RandomSource

logger = logging.getLogger(__name__)


def split(
    secret: bytes,
    k: int,
    n: int,
    field: Optional[GF256] = None,
    random_source: Optional[RandomSource] = None
) -> List[Share]:
    """
    Split secret into n shares, any k of which reconstruct it.

    Args:
        secret: Secret bytes to split
        k: Threshold, 2-255
        n: Number of shares, 3-255 and not less than k
        field: GF(2^8) implementation
        random_source: Callable returning n secure random bytes,
            default ``secrets.token_bytes``

    Returns:
        n shares with indices 1..n
    """
    SharingConfig(threshold=k, total_shares=n).validate()
    if secret is None:
        raise InvalidArgumentError("secret should not be None")
    if not isinstance(secret, (bytes, bytearray, memoryview)):
        raise InvalidArgumentError("secret must be bytes")
    if len(secret) == 0:
        raise InvalidArgumentError("secret should not be empty")

    field = field or default_field()
    degree = k - 1
    share_values = [bytearray(len(secret)) for _ in range(n)]

    for offset, secret_byte in enumerate(bytes(secret)):
        polynomial = GF256Polynomial.random(degree, secret_byte, random_source, field)
        for x in range(1, n + 1):
            share_values[x - 1][offset] = polynomial.evaluate(x)

    logger.debug("Split %d-byte secret into %d shares (threshold %d)", len(secret), n, k)
    return [Share(x, bytes(value)) for x, value in enumerate(share_values, start=1)]


def _validate_shares(shares: Optional[Iterable[Share]]) -> List[Share]:
    if shares is None:
        raise InvalidArgumentError("shares should not be None")

    shares = list(shares)
    if not shares:
        raise InvalidArgumentError("shares should not be empty")

    share_length = len(shares[0].value)
    if any(len(share.value) != share_length for share in shares):
        raise InvalidArgumentError(
            "All shares must have the same length",
            details={"lengths": {share.index: len(share.value) for share in shares}}
        )
    return shares


def _points_at(shares: Sequence[Share], offset: int) -> List[Point]:
    return [Point(share.index, share.value[offset]) for share in shares]


def combine(shares: Iterable[Share], field: Optional[GF256] = None) -> bytes:
    """
    Reconstruct secret from shares

    The share format records no threshold, so supplying fewer than k shares
    is not detected: the result is deterministic but generally not the
    secret.

    Args:
        shares: Shares from a single split, unique indices
        field: GF(2^8) implementation

    Returns:
        Reconstructed secret bytes
    """
    shares = _validate_shares(shares)
    field = field or default_field()

    secret = bytes(
        GF256Polynomial.interpolate(_points_at(shares, offset), 0, field)
        for offset in range(len(shares[0].value))
    )

    logger.debug("Combined %d shares %s", len(shares), [share.index for share in shares])
    return secret


def _polynomial_from_points(points: Sequence[Point], field: GF256) -> GF256Polynomial:
    """Recover the polynomial through points exactly"""
    solution = GF256Matrix.from_points(points, field).solve().last_column()
    # solution is in descending-degree order
    return GF256Polynomial(solution[::-1], field)


def issue(shares: Iterable[Share], new_index: int, field: Optional[GF256] = None) -> Share:
    """
    Issue an additional share of the secret behind shares.

    The split polynomials are rebuilt from the supplied points, so the
    supplied shares must number at least the split threshold; with fewer
    the rebuilt polynomial has too low a degree and the new share is wrong.

    Args:
        shares: Existing shares from a single split
        new_index: Index for the new share, 1-255, not already used
        field: GF(2^8) implementation

    Returns:
        New share; the input collection is left untouched
    """
    if shares is None:
        raise InvalidArgumentError("shares should not be None")
    shares = list(shares)
    if not shares:
        raise InvalidArgumentError("shares should not be empty")
    if isinstance(new_index, bool) or not isinstance(new_index, int) or new_index <= 0:
        raise InvalidArgumentError("index should be larger than 0")
    if new_index > MAX_INDEX:
        raise InvalidArgumentError(f"index should not exceed {MAX_INDEX}")

    field = field or default_field()
    secret = combine(shares, field)

    if any(share.index == new_index for share in shares):
        raise InvalidArgumentError(
            "index already exists", details={"index": new_index}
        )

    value = bytearray(len(secret))
    for offset in range(len(secret)):
        polynomial = _polynomial_from_points(_points_at(shares, offset), field)
        value[offset] = polynomial.evaluate(new_index)

    logger.debug("Issued share %d from %d shares", new_index, len(shares))
    return Share(new_index, bytes(value))


class ShamirSecretSharing:
    """
    Shamir's Secret Sharing bound to fixed threshold parameters
    """

    def __init__(
        self,
        threshold: int,
        total_shares: int,
        field: Optional[GF256] = None,
        random_source: Optional[RandomSource] = None
    ):
        """
        Initialize Shamir's Secret Sharing

        Args:
            threshold: Minimum number of shares needed to reconstruct
            total_shares: Total number of shares to create
            field: GF(2^8) implementation
            random_source: Secure random byte source for split
        """
        self.config = SharingConfig(threshold=threshold, total_shares=total_shares)
        self.config.validate()
        self.field = field or default_field()
        self.random_source = random_source

    @property
    def threshold(self) -> int:
        return self.config.threshold

    @property
    def total_shares(self) -> int:
        return self.config.total_shares

    def split_secret(self, secret: bytes) -> List[Share]:
        return split(secret, self.threshold, self.total_shares, self.field, self.random_source)

    def reconstruct_secret(self, shares: Iterable[Share]) -> bytes:
        """
        Reconstruct secret from shares

        Unlike ``combine``, refuses fewer than ``threshold`` shares, since the
        threshold is known here.
        """
        shares = list(shares)
        if len(shares) < self.threshold:
            raise InvalidArgumentError(f"Need at least {self.threshold} shares, got {len(shares)}")
        return combine(shares, self.field)

    def issue_share(self, shares: Iterable[Share], new_index: int) -> Share:
        """Issue a new share, refusing fewer than ``threshold`` shares"""
        shares = list(shares)
        if len(shares) < self.threshold:
            raise InvalidArgumentError(f"Need at least {self.threshold} shares, got {len(shares)}")
        return issue(shares, new_index, self.field)


def split_secret_bytes(secret: bytes, threshold: int, total_shares: int) -> List[Tuple[int, bytes]]:
    """
    Convenience function to split secret bytes

    Args:
        secret: Secret bytes to split
        threshold: Minimum shares needed to reconstruct
        total_shares: Total number of shares to create

    Returns:
        List of (share_id, share_bytes) tuples
    """
    return [(share.index, share.value) for share in split(secret, threshold, total_shares)]


def reconstruct_secret_bytes(shares: Iterable[Tuple[int, bytes]]) -> bytes:
    """
    Convenience function to reconstruct secret bytes

    Args:
        shares: List of (share_id, share_bytes) tuples

    Returns:
        Reconstructed secret bytes
    """
    return combine(Share(index, value) for index, value in shares)
