"""
Polynomials over GF(2^8)
"""

import secrets
from typing import Callable, NamedTuple, Optional, Sequence, Tuple

from .errors import InvalidArgumentError
from .finite_field import GF256, default_field

RandomSource = Callable[[int], bytes]


class Point(NamedTuple):
    """A sample (x, y) of a polynomial"""
    x: int
    y: int


class GF256Polynomial:
    """
    Polynomial a0 + a1*x + ... + ad*x^d with coefficients in GF(2^8).

    Coefficients are stored in ascending-degree order.
    """

    def __init__(self, coefficients: Sequence[int], field: Optional[GF256] = None):
        """
        Initialize polynomial from explicit coefficients.

        Args:
            coefficients: Coefficients a0..ad (ascending degree)
            field: GF(2^8) implementation, default table-backed
        """
        if not coefficients:
            raise InvalidArgumentError("Polynomial needs at least one coefficient")

        self.field = field or default_field()
        self._coefficients = tuple(coefficients)

    @classmethod
    def random(
        cls,
        degree: int,
        intercept: int,
        random_source: Optional[RandomSource] = None,
        field: Optional[GF256] = None
    ) -> 'GF256Polynomial':
        """
        Generate a polynomial with fixed intercept and random higher coefficients.

        Args:
            degree: Degree of the polynomial (K - 1)
            intercept: Constant term, the secret byte
            random_source: Callable returning n uniformly random bytes
            field: GF(2^8) implementation

        Returns:
            New polynomial with degree + 1 coefficients
        """
        if degree < 0:
            raise InvalidArgumentError("Degree must not be negative")

        random_source = random_source or secrets.token_bytes
        randomness = random_source(degree) if degree else b""
        if len(randomness) != degree:
            raise InvalidArgumentError(
                f"Random source returned {len(randomness)} bytes, expected {degree}"
            )

        return cls([intercept, *randomness], field)

    @property
    def coefficients(self) -> Tuple[int, ...]:
        return self._coefficients

    @property
    def degree(self) -> int:
        return len(self._coefficients) - 1

    def evaluate(self, x: int) -> int:
        """Evaluate at x using Horner's scheme"""
        result = 0
        for coefficient in reversed(self._coefficients):
            result = self.field.add(self.field.mul(result, x), coefficient)
        return result

    @staticmethod
    def interpolate(points: Sequence[Point], x: int, field: Optional[GF256] = None) -> int:
        """
        Lagrange interpolation to find f(x) given points

        Each point contributes y_i * prod_{j != i} (x - x_j) / (x_i - x_j).
        Two points with the same x make a denominator zero and raise
        DivisionByZeroError.

        Args:
            points: List of (x_i, y_i) points
            x: Point to evaluate at
            field: GF(2^8) implementation

        Returns:
            f(x) value
        """
        field = field or default_field()
        result = 0

        for i, (x_i, y_i) in enumerate(points):
            weight = 1
            for j, (x_j, _) in enumerate(points):
                if i != j:
                    numerator = field.sub(x, x_j)
                    denominator = field.sub(x_i, x_j)
                    weight = field.mul(weight, field.div(numerator, denominator))

            result = field.add(result, field.mul(weight, y_i))

        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GF256Polynomial):
            return NotImplemented
        return self._coefficients == other._coefficients

    def __hash__(self) -> int:
        return hash(self._coefficients)

    def __repr__(self) -> str:
        terms = " + ".join(f"{c}x^{i}" for i, c in enumerate(self._coefficients))
        return f"GF256Polynomial({terms})"
