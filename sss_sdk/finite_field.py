"""
Finite field arithmetic for Shamir's Secret Sharing
Using GF(2^8) for byte-oriented operations
"""

from abc import ABC, abstractmethod
from typing import Tuple

from .errors import DivisionByZeroError, InvalidArgumentError

PRIMITIVE_POLYNOMIAL = 0x11d  # x^8 + x^4 + x^3 + x^2 + 1
GENERATOR = 2
FIELD_SIZE = 256
GROUP_ORDER = FIELD_SIZE - 1


def _build_tables() -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    """Build exponential and logarithm tables for generator 2"""
    exp_table = [0] * FIELD_SIZE
    log_table = [0] * FIELD_SIZE

    x = 1
    exp_table[0] = x
    for i in range(GROUP_ORDER):
        x <<= 1  # multiply by the generator
        if x >= FIELD_SIZE:
            x ^= PRIMITIVE_POLYNOMIAL
            x &= FIELD_SIZE - 1
        exp_table[i + 1] = x

    for i in range(GROUP_ORDER):
        log_table[exp_table[i]] = i

    # LOG[0] is never read: mul/div special-case zero operands
    log_table[0] = 0
    return tuple(exp_table), tuple(log_table)


EXP, LOG = _build_tables()


def _check_element(*values: int) -> None:
    for value in values:
        if not isinstance(value, int) or not 0 <= value < FIELD_SIZE:
            raise InvalidArgumentError(
                f"GF(2^8) element must be an int in 0-255, got {value!r}"
            )


class GF256(ABC):
    """
    Arithmetic capability over GF(2^8).

    Implementations must agree on the field (primitive polynomial 0x11d), so
    shares produced with one can be combined with any other.
    """

    @abstractmethod
    def add(self, x: int, y: int) -> int:
        """Addition in GF(2^8)"""

    @abstractmethod
    def sub(self, x: int, y: int) -> int:
        """Subtraction in GF(2^8)"""

    @abstractmethod
    def mul(self, x: int, y: int) -> int:
        """Multiplication in GF(2^8)"""

    @abstractmethod
    def div(self, x: int, y: int) -> int:
        """Division in GF(2^8); raises DivisionByZeroError when y is 0"""

    def power(self, x: int, exp: int) -> int:
        """Exponentiation by square-and-multiply"""
        if exp < 0:
            return self.power(self.inverse(x), -exp)

        result = 1
        base = x
        while exp:
            if exp & 1:
                result = self.mul(result, base)
            base = self.mul(base, base)
            exp >>= 1
        return result

    def inverse(self, x: int) -> int:
        """Multiplicative inverse in GF(2^8)"""
        if x == 0:
            raise DivisionByZeroError("Zero has no inverse in GF(2^8)")
        return self.div(1, x)


class DefaultGF256(GF256):
    """
    GF(2^8) backed by the precomputed EXP/LOG tables.

    Tables are module-level tuples built once at import, so instances are
    stateless and safe to share between threads.
    """

    def add(self, x: int, y: int) -> int:
        """Addition in GF(2^8) (XOR)"""
        _check_element(x, y)
        return x ^ y

    def sub(self, x: int, y: int) -> int:
        """Subtraction in GF(2^8) (same as addition)"""
        _check_element(x, y)
        return x ^ y

    def mul(self, x: int, y: int) -> int:
        """Multiplication in GF(2^8)"""
        _check_element(x, y)
        if x == 0 or y == 0:
            return 0
        return EXP[(LOG[x] + LOG[y]) % GROUP_ORDER]

    def div(self, x: int, y: int) -> int:
        """Division in GF(2^8)"""
        _check_element(x, y)
        if y == 0:
            raise DivisionByZeroError("div by zero")
        if x == 0:
            return 0
        return EXP[(LOG[x] - LOG[y] + GROUP_ORDER) % GROUP_ORDER]

    def power(self, x: int, exp: int) -> int:
        """Exponentiation in GF(2^8)"""
        _check_element(x)
        if exp == 0:
            return 1
        if x == 0:
            if exp < 0:
                raise DivisionByZeroError("Zero has no inverse in GF(2^8)")
            return 0
        return EXP[(LOG[x] * exp) % GROUP_ORDER]

    def inverse(self, x: int) -> int:
        """Multiplicative inverse in GF(2^8)"""
        _check_element(x)
        if x == 0:
            raise DivisionByZeroError("Zero has no inverse in GF(2^8)")
        return EXP[(GROUP_ORDER - LOG[x]) % GROUP_ORDER]


class BitwiseGF256(GF256):
    """
    Table-free GF(2^8) using carry-less shift-and-add multiplication.

    Every multiplication runs a fixed eight rounds regardless of its
    operands, and no secret-dependent table index is used.
    """

    @staticmethod
    def _multiply_raw(a: int, b: int) -> int:
        """Raw multiplication without table lookup"""
        result = 0
        for _ in range(8):
            result ^= a & -(b & 1)
            carry = a & 0x80
            a = (a << 1) & 0xff
            a ^= PRIMITIVE_POLYNOMIAL & 0xff & -(carry >> 7)
            b >>= 1
        return result

    def add(self, x: int, y: int) -> int:
        """Addition in GF(2^8) (XOR)"""
        _check_element(x, y)
        return x ^ y

    def sub(self, x: int, y: int) -> int:
        """Subtraction in GF(2^8) (same as addition)"""
        _check_element(x, y)
        return x ^ y

    def mul(self, x: int, y: int) -> int:
        """Multiplication in GF(2^8) by shift-and-add"""
        _check_element(x, y)
        return self._multiply_raw(x, y)

    def div(self, x: int, y: int) -> int:
        """Division in GF(2^8) via the inverse y^254"""
        _check_element(x, y)
        if y == 0:
            raise DivisionByZeroError("div by zero")
        # y^254 == y^-1 since the multiplicative group has order 255
        return self._multiply_raw(x, self.power(y, GROUP_ORDER - 1))


_DEFAULT_FIELD = DefaultGF256()


def default_field() -> GF256:
    """Shared table-backed field instance"""
    return _DEFAULT_FIELD
