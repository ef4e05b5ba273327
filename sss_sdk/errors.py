"""
Exception classes for SSS SDK
"""


class SSSError(Exception):
    """Base exception for SSS SDK errors"""

    def __init__(self, message: str, error_code: str = None, details: dict = None):
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}


class InvalidArgumentError(SSSError, ValueError):
    """Malformed split/combine/issue parameters"""
    pass


class DivisionByZeroError(SSSError, ZeroDivisionError):
    """Division by zero in GF(2^8)"""
    pass


class SingularMatrixError(SSSError):
    """Gaussian elimination found no nonzero pivot"""
    pass


InsufficientPointsError = SingularMatrixError


class EncryptionError(SSSError):
    """Encryption/decryption failed"""
    pass
