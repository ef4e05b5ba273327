"""
SSS Python SDK

(K, N)-threshold Shamir's Secret Sharing over GF(2^8). Splits a byte string
into N shares so that any K of them reconstruct it, and issues additional
shares from existing ones.

The AES-GCM envelope in ``sss_sdk.crypto`` needs the ``crypto`` extra
(``pip install sss-sdk[crypto]``) and is imported explicitly.
"""

import logging

from .errors import (
    DivisionByZeroError, EncryptionError, InsufficientPointsError,
    InvalidArgumentError, SingularMatrixError, SSSError
)
from .finite_field import GF256, BitwiseGF256, DefaultGF256
from .matrix import GF256Matrix
from .models import Share, SharingConfig
from .polynomial import GF256Polynomial, Point
from .sharing import ShamirSecretSharing, combine, issue, split

__version__ = "0.1.0"
__author__ = "SSS Team"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "split",
    "combine",
    "issue",
    "Share",
    "SharingConfig",
    "ShamirSecretSharing",
    "GF256",
    "DefaultGF256",
    "BitwiseGF256",
    "GF256Polynomial",
    "GF256Matrix",
    "Point",
    "SSSError",
    "InvalidArgumentError",
    "DivisionByZeroError",
    "SingularMatrixError",
    "InsufficientPointsError",
    "EncryptionError"
]
