"""
Threshold-protected encryption built on the secret sharing core
"""

import logging
import secrets
from typing import Iterable, List, Optional, Tuple

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from .errors import EncryptionError
from .models import Share
from .sharing import combine, split

logger = logging.getLogger(__name__)

KEY_SIZE = 32  # 256-bit key
NONCE_SIZE = 12  # 96-bit nonce for GCM


def encrypt_with_shares(
    data: bytes,
    threshold: int,
    total_shares: int,
    aad: Optional[bytes] = None
) -> Tuple[bytes, bytes, List[Share]]:
    """
    Encrypt data with AES-256-GCM and split the key into shares.

    Args:
        data: Plaintext bytes
        threshold: Shares needed to recover the key
        total_shares: Shares to create
        aad: Optional associated data bound to the ciphertext

    Returns:
        Tuple of (ciphertext, nonce, key_shares)
    """
    key = secrets.token_bytes(KEY_SIZE)
    nonce = secrets.token_bytes(NONCE_SIZE)

    shares = split(key, threshold, total_shares)
    ciphertext = AESGCM(key).encrypt(nonce, data, aad)

    logger.debug("Encrypted %d bytes under a %d-of-%d key", len(data), threshold, total_shares)
    return ciphertext, nonce, shares


def decrypt_with_shares(
    ciphertext: bytes,
    nonce: bytes,
    shares: Iterable[Share],
    aad: Optional[bytes] = None
) -> bytes:
    """
    Recover the key from shares and decrypt.

    Too few or foreign shares produce a wrong key, which GCM reports as an
    authentication failure.

    Args:
        ciphertext: Output of encrypt_with_shares
        nonce: Nonce from encrypt_with_shares
        shares: At least threshold key shares
        aad: Associated data given at encryption

    Returns:
        Decrypted plaintext
    """
    key = combine(shares)
    if len(key) != KEY_SIZE:
        raise EncryptionError(f"Recovered key has {len(key)} bytes, expected {KEY_SIZE}")

    try:
        return AESGCM(key).decrypt(nonce, ciphertext, aad)
    except (InvalidTag, ValueError) as e:
        raise EncryptionError(f"Decryption failed: {str(e) or type(e).__name__}")
