"""
Key derivation functions used for mnemonic seeds. Each function returns the derived bytes
"""
import hashlib

import unicodedata

from suikeys.core import SEED

__all__ = ["pbkdf2"]


def pbkdf2(mnemonic: str, passphrase: str = SEED.PASSPHRASE, iterations: int = SEED.ITERATIONS,
           dklen: int = SEED.DKLEN) -> bytes:
    """
    Derives a cryptographic key from a mnemonic sentence using PBKDF2-HMAC-SHA512.

    mnemonic: The mnemonic words as a single space separated string.
    passphrase: An optional passphrase string (default: empty string).
    iterations: Number of iterations for PBKDF2 (default: 2048).
    dklen: Length of the derived key in bytes (default: 64 bytes).
    return: The derived key bytes.
    """
    # Normalize the mnemonic and passphrase using NFKD
    normalized_mnemonic = unicodedata.normalize(SEED.NORMALIZATION, mnemonic)
    normalized_passphrase = unicodedata.normalize(SEED.NORMALIZATION, passphrase)

    # Salt = "mnemonic" + normalized passphrase
    salt = f"{SEED.SALT_PREFIX}{normalized_passphrase}".encode("utf-8")
    password_bytes = normalized_mnemonic.encode("utf-8")

    return hashlib.pbkdf2_hmac(SEED.DIGEST, password_bytes, salt, iterations, dklen)
