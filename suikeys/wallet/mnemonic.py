"""
Mnemonic to seed derivation.

The seed is the BIP-39 PBKDF2-HMAC-SHA512 output for the mnemonic with an empty passphrase. The mnemonic itself is
not checked against the word list here; use validate_mnemonic for that.
"""
from mnemonic import Mnemonic

from suikeys.core import SEED, InvalidInputError, get_logger
from suikeys.cryptography import pbkdf2

__all__ = ["mnemonic_to_seed", "mnemonic_to_seed_hex", "validate_mnemonic"]

logger = get_logger(__name__)

WORDLIST_LANGUAGE = "english"

# Shared instance, the word list file is read once
WORDLIST = Mnemonic(WORDLIST_LANGUAGE)


def mnemonic_to_seed(mnemonic: str) -> bytes:
    """
    Uses the KDF to derive 64 bytes of key data from the mnemonic with an empty passphrase.

    Args:
        mnemonic: the words of the mnemonic separated by spaces

    Returns:
        The 64 byte seed

    Raises:
        InvalidInputError: if mnemonic is not a str, or the PBKDF2 primitive is unavailable
    """
    if not isinstance(mnemonic, str):
        raise InvalidInputError(f"Mnemonic must be a str, got {type(mnemonic).__name__}")

    try:
        seed = pbkdf2(mnemonic=mnemonic, passphrase=SEED.PASSPHRASE)
    except UnicodeError as e:
        raise InvalidInputError(f"Mnemonic cannot be encoded as UTF-8: {e}") from e
    except (AttributeError, ValueError) as e:
        raise InvalidInputError(f"PBKDF2-HMAC-{SEED.DIGEST.upper()} unavailable: {e}") from e

    if len(seed) != SEED.DKLEN:
        raise InvalidInputError(f"KDF returned {len(seed)} bytes, expected {SEED.DKLEN}")

    logger.debug(f"Derived {len(seed)}-byte seed from {len(mnemonic.split())}-word mnemonic")
    return seed


def mnemonic_to_seed_hex(mnemonic: str) -> str:
    """
    Derive the seed from the mnemonic and return it as a lowercase hex string.
    """
    return mnemonic_to_seed(mnemonic).hex()


def validate_mnemonic(mnemonic: str) -> bool:
    """
    Checks the mnemonic against the BIP-39 english word list and its checksum
    """
    if not isinstance(mnemonic, str):
        return False
    return WORDLIST.check(mnemonic)
