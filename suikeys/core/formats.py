"""
Reference constants for derivation paths and seed derivation
"""
from typing import Final

__all__ = ["PATHS", "SEED"]


class PATHS:
    """
    Sui registers coin type 784. Ed25519 keys use purpose 44 with every level hardened (SLIP-0010), Secp256k1 keys
    use purpose 54 with hardened purpose/coin/account and non-hardened change/address (BIP-32)
    """
    COIN_TYPE: Final[int] = 784
    ED25519_PURPOSE: Final[int] = 44
    SECP256K1_PURPOSE: Final[int] = 54
    LEVELS: Final[int] = 5
    HARDENED_MARK: Final[str] = "'"
    HARDENED_OFFSET: Final[int] = 0x80000000
    MAX_INDEX: Final[int] = 0x7fffffff
    MAX_INDEX_DIGITS: Final[int] = len(str(0x7fffffff))
    DEFAULT_ED25519: Final[str] = "m/44'/784'/0'/0'/0'"
    DEFAULT_SECP256K1: Final[str] = "m/54'/784'/0'/0/0"


class SEED:
    """
    BIP-39 mnemonic to seed parameters. The passphrase is always empty.
    """
    SALT_PREFIX: Final[str] = "mnemonic"
    PASSPHRASE: Final[str] = ""
    NORMALIZATION: Final[str] = "NFKD"
    DIGEST: Final[str] = "sha512"
    ITERATIONS: Final[int] = 2048
    DKLEN: Final[int] = 64
    HEX_LENGTH: Final[int] = 128
