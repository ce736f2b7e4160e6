"""
Derivation paths for the two curves supported by the Sui wallet.

Ed25519 keys follow SLIP-0010, which only allows hardened derivation:
    m/44'/784'/{account}'/{change}'/{address}'

Secp256k1 keys follow BIP-32. The purpose is registered as 54 to tell them apart from Ed25519, and change/address
stay non-hardened:
    m/54'/784'/{account}'/{change}/{address}

The validators are predicates: a malformed path gives False, never an exception. HardenedEd25519Path and
Secp256k1Path are str values that can only be built from a path the matching validator accepts.
"""
import re
from enum import Enum

from suikeys.core import PATHS, DerivationPathError, get_logger

__all__ = ["CurvePurpose", "HardenedEd25519Path", "Secp256k1Path", "DEFAULT_ED25519_PATH", "DEFAULT_SECP256K1_PATH",
           "classify_path", "is_hardened_path", "is_valid_bip32_path", "parse_path"]

logger = get_logger(__name__)

# ASCII digits only, \d would also accept other unicode decimals
INDEX_PATTERN = "([0-9]+)"


class CurvePurpose(Enum):
    ED25519_HARDENED = (PATHS.ED25519_PURPOSE, "Ed25519", (True, True, True, True, True))
    SECP256K1 = (PATHS.SECP256K1_PURPOSE, "Secp256k1", (True, True, True, False, False))

    def __init__(self, purpose: int, curve: str, hardened_levels: tuple):
        self.purpose = purpose
        self.curve = curve
        if len(hardened_levels) != PATHS.LEVELS:
            raise DerivationPathError(f"{curve} paths have {PATHS.LEVELS} levels, got {len(hardened_levels)}")
        self.hardened_levels = hardened_levels

        # Purpose and coin type are fixed, the last three levels are captured
        levels = [f"{purpose}'", f"{PATHS.COIN_TYPE}'"]
        levels += [INDEX_PATTERN + (PATHS.HARDENED_MARK if h else "") for h in hardened_levels[2:]]
        self.pattern = re.compile("m/" + "/".join(levels))

    @property
    def path_type(self) -> type:
        return _PATH_TYPES[self]

    def is_valid(self, path) -> bool:
        """
        Returns True only if the whole of path matches the grammar for this purpose
        """
        return isinstance(path, str) and self.pattern.fullmatch(path) is not None

    def path(self, account: int = 0, change: int = 0, address: int = 0):
        """
        Build the path for the given indices and return it as the typed path for this purpose
        """
        for name, index in (("account", account), ("change", change), ("address", address)):
            if isinstance(index, bool) or not isinstance(index, int):
                raise DerivationPathError(f"{name} index must be an integer, got {type(index).__name__}")
            if not 0 <= index <= PATHS.MAX_INDEX:
                raise DerivationPathError(f"{name} index {index} outside of [0, {PATHS.MAX_INDEX}]")

        marks = [PATHS.HARDENED_MARK if h else "" for h in self.hardened_levels[2:]]
        return self.path_type(
            f"m/{self.purpose}'/{PATHS.COIN_TYPE}'/{account}{marks[0]}/{change}{marks[1]}/{address}{marks[2]}"
        )

    def indices(self, path: str) -> list[int]:
        """
        Returns the five child indices of the path, with HARDENED_OFFSET added to the hardened levels
        """
        match = self.pattern.fullmatch(path) if isinstance(path, str) else None
        if match is None:
            raise DerivationPathError(f"Not a valid {self.curve} derivation path: {path!r}")

        # Length check before int(), which refuses very long digit strings
        digits = [group.lstrip("0") or "0" for group in match.groups()]
        for group in digits:
            if len(group) > PATHS.MAX_INDEX_DIGITS:
                raise DerivationPathError(f"Index of {len(group)} digits in {self.curve} path does not fit in 31 bits")

        raw = [self.purpose, PATHS.COIN_TYPE] + [int(g) for g in digits]
        indices = []
        for index, hardened in zip(raw, self.hardened_levels):
            if index > PATHS.MAX_INDEX:
                raise DerivationPathError(f"Index {index} in {self.curve} path does not fit in 31 bits")
            indices.append(index + PATHS.HARDENED_OFFSET if hardened else index)
        return indices


class _TypedPath(str):
    """
    A derivation path string known to match the grammar of its purpose
    """
    purpose: CurvePurpose

    def __new__(cls, path: str):
        if not cls.purpose.is_valid(path):
            logger.debug(f"Rejected {cls.purpose.curve} path: {path!r}")
            raise DerivationPathError(f"Invalid {cls.purpose.curve} derivation path: {path!r}")
        return super().__new__(cls, path)

    @property
    def indices(self) -> list[int]:
        return self.purpose.indices(self)


class HardenedEd25519Path(_TypedPath):
    purpose = CurvePurpose.ED25519_HARDENED


class Secp256k1Path(_TypedPath):
    purpose = CurvePurpose.SECP256K1


_PATH_TYPES = {
    CurvePurpose.ED25519_HARDENED: HardenedEd25519Path,
    CurvePurpose.SECP256K1: Secp256k1Path,
}

DEFAULT_ED25519_PATH = HardenedEd25519Path(PATHS.DEFAULT_ED25519)
DEFAULT_SECP256K1_PATH = Secp256k1Path(PATHS.DEFAULT_SECP256K1)


def is_hardened_path(path) -> bool:
    """
    Validate a SLIP-0010 path of the form m/44'/784'/{account}'/{change}'/{address}'
    """
    return CurvePurpose.ED25519_HARDENED.is_valid(path)


def is_valid_bip32_path(path) -> bool:
    """
    Validate a BIP-32 path of the form m/54'/784'/{account}'/{change}/{address}
    """
    return CurvePurpose.SECP256K1.is_valid(path)


def classify_path(path) -> CurvePurpose | None:
    # The grammars are disjoint on the purpose level so at most one matches
    return next((purpose for purpose in CurvePurpose if purpose.is_valid(path)), None)


def parse_path(path: str) -> list[int]:
    purpose = classify_path(path)
    if purpose is None:
        raise DerivationPathError(f"Unrecognized derivation path: {path!r}")
    return purpose.indices(path)
