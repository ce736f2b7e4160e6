"""
The custom exceptions used throughout suikeys
"""
__all__ = ["WalletError", "InvalidInputError", "DerivationPathError"]


class WalletError(Exception):
    """
    Parent class for Wallet errors
    """
    pass


class InvalidInputError(WalletError):
    """
    For when the seed derivation is given something it cannot use, or the KDF primitive is missing
    """
    pass


class DerivationPathError(WalletError):
    """
    For use when building, wrapping or parsing a derivation path
    """
    pass
