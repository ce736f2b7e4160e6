"""
Derivation paths and mnemonic seeds for the Sui wallet
"""
# wallet/__init__.py
from suikeys.wallet.derivation import *
from suikeys.wallet.mnemonic import *
