"""
suikeys: derivation path validation and mnemonic seed derivation for the Sui wallet SDK

Exposes:
    -Path validators for Ed25519 (SLIP-0010) and Secp256k1 (BIP-32) derivation paths
    -Typed path values which can only be constructed from a valid path string
    -The BIP-39 mnemonic to seed key derivation
"""
# suikeys/__init__.py
from suikeys.core import *
from suikeys.wallet import *
