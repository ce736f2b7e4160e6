"""
Hash functions and key derivation
"""
# cryptography/__init__.py
from suikeys.cryptography.hash_functions import *
