"""
Known values used in the tests
"""
__all__ = ["ABANDON_MNEMONIC", "ABANDON_SEED", "TWENTY_FOUR_WORD_MNEMONIC"]

# BIP-39 test mnemonic. Seed is for the empty passphrase.
ABANDON_MNEMONIC = "abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon about"
ABANDON_SEED = \
    "5eb00bbddcf069084889a8ab9155568165f5c453ccb85e70811aaed6f6da5fc19a5ac40b389cd370d086206dec8aa6c43daea6690f20ad3d8d48b2d2ce9e38e4"

TWENTY_FOUR_WORD_MNEMONIC = ("thrive quiz thing kit umbrella shock elevator expire century ketchup ill salute winter "
                             "amused crop stairs spend submit below color cook concert lamp photo")
