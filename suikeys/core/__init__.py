"""
Contains the core elements that are used within suikeys

Core:
    -Provides the reference constants for paths and seeds
    -Provides custom exceptions for the wallet elements
    -Provides the logger factory
"""
# core/__init__.py
from suikeys.core.exceptions import *
from suikeys.core.formats import *
from suikeys.core.logging import *
