"""
Core flash image functionality.

This package contains the hex listing to binary converter, its error
types, and the flash geometry constants.
"""

from .constants import FLASH_SIZE, PAD_BYTE
from .converter import (
    ByteCountMismatch,
    CountRetrievalFailed,
    DestinationExists,
    HexToBinConverter,
    HexToBinError,
    InputTooLarge,
    PaddingFailed,
)
from ..formats.hex_utils import MalformedHexToken

__all__ = [
    "FLASH_SIZE",
    "PAD_BYTE",
    "HexToBinConverter",
    "HexToBinError",
    "DestinationExists",
    "MalformedHexToken",
    "CountRetrievalFailed",
    "ByteCountMismatch",
    "PaddingFailed",
    "InputTooLarge",
]
