"""
Pydantic models for symbology profiles and normalize options.
"""

from eannorm.models.options import NormalizeOptions, UpcEMode
from eannorm.models.symbology import (
    BarcodeSymbology,
    ChecksumKind,
    PadSide,
    SymbologyProfile,
)

__all__ = [
    # Symbology
    "BarcodeSymbology",
    "ChecksumKind",
    "PadSide",
    "SymbologyProfile",
    # Options
    "NormalizeOptions",
    "UpcEMode",
]
