"""
eannorm - symbology normalization and checksum engine for 1-D barcodes.
"""

from eannorm.barcode import (
    BarcodeNormalizer,
    normalize_barcode,
)
from eannorm.models import BarcodeSymbology, NormalizeOptions, UpcEMode

__version__ = "0.1.0"

__all__ = [
    "BarcodeNormalizer",
    "BarcodeSymbology",
    "NormalizeOptions",
    "UpcEMode",
    "normalize_barcode",
]
