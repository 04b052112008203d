"""
Barcode normalization, checksum and validation utilities.
"""

from eannorm.barcode.checksum import compute_checksum, mod10, mod11
from eannorm.barcode.errors import (
    AmbiguousCompressionError,
    BarcodeError,
    InvalidDigitsError,
    UnsupportedSymbologyError,
)
from eannorm.barcode.normalizer import BarcodeNormalizer, normalize_barcode, to_ean13
from eannorm.barcode.registry import profile_for, supported_symbologies
from eannorm.barcode.upce import compress, expand, normalize_upce
from eannorm.barcode.validator import (
    detect_symbology,
    is_valid_barcode,
    validate_checksum,
    validate_ean8_checksum,
    validate_ean13_checksum,
    validate_upc_checksum,
    validate_upce_checksum,
)

__all__ = [
    "AmbiguousCompressionError",
    "BarcodeError",
    "BarcodeNormalizer",
    "InvalidDigitsError",
    "UnsupportedSymbologyError",
    "compress",
    "compute_checksum",
    "detect_symbology",
    "expand",
    "is_valid_barcode",
    "mod10",
    "mod11",
    "normalize_barcode",
    "normalize_upce",
    "profile_for",
    "supported_symbologies",
    "to_ean13",
    "validate_checksum",
    "validate_ean13_checksum",
    "validate_ean8_checksum",
    "validate_upc_checksum",
    "validate_upce_checksum",
]
