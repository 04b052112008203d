"""
Barcode validation utilities.

Validation is separate from normalization: ``normalize_barcode`` replaces
check digits, these functions report whether the given one is right.
"""

from eannorm.barcode.checksum import compute_checksum
from eannorm.barcode.errors import BarcodeError
from eannorm.barcode.registry import profile_for
from eannorm.barcode.upce import expand
from eannorm.models.symbology import BarcodeSymbology

# Symbology guessed from code length
LENGTH_MAP = {
    13: BarcodeSymbology.EAN_13,
    12: BarcodeSymbology.UPC_A,
    8: BarcodeSymbology.EAN_8,
    7: BarcodeSymbology.UPC_E,
    6: BarcodeSymbology.UPC_E,
    14: BarcodeSymbology.ITF_14,
    16: BarcodeSymbology.ITF_16,
    5: BarcodeSymbology.EAN_5,
    2: BarcodeSymbology.EAN_2,
}


def validate_checksum(code: str, symbology: BarcodeSymbology | str) -> bool:
    """
    Validate length and check digit of a code.

    UPC-E is checked through its UPC-A expansion, since its check digit
    belongs to the expanded code. ITF accepts any even length and is
    validated against a trailing modulo-10 digit.

    Args:
        code: Code including its check digit
        symbology: Symbology the code claims to be

    Returns:
        True if the code is well-formed and its check digit matches
    """
    if not code or any(c not in "0123456789" for c in code):
        return False

    try:
        profile = profile_for(symbology)
    except BarcodeError:
        return False

    if profile.compressed:
        if len(code) != profile.total_length:
            return False
        return expand(code)[-1] == code[-1]

    if profile.total_length is None:
        if profile.even_length and len(code) % 2 != 0:
            return False
        return compute_checksum(code[:-1], profile.checksum) == code[-1]

    if len(code) != profile.total_length:
        return False
    if not profile.has_check_digit:
        return True

    return compute_checksum(code[:-1], profile.checksum) == code[-1]


def validate_ean13_checksum(code: str) -> bool:
    """Validate a 13-digit EAN code."""
    return validate_checksum(code, BarcodeSymbology.EAN_13)


def validate_ean8_checksum(code: str) -> bool:
    """Validate an 8-digit EAN code."""
    return validate_checksum(code, BarcodeSymbology.EAN_8)


def validate_upc_checksum(code: str) -> bool:
    """Validate a 12-digit UPC-A code."""
    return validate_checksum(code, BarcodeSymbology.UPC_A)


def validate_upce_checksum(code: str) -> bool:
    """Validate an 8-digit UPC-E code (number system, 6 digits, check digit)."""
    return validate_checksum(code, BarcodeSymbology.UPC_E)


def detect_symbology(code: str) -> BarcodeSymbology:
    """
    Detect barcode symbology from code length.

    8 digits are reported as EAN-8; an 8-digit UPC-E cannot be told apart
    by length alone.

    Args:
        code: Barcode string

    Returns:
        Detected symbology
    """
    if not code.isdigit():
        return BarcodeSymbology.UNKNOWN
    return LENGTH_MAP.get(len(code), BarcodeSymbology.UNKNOWN)


def is_valid_barcode(code: str) -> tuple[bool, BarcodeSymbology, str]:
    """
    Validate a barcode completely.

    Args:
        code: Barcode string

    Returns:
        Tuple of (is_valid, symbology, error_message)
    """
    if any(c not in "0123456789" for c in code):
        return False, BarcodeSymbology.UNKNOWN, "Code contains non-numeric characters"

    symbology = detect_symbology(code)

    if symbology == BarcodeSymbology.UNKNOWN:
        return False, symbology, f"Unsupported code length: {len(code)}"

    # 6/7-digit UPC-E spellings carry no check digit
    if symbology == BarcodeSymbology.UPC_E:
        return True, symbology, ""

    if validate_checksum(code, symbology):
        return True, symbology, ""
    return False, symbology, f"Invalid {symbology.value} checksum"
