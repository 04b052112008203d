"""
Weighted check digit algorithms.

Both algorithms weight digits from the rightmost position, so leading
zeros never change the result.
"""

from eannorm.barcode.errors import ensure_digits
from eannorm.models.symbology import ChecksumKind

# Replacement for a modulo-11 result of 10, which has no single digit
MOD11_TEN_REPLACEMENT = "0"

MOD11_WEIGHTS = (2, 3, 4, 5, 6, 7, 8, 9, 10)


def mod10(digits: str) -> str:
    """
    Calculate the UPC/EAN modulo-10 check digit.

    Algorithm:
    1. Multiply the rightmost digit by 3, the next one by 1, and so on
    2. Sum all results
    3. Checksum = (10 - (sum mod 10)) mod 10

    Args:
        digits: Data digits, without the check digit

    Returns:
        Check digit as a one-character string
    """
    ensure_digits(digits)

    total = 0
    for i, digit in enumerate(reversed(digits)):
        weight = 3 if i % 2 == 0 else 1
        total += int(digit) * weight

    return str((10 - (total % 10)) % 10)


def mod11(digits: str) -> str:
    """
    Calculate the modulo-11 check digit.

    Weights 2 to 10 are applied from the rightmost digit and repeat every
    nine positions. Checksum = (11 - (sum mod 11)) mod 11; a result of 10
    is replaced with MOD11_TEN_REPLACEMENT.
    """
    ensure_digits(digits)

    total = 0
    for i, digit in enumerate(reversed(digits)):
        total += int(digit) * MOD11_WEIGHTS[i % len(MOD11_WEIGHTS)]

    result = (11 - (total % 11)) % 11
    if result == 10:
        return MOD11_TEN_REPLACEMENT
    return str(result)


def compute_checksum(digits: str, kind: ChecksumKind) -> str:
    """Calculate the check digit for ``kind``; empty for ChecksumKind.NONE."""
    if kind == ChecksumKind.MOD10:
        return mod10(digits)
    elif kind == ChecksumKind.MOD11:
        return mod11(digits)
    ensure_digits(digits)
    return ""
