"""
UPC-A <-> UPC-E compression.

A UPC-A code is a number system digit, a 5-digit manufacturer code, a
5-digit product code and a check digit. UPC-E keeps six significant
digits; the last one (the compression digit) says which zero-run of the
UPC-A code was dropped:

    0, 1, 2  manufacturer ends in X00 (X = compression digit), product 00PPP
    3        manufacturer ends in 00, product 000PP
    4        manufacturer ends in 0, product 0000P
    5 - 9    product 0000P with P = compression digit
"""

import structlog

from eannorm.barcode.checksum import mod10
from eannorm.barcode.errors import (
    AmbiguousCompressionError,
    BarcodeError,
    ensure_digits,
)
from eannorm.models.options import UpcEMode

logger = structlog.get_logger(__name__)

# Only these number systems have a UPC-E form
NUMBER_SYSTEMS = ("0", "1")

SIGNIFICANT_LENGTH = 6
UPCA_BODY_LENGTH = 11


def _split_upce(digits: str) -> tuple[str, str]:
    """Split a 0-8 digit UPC-E spelling into number system and significant digits."""
    if len(digits) <= SIGNIFICANT_LENGTH:
        return "0", digits.ljust(SIGNIFICANT_LENGTH, "0")
    return digits[0], digits[1 : SIGNIFICANT_LENGTH + 1]


def _upca_body(digits: str) -> str:
    """Bring a 9+ digit UPC-A spelling to its 11 data digits."""
    if len(digits) < UPCA_BODY_LENGTH:
        return digits.rjust(UPCA_BODY_LENGTH, "0")
    return digits[:UPCA_BODY_LENGTH]


def _expand_body(number_system: str, significant: str) -> str:
    """Rebuild the 11 UPC-A data digits from six significant UPC-E digits."""
    compression_digit = significant[5]

    if compression_digit in "012":
        manufacturer = significant[:2] + compression_digit + "00"
        product = "00" + significant[2:5]
    elif compression_digit == "3":
        manufacturer = significant[:3] + "00"
        product = "000" + significant[3:5]
    elif compression_digit == "4":
        manufacturer = significant[:4] + "0"
        product = "0000" + significant[4]
    else:
        manufacturer = significant[:5]
        product = "0000" + compression_digit

    return number_system + manufacturer + product


def _compress_body(body: str) -> str:
    """
    Find the six significant UPC-E digits for 11 UPC-A data digits.

    Patterns are tried in table order, so a code that several patterns
    could describe always gets the same compressed form.

    Raises:
        AmbiguousCompressionError: If no zero-run pattern matches
    """
    manufacturer = body[1:6]
    product = body[6:11]

    if manufacturer[2:] in ("000", "100", "200") and product.startswith("00"):
        return manufacturer[:2] + product[2:] + manufacturer[2]
    if manufacturer.endswith("00") and product.startswith("000"):
        return manufacturer[:3] + product[3:] + "3"
    if manufacturer.endswith("0") and product.startswith("0000"):
        return manufacturer[:4] + product[4] + "4"
    if product.startswith("0000") and product[4] in "56789":
        return manufacturer + product[4]

    raise AmbiguousCompressionError(body, "no zero-run pattern matches")


def expand(upce: str) -> str:
    """
    Expand a UPC-E code to UPC-A.

    Args:
        upce: 6 significant digits, optionally preceded by the number
            system and followed by the check digit (6, 7 or 8 digits)

    Returns:
        12-digit UPC-A code with a freshly computed check digit
    """
    ensure_digits(upce)
    if not SIGNIFICANT_LENGTH <= len(upce) <= SIGNIFICANT_LENGTH + 2:
        raise BarcodeError(f"UPC-E code must have 6 to 8 digits, got {len(upce)}")

    body = _expand_body(*_split_upce(upce))
    return body + mod10(body)


def compress(upca: str) -> str:
    """
    Compress a UPC-A code to UPC-E.

    Args:
        upca: 11 data digits, optionally followed by the check digit

    Returns:
        8-digit UPC-E code (number system, 6 significant digits, check digit)

    Raises:
        AmbiguousCompressionError: If the number system is not 0 or 1, or
            the code has none of the compressible zero-runs
    """
    ensure_digits(upca)
    if len(upca) not in (UPCA_BODY_LENGTH, UPCA_BODY_LENGTH + 1):
        raise BarcodeError(f"UPC-A code must have 11 or 12 digits, got {len(upca)}")

    body = upca[:UPCA_BODY_LENGTH]
    if body[0] not in NUMBER_SYSTEMS:
        raise AmbiguousCompressionError(body, f"number system {body[0]} has no UPC-E form")

    return body[0] + _compress_body(body) + mod10(body)


def normalize_upce(digits: str, mode: UpcEMode = UpcEMode.STRICT) -> str:
    """
    Canonical UPC-E form of any digit string.

    Up to 8 digits are read as UPC-E (significant digits, then number
    system + significant, then number system + significant + check).
    Longer input is read as UPC-A. UPC-E spellings are expanded and
    compressed again, so equivalent spellings such as "000105" and
    "000154" end up as the same code.

    In STRICT mode the result is always 8 digits: UPC-A input without a
    compressible zero-run is cut down to its number system and first six
    data digits and treated as UPC-E. In FALLBACK mode such input, and
    UPC-E whose number system is not 0 or 1, is returned as 12-digit UPC-A.

    Raises:
        InvalidDigitsError: If ``digits`` contains a non-digit
    """
    ensure_digits(digits)

    if len(digits) <= SIGNIFICANT_LENGTH + 2:
        number_system, significant = _split_upce(digits)
        body = _expand_body(number_system, significant)

        if mode == UpcEMode.FALLBACK and number_system not in NUMBER_SYSTEMS:
            logger.debug(
                "UPC-E number system has no UPC-E form, using UPC-A",
                code=digits,
                number_system=number_system,
            )
            return body + mod10(body)

        canonical = _compress_body(body)
        if canonical != significant:
            logger.debug(
                "Rewrote UPC-E to canonical compression",
                code=digits,
                significant=significant,
                canonical=canonical,
            )
        return number_system + canonical + mod10(body)

    body = _upca_body(digits)

    if mode == UpcEMode.FALLBACK:
        try:
            return compress(body)
        except AmbiguousCompressionError as e:
            logger.debug("Falling back to UPC-A", code=digits, reason=e.reason)
            return body + mod10(body)

    try:
        return body[0] + _compress_body(body) + mod10(body)
    except AmbiguousCompressionError:
        logger.debug("Re-deriving UPC-E from leading digits", code=digits)
        return normalize_upce(body[: SIGNIFICANT_LENGTH + 1], mode)
