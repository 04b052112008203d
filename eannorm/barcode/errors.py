"""
Barcode normalization errors.
"""


class BarcodeError(ValueError):
    """Base class for normalization and checksum errors."""


class InvalidDigitsError(BarcodeError):
    """Input contains a character outside 0-9."""

    def __init__(self, code: str):
        self.code = code
        bad = next((c for c in code if c not in "0123456789"), "")
        super().__init__(f"Invalid character in code: {bad!r}")


class UnsupportedSymbologyError(BarcodeError):
    """No profile exists for the requested symbology."""

    def __init__(self, symbology: object):
        self.symbology = symbology
        super().__init__(f"Unsupported symbology: {symbology}")


class AmbiguousCompressionError(BarcodeError):
    """A UPC-A code matches none of the UPC-E zero-run patterns."""

    def __init__(self, upca: str, reason: str):
        self.upca = upca
        self.reason = reason
        super().__init__(f"Cannot compress UPC-A {upca} to UPC-E: {reason}")


def ensure_digits(code: str) -> str:
    """Return ``code`` unchanged or raise InvalidDigitsError."""
    # str.isdigit() accepts non-ASCII digits such as '²'
    if any(c not in "0123456789" for c in code):
        raise InvalidDigitsError(code)
    return code
