"""
Canonical digit strings for the symbol encoder.
"""

from eannorm.barcode.checksum import compute_checksum
from eannorm.barcode.errors import ensure_digits
from eannorm.barcode.registry import profile_for
from eannorm.barcode.upce import expand, normalize_upce
from eannorm.config import get_settings
from eannorm.models.options import NormalizeOptions
from eannorm.models.symbology import (
    BarcodeSymbology,
    ChecksumKind,
    PadSide,
    SymbologyProfile,
)


class BarcodeNormalizer:
    """
    Turns raw digit strings into the fixed-length, checksum-correct form
    each symbology encodes.

    Supports:
    - EAN-13, EAN-8, EAN-2, EAN-5
    - UPC-A, UPC-E
    - ITF, ITF-14, ITF-16
    """

    def __init__(self, options: NormalizeOptions | None = None):
        """
        Initialize normalizer.

        Args:
            options: Normalize options (default: taken from Settings)
        """
        self.options = options or NormalizeOptions.from_settings(get_settings())

    def normalize(self, code: str, symbology: BarcodeSymbology | str) -> str:
        """
        Normalize a code for a symbology.

        Fixed-length symbologies are left-padded with zeros or cut on the
        right to their data length, and get a fresh check digit when they
        carry one. An existing check digit is replaced, not validated.

        Args:
            code: Raw digit string
            symbology: Target symbology

        Returns:
            Canonical digit string

        Raises:
            InvalidDigitsError: If ``code`` contains a non-digit
            UnsupportedSymbologyError: If ``symbology`` has no profile
        """
        ensure_digits(code)
        profile = profile_for(symbology)

        if profile.compressed:
            return normalize_upce(code, self.options.upce_mode)

        if profile.data_length is None:
            return self._normalize_variable(code, profile)

        data = self._fit(code, profile.data_length, profile)
        if profile.has_check_digit:
            data += compute_checksum(data, profile.checksum)
        return data

    def _normalize_variable(self, code: str, profile: SymbologyProfile) -> str:
        """Variable-length symbologies (ITF): optional check digit, even length."""
        data = code
        if self.options.add_checksum and profile.checksum != ChecksumKind.NONE:
            data += compute_checksum(data, profile.checksum)
        if profile.even_length and len(data) % 2 != 0:
            data = profile.pad_char + data
        return data

    def _fit(self, code: str, length: int, profile: SymbologyProfile) -> str:
        """Pad or truncate to ``length`` digits."""
        if len(code) >= length:
            return code[:length]
        if profile.pad_side == PadSide.RIGHT:
            return code.ljust(length, profile.pad_char)
        return code.rjust(length, profile.pad_char)

    def to_ean13(self, code: str, symbology: BarcodeSymbology | str) -> str | None:
        """
        Normalize and widen a code to EAN-13.

        - UPC-A: Prefix with '0'
        - UPC-E: Expand to UPC-A, then prefix with '0'
        - EAN-13: Normalized code
        - Others: None (no EAN-13 equivalent)
        """
        profile = profile_for(symbology)
        if profile.symbology not in (
            BarcodeSymbology.EAN_13,
            BarcodeSymbology.UPC_A,
            BarcodeSymbology.UPC_E,
        ):
            ensure_digits(code)
            return None

        normalized = self.normalize(code, profile.symbology)
        if profile.symbology == BarcodeSymbology.EAN_13:
            return normalized
        # UPC-E in fallback mode may already come back as UPC-A
        if len(normalized) == 8:
            normalized = expand(normalized)
        return "0" + normalized


def normalize_barcode(
    code: str,
    symbology: BarcodeSymbology | str,
    add_checksum: bool = False,
    fallback: bool = False,
) -> str:
    """
    Convenience function to normalize a code.

    Args:
        code: Raw digit string
        symbology: Target symbology
        add_checksum: Append a check digit where it is optional (ITF)
        fallback: Return UPC-A for UPC-E input that cannot be compressed

    Returns:
        Canonical digit string
    """
    options = NormalizeOptions(add_checksum=add_checksum, fallback=fallback)
    return BarcodeNormalizer(options).normalize(code, symbology)


def to_ean13(
    code: str,
    symbology: BarcodeSymbology | str,
    fallback: bool = False,
) -> str | None:
    """Convenience function to widen a UPC-A/UPC-E/EAN-13 code to EAN-13."""
    return BarcodeNormalizer(NormalizeOptions(fallback=fallback)).to_ean13(code, symbology)
