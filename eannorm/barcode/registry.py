"""
Static symbology profiles.
"""

from types import MappingProxyType

from eannorm.barcode.errors import UnsupportedSymbologyError
from eannorm.models.symbology import (
    BarcodeSymbology,
    ChecksumKind,
    PadSide,
    SymbologyProfile,
)

_PROFILES = MappingProxyType(
    {
        BarcodeSymbology.EAN_13: SymbologyProfile(
            symbology=BarcodeSymbology.EAN_13,
            total_length=13,
            has_check_digit=True,
            checksum=ChecksumKind.MOD10,
        ),
        BarcodeSymbology.EAN_8: SymbologyProfile(
            symbology=BarcodeSymbology.EAN_8,
            total_length=8,
            has_check_digit=True,
            checksum=ChecksumKind.MOD10,
        ),
        BarcodeSymbology.EAN_2: SymbologyProfile(
            symbology=BarcodeSymbology.EAN_2,
            total_length=2,
            has_check_digit=False,
        ),
        BarcodeSymbology.EAN_5: SymbologyProfile(
            symbology=BarcodeSymbology.EAN_5,
            total_length=5,
            has_check_digit=False,
        ),
        BarcodeSymbology.UPC_A: SymbologyProfile(
            symbology=BarcodeSymbology.UPC_A,
            total_length=12,
            has_check_digit=True,
            checksum=ChecksumKind.MOD10,
        ),
        # Short UPC-E input is completed on the right: "1" -> "100000"
        BarcodeSymbology.UPC_E: SymbologyProfile(
            symbology=BarcodeSymbology.UPC_E,
            total_length=8,
            has_check_digit=True,
            checksum=ChecksumKind.MOD10,
            pad_side=PadSide.RIGHT,
            compressed=True,
        ),
        # Check digit only appended on request
        BarcodeSymbology.ITF: SymbologyProfile(
            symbology=BarcodeSymbology.ITF,
            total_length=None,
            has_check_digit=False,
            checksum=ChecksumKind.MOD10,
            even_length=True,
        ),
        BarcodeSymbology.ITF_14: SymbologyProfile(
            symbology=BarcodeSymbology.ITF_14,
            total_length=14,
            has_check_digit=True,
            checksum=ChecksumKind.MOD10,
        ),
        BarcodeSymbology.ITF_16: SymbologyProfile(
            symbology=BarcodeSymbology.ITF_16,
            total_length=16,
            has_check_digit=True,
            checksum=ChecksumKind.MOD10,
        ),
    }
)


def profile_for(symbology: BarcodeSymbology | str) -> SymbologyProfile:
    """
    Get the profile for a symbology.

    Args:
        symbology: Symbology enum member or its value (e.g. "EAN-13")

    Returns:
        The static profile

    Raises:
        UnsupportedSymbologyError: For UNKNOWN or unrecognised values
    """
    try:
        kind = BarcodeSymbology(symbology)
    except ValueError:
        raise UnsupportedSymbologyError(symbology) from None

    profile = _PROFILES.get(kind)
    if profile is None:
        raise UnsupportedSymbologyError(kind.value)
    return profile


def supported_symbologies() -> tuple[BarcodeSymbology, ...]:
    """All symbologies that have a profile."""
    return tuple(_PROFILES)
