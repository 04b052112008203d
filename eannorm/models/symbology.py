"""
Symbology identifiers and the static profile describing each one.
"""

from enum import Enum

from pydantic import Field, field_validator

from eannorm.models.base import ValueModel


class BarcodeSymbology(str, Enum):
    """Supported barcode symbologies."""

    EAN_13 = "EAN-13"
    EAN_8 = "EAN-8"
    EAN_2 = "EAN-2"
    EAN_5 = "EAN-5"
    UPC_A = "UPC-A"
    UPC_E = "UPC-E"
    ITF = "ITF"
    ITF_14 = "ITF-14"
    ITF_16 = "ITF-16"
    UNKNOWN = "UNKNOWN"


class ChecksumKind(str, Enum):
    """Check digit algorithm used by a symbology."""

    MOD10 = "mod10"
    MOD11 = "mod11"
    NONE = "none"


class PadSide(str, Enum):
    """Side on which short input is padded."""

    LEFT = "left"
    RIGHT = "right"


class SymbologyProfile(ValueModel):
    """
    Static metadata for one symbology.

    A ``total_length`` of ``None`` marks a variable-length symbology (ITF),
    whose only length rule is ``even_length``.
    """

    symbology: BarcodeSymbology
    total_length: int | None = Field(None, ge=1, description="Digits in the canonical form")
    has_check_digit: bool = Field(..., description="Canonical form ends with a check digit")
    checksum: ChecksumKind = Field(ChecksumKind.NONE, description="Check digit algorithm")
    pad_char: str = Field("0", min_length=1, max_length=1)
    pad_side: PadSide = PadSide.LEFT
    even_length: bool = Field(False, description="Total digit count must be even")
    compressed: bool = Field(False, description="Goes through the UPC-E compressor")

    @field_validator("pad_char")
    @classmethod
    def validate_pad_char(cls, v: str) -> str:
        if not v.isdigit():
            raise ValueError("Pad character must be a digit")
        return v

    @property
    def is_fixed_length(self) -> bool:
        """Check if the canonical form has a fixed digit count."""
        return self.total_length is not None

    @property
    def data_length(self) -> int | None:
        """Number of digits before the check digit."""
        if self.total_length is None:
            return None
        return self.total_length - 1 if self.has_check_digit else self.total_length
