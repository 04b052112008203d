"""
Options accepted by the normalizer.
"""

from enum import Enum
from typing import TYPE_CHECKING

from pydantic import Field

from eannorm.models.base import ValueModel

if TYPE_CHECKING:
    from eannorm.config.settings import Settings


class UpcEMode(str, Enum):
    """How the UPC-E compressor treats input outside the compression table."""

    STRICT = "strict"
    FALLBACK = "fallback"


class NormalizeOptions(ValueModel):
    """Options for a normalize call."""

    add_checksum: bool = Field(
        False, description="Append a check digit where the symbology makes it optional (ITF)"
    )
    fallback: bool = Field(
        False, description="Return UPC-A for UPC-E input that cannot be compressed"
    )

    @property
    def upce_mode(self) -> UpcEMode:
        """Compressor mode selected by ``fallback``."""
        return UpcEMode.FALLBACK if self.fallback else UpcEMode.STRICT

    @classmethod
    def from_settings(cls, settings: "Settings") -> "NormalizeOptions":
        """Build options from configured defaults."""
        return cls(add_checksum=settings.add_checksum, fallback=settings.upce_fallback)
