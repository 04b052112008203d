"""
Tests for profile and option models.
"""

import pytest
from pydantic import ValidationError

from eannorm.config import Settings
from eannorm.models import (
    BarcodeSymbology,
    ChecksumKind,
    NormalizeOptions,
    PadSide,
    SymbologyProfile,
    UpcEMode,
)


class TestSymbologyProfile:
    """Tests for SymbologyProfile model."""

    def test_create_profile(self):
        """Test creating a profile."""
        profile = SymbologyProfile(
            symbology=BarcodeSymbology.EAN_13,
            total_length=13,
            has_check_digit=True,
            checksum=ChecksumKind.MOD10,
        )

        assert profile.pad_char == "0"
        assert profile.pad_side == PadSide.LEFT
        assert profile.data_length == 12
        assert profile.is_fixed_length

    def test_variable_length(self):
        """Test a variable-length profile."""
        profile = SymbologyProfile(
            symbology=BarcodeSymbology.ITF,
            has_check_digit=False,
            even_length=True,
        )

        assert profile.total_length is None
        assert profile.data_length is None

    def test_frozen(self):
        """Test that profiles cannot be mutated."""
        profile = SymbologyProfile(
            symbology=BarcodeSymbology.EAN_2,
            total_length=2,
            has_check_digit=False,
        )

        with pytest.raises(ValidationError):
            profile.total_length = 3

    def test_pad_char_must_be_digit(self):
        """Test rejection of a non-digit pad character."""
        with pytest.raises(ValidationError):
            SymbologyProfile(
                symbology=BarcodeSymbology.EAN_5,
                total_length=5,
                has_check_digit=False,
                pad_char=" ",
            )

    def test_symbology_values(self):
        """Test symbology string values."""
        assert BarcodeSymbology.UPC_E.value == "UPC-E"
        assert BarcodeSymbology("ITF-14") == BarcodeSymbology.ITF_14


class TestNormalizeOptions:
    """Tests for NormalizeOptions model."""

    def test_defaults(self):
        """Test default options."""
        options = NormalizeOptions()

        assert options.add_checksum is False
        assert options.fallback is False
        assert options.upce_mode == UpcEMode.STRICT

    def test_fallback_mode(self):
        """Test that fallback selects the fallback compressor mode."""
        assert NormalizeOptions(fallback=True).upce_mode == UpcEMode.FALLBACK

    def test_from_settings(self):
        """Test building options from settings."""
        settings = Settings(add_checksum=True, upce_fallback=True)
        options = NormalizeOptions.from_settings(settings)

        assert options.add_checksum is True
        assert options.fallback is True

    def test_unknown_field(self):
        """Test rejection of unknown options."""
        with pytest.raises(ValidationError):
            NormalizeOptions(strict=True)
