"""Tests for StrEnum types."""

import pytest

from Gamma_Exposure.models.enums import ExposureStrategy, OptionType


class TestOptionType:
    def test_values(self) -> None:
        assert OptionType.CALL == "call"
        assert OptionType.PUT == "put"

    def test_from_value(self) -> None:
        assert OptionType("put") is OptionType.PUT

    def test_unknown_value_rejected(self) -> None:
        with pytest.raises(ValueError):
            OptionType("CALL")


class TestExposureStrategy:
    def test_values(self) -> None:
        assert [s.value for s in ExposureStrategy] == ["direct", "model"]
