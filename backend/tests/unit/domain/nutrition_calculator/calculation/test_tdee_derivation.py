"""Unit tests for TDEEService."""

import pytest

from domain.nutrition_calculator.calculation.tdee_service import TDEEService
from domain.nutrition_calculator.core.exceptions.domain_errors import (
    MissingProfileValueError,
)
from domain.nutrition_calculator.core.value_objects import (
    ActivityPreset,
    ActivitySelection,
)


class TestTDEEService:
    """Test TDEE = BMR × activity multiplier."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = TDEEService()

    @pytest.mark.parametrize("preset", list(ActivityPreset))
    def test_presets(self, preset):
        """Test every preset multiplier."""
        tdee = self.service.calculate(1800.0, ActivitySelection(preset=preset))

        assert tdee == pytest.approx(1800.0 * preset.value)

    def test_moderate_example(self):
        """Test 1780 × 1.55."""
        tdee = self.service.calculate(
            1780.0, ActivitySelection(preset=ActivityPreset.MODERATE)
        )

        assert tdee == pytest.approx(2759.0)

    def test_custom_multiplier_overrides_preset(self):
        """Test custom multiplier is authoritative when enabled."""
        activity = ActivitySelection(
            preset=ActivityPreset.SEDENTARY, use_custom=True, custom_multiplier=1.6
        )

        assert self.service.calculate(2000.0, activity) == pytest.approx(3200.0)

    def test_preset_used_when_custom_disabled(self):
        """Test stray custom multiplier is ignored."""
        activity = ActivitySelection(
            preset=ActivityPreset.LIGHT, use_custom=False, custom_multiplier=3.0
        )

        assert self.service.calculate(2000.0, activity) == pytest.approx(2750.0)

    def test_missing_custom_multiplier_raises(self):
        """Test custom mode without a multiplier fails fast."""
        with pytest.raises(MissingProfileValueError, match="custom_multiplier"):
            self.service.calculate(2000.0, ActivitySelection(use_custom=True))

    def test_missing_preset_raises(self):
        """Test preset mode without a preset fails fast."""
        with pytest.raises(MissingProfileValueError, match="preset"):
            self.service.calculate(2000.0, ActivitySelection())
