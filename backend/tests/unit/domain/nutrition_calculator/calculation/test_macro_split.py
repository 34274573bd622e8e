"""Unit tests for MacroService."""

from domain.nutrition_calculator.calculation.macro_service import (
    LOW_FAT_WARNING,
    MacroService,
)


class TestMacroService:
    """Test macro split with protein fixed, fat as share, carbs as remainder."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = MacroService()

    def test_split(self):
        """Test fat share and carb remainder."""
        targets, warnings = self.service.compute_macros(2000.0, 180.0, 0.25)

        # Fat: 500 kcal = 55.56g -> 56
        assert targets.fat_g == 56
        # Carbs: (2000 - 720 - 500) / 4 = 195
        assert targets.carbs_g == 195
        assert targets.protein_g == 180
        assert targets.calories == 2000
        assert warnings == []

    def test_low_fat_warning(self):
        """Test warning when fat falls below 50 g."""
        targets, warnings = self.service.compute_macros(1800.0, 180.0, 0.20)

        assert targets.fat_g == 40
        assert targets.carbs_g == 180
        assert warnings == [LOW_FAT_WARNING]
        assert LOW_FAT_WARNING == "Fat intake is below 50 g/day."

    def test_fat_exactly_50_does_not_warn(self):
        """Test threshold is strict."""
        targets, warnings = self.service.compute_macros(1800.0, 150.0, 0.25)

        assert targets.fat_g == 50
        assert warnings == []

    def test_negative_carbs_are_not_clamped(self):
        """Test protein + fat above the budget yields negative carbs."""
        targets, warnings = self.service.compute_macros(1000.0, 250.0, 0.30)

        # (1000 - 1000 - 300) / 4 = -75
        assert targets.carbs_g == -75
        assert targets.fat_g == 33
        assert warnings == [LOW_FAT_WARNING]

    def test_rounding_happens_at_the_end(self):
        """Test carbs use unrounded protein and fat."""
        targets, _ = self.service.compute_macros(2000.4, 150.5, 0.25)

        # (2000.4 - 602 - 500.1) / 4 = 224.575 -> 225
        # Rounding protein first would give 224.
        assert targets.carbs_g == 225
        assert targets.protein_g == 151
        assert targets.fat_g == 56
        assert targets.calories == 2000

    def test_all_fields_are_ints(self):
        """Test every output field is an integer."""
        targets, _ = self.service.compute_macros(2827.084, 180.0, 0.25)

        for value in targets.to_dict().values():
            assert isinstance(value, int)

    def test_warnings_are_not_shared_between_calls(self):
        """Test each call returns its own warnings list."""
        _, first = self.service.compute_macros(1000.0, 100.0, 0.20)
        _, second = self.service.compute_macros(3000.0, 100.0, 0.30)

        assert first == [LOW_FAT_WARNING]
        assert second == []
