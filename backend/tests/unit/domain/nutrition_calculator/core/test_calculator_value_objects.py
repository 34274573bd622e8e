"""Unit tests for nutrition calculator value objects."""

import dataclasses

import pytest

from domain.nutrition_calculator.core.exceptions.domain_errors import (
    FieldIssue,
    InvalidProfileInputError,
    MissingProfileValueError,
    NutritionCalculatorError,
)
from domain.nutrition_calculator.core.value_objects import (
    ActivityPreset,
    ActivitySelection,
    BMRBreakdown,
    BMRMethods,
    BodyComposition,
    BodyFatMode,
    DexaInput,
    GoalMode,
    MacroTargets,
)


class TestActivityPreset:
    """Test ActivityPreset enum."""

    def test_values(self):
        """Test preset multipliers."""
        assert [preset.value for preset in ActivityPreset] == [
            1.2,
            1.375,
            1.55,
            1.725,
            1.9,
        ]

    def test_lookup_by_value(self):
        """Test presets can be built from a multiplier."""
        assert ActivityPreset(1.55) is ActivityPreset.MODERATE


class TestActivitySelection:
    """Test ActivitySelection value object."""

    def test_preset_multiplier(self):
        """Test preset is used by default."""
        assert ActivitySelection(preset=ActivityPreset.LIGHT).multiplier() == 1.375

    def test_custom_multiplier(self):
        """Test custom multiplier when enabled."""
        selection = ActivitySelection(use_custom=True, custom_multiplier=1.3)

        assert selection.multiplier() == 1.3

    def test_missing_source_raises(self):
        """Test absent authoritative source raises."""
        with pytest.raises(MissingProfileValueError):
            ActivitySelection(preset=ActivityPreset.LIGHT, use_custom=True).multiplier()

    def test_immutable(self):
        """Test selection is frozen."""
        selection = ActivitySelection(preset=ActivityPreset.LIGHT)

        with pytest.raises(dataclasses.FrozenInstanceError):
            selection.use_custom = True  # type: ignore[misc]


class TestGoalMode:
    """Test GoalMode enum."""

    def test_fat_fractions(self):
        """Test fat share per goal."""
        assert GoalMode.MAINTENANCE.fat_fraction() == 0.25
        assert GoalMode.CUT.fat_fraction() == 0.25
        assert GoalMode.BULK.fat_fraction() == 0.30
        assert GoalMode.RECOMP.fat_fraction() == 0.20

    def test_card_title(self):
        """Test display title."""
        assert GoalMode.RECOMP.card_title() == "Recomp"


class TestDexaInput:
    """Test DexaInput value object."""

    def test_disabled_has_no_measurements(self):
        """Test masses on a disabled scan do not count."""
        assert not DexaInput(enabled=False, fat_mass_kg=10.0).has_measurements()

    def test_enabled_with_one_mass(self):
        """Test a single mass is enough."""
        assert DexaInput(enabled=True, lean_mass_kg=60.0).has_measurements()

    def test_enabled_without_masses(self):
        """Test empty scan."""
        assert not DexaInput(enabled=True).has_measurements()

    def test_zero_mass_counts_as_present(self):
        """Test presence is not truthiness."""
        assert DexaInput(enabled=True, fat_mass_kg=0.0).has_measurements()


class TestBodyComposition:
    """Test BodyComposition value object."""

    def test_unknown(self):
        """Test empty composition."""
        composition = BodyComposition.unknown()

        assert not composition.has_lean_mass
        assert not composition.is_complete

    def test_complete(self):
        """Test both masses."""
        composition = BodyComposition(fat_mass_kg=0.0, lean_mass_kg=60.0)

        assert composition.has_lean_mass
        assert composition.is_complete


class TestBMRMethods:
    """Test BMR value objects."""

    def test_to_dict_omits_absent_methods(self):
        """Test only computed methods are serialized."""
        methods = BMRMethods(mifflin=1783, revised_harris_benedict=1865)

        assert methods.to_dict() == {"mifflin": 1783, "revisedHarrisBenedict": 1865}

    def test_to_dict_keeps_zero(self):
        """Test a computed zero is serialized."""
        methods = BMRMethods(mifflin=1500, revised_harris_benedict=1500, nelson=0)

        assert methods.to_dict()["nelson"] == 0

    def test_breakdown_str(self):
        """Test string representation."""
        breakdown = BMRBreakdown(recommended_bmr=1824, methods=BMRMethods())

        assert str(breakdown) == "1824 kcal/day"


class TestMacroTargets:
    """Test MacroTargets value object."""

    def test_calories_per_macro(self):
        """Test 4/9/4 kcal per gram."""
        targets = MacroTargets(calories=2827, protein_g=180, fat_g=79, carbs_g=350)

        assert targets.protein_calories() == 720
        assert targets.fat_calories() == 711
        assert targets.carbs_calories() == 1400

    def test_negative_carbs_allowed(self):
        """Test negative carbohydrates are a legal value."""
        targets = MacroTargets(calories=139, protein_g=88, fat_g=4, carbs_g=-62)

        assert targets.carbs_g == -62
        assert targets.carbs_calories() == -248

    def test_str(self):
        """Test string representation."""
        targets = MacroTargets(calories=2000, protein_g=180, fat_g=56, carbs_g=195)

        assert str(targets) == "2000 kcal: 180P / 56F / 195C"


class TestExceptions:
    """Test domain exceptions."""

    def test_missing_value_error(self):
        """Test field is kept on the exception."""
        error = MissingProfileValueError("weight.lb")

        assert isinstance(error, NutritionCalculatorError)
        assert error.field == "weight.lb"
        assert "weight.lb" in str(error)

    def test_invalid_input_error_keeps_all_issues(self):
        """Test every issue is reported."""
        issues = [
            FieldIssue("height_inches", "Height (inches) is required"),
            FieldIssue("weight_lb", "Weight (lb) is required"),
        ]

        error = InvalidProfileInputError(issues)

        assert error.issues == issues
        assert "height_inches" in str(error)
        assert "weight_lb" in str(error)

    def test_body_fat_mode_values(self):
        """Test body fat mode string values."""
        assert BodyFatMode("known") is BodyFatMode.KNOWN
