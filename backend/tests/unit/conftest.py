"""Unit test configuration.

Shared fixtures for unit tests.
Unit tests should not depend on environment files or external services.
"""

from typing import Any, Callable

import pytest

from domain.nutrition_calculator.core.value_objects import (
    ActivityPreset,
    ActivitySelection,
    BodyFatMode,
    CalorieDeltas,
    DexaInput,
    Height,
    ProfileInput,
    Sex,
    UnitSystem,
    Weight,
)


def build_profile(**overrides: Any) -> ProfileInput:
    """Build the reference profile: male, 30 y, 180 lb, 70 in, moderate."""
    values: dict = {
        "unit_system": UnitSystem.US,
        "sex": Sex.MALE,
        "age_years": 30,
        "height": Height(inches=70.0),
        "weight": Weight(lb=180.0),
        "body_fat_mode": BodyFatMode.UNKNOWN,
        "body_fat_percent": None,
        "activity": ActivitySelection(preset=ActivityPreset.MODERATE),
        "deltas": CalorieDeltas(cut=-500.0, bulk=500.0, recomp=-200.0),
        "bulk_protein_g_per_lb": 1.0,
        "dexa": DexaInput(enabled=False),
    }
    values.update(overrides)
    return ProfileInput(**values)


@pytest.fixture
def make_profile() -> Callable[..., ProfileInput]:
    """Factory for profiles with keyword overrides."""
    return build_profile
