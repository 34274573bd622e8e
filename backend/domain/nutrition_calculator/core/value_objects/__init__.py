"""Value objects for the nutrition calculator domain."""

from .activity import ActivityPreset, ActivitySelection
from .bmr import BMRBreakdown, BMRMethods
from .body_composition import BodyComposition
from .body_fat_mode import BodyFatMode
from .calorie_deltas import CalorieDeltas
from .dexa import DexaInput
from .goal import GoalMode
from .macro_targets import MacroTargets
from .measurements import Height, ResolvedMeasurements, Weight
from .profile_input import ProfileInput
from .results import Results
from .sex import Sex
from .unit_system import UnitSystem

__all__ = [
    "UnitSystem",
    "Sex",
    "BodyFatMode",
    "ActivityPreset",
    "ActivitySelection",
    "GoalMode",
    "Height",
    "Weight",
    "ResolvedMeasurements",
    "DexaInput",
    "CalorieDeltas",
    "ProfileInput",
    "BodyComposition",
    "BMRMethods",
    "BMRBreakdown",
    "MacroTargets",
    "Results",
]
