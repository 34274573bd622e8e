"""Calculator ports - interfaces for composition/BMR/TDEE/macro steps."""

from abc import ABC, abstractmethod
from typing import List, Tuple

from ..value_objects.activity import ActivitySelection
from ..value_objects.bmr import BMRBreakdown
from ..value_objects.body_composition import BodyComposition
from ..value_objects.macro_targets import MacroTargets
from ..value_objects.measurements import ResolvedMeasurements
from ..value_objects.profile_input import ProfileInput


class ICompositionResolver(ABC):
    """Port for unit conversion and body composition resolution."""

    @abstractmethod
    def resolve_measurements(self, profile: ProfileInput) -> ResolvedMeasurements:
        """Convert the active unit system's height/weight.

        Args:
            profile: Normalized profile

        Returns:
            ResolvedMeasurements: Weight in kg and lb, height in cm
        """
        pass

    @abstractmethod
    def resolve_body_composition(
        self, profile: ProfileInput, weight_kg: float
    ) -> BodyComposition:
        """Resolve fat/lean mass from DEXA or body-fat percentage.

        Args:
            profile: Normalized profile
            weight_kg: Body weight in kilograms

        Returns:
            BodyComposition: Masses, possibly absent
        """
        pass


class IBMRCalculator(ABC):
    """Port for BMR calculation.

    Evaluates every formula whose inputs are available and picks the
    recommended estimate.
    """

    @abstractmethod
    def calculate(
        self,
        profile: ProfileInput,
        measurements: ResolvedMeasurements,
        composition: BodyComposition,
    ) -> BMRBreakdown:
        """Calculate BMR breakdown.

        Args:
            profile: Normalized profile (sex, age, body fat mode)
            measurements: Converted weight/height
            composition: Fat/lean mass

        Returns:
            BMRBreakdown: Unrounded estimates
        """
        pass


class ITDEECalculator(ABC):
    """Port for TDEE calculation."""

    @abstractmethod
    def calculate(self, bmr: float, activity: ActivitySelection) -> float:
        """Calculate TDEE from BMR and activity selection.

        Args:
            bmr: Recommended basal metabolic rate
            activity: Activity multiplier source

        Returns:
            float: Unrounded total daily energy expenditure
        """
        pass


class IMacroCalculator(ABC):
    """Port for macronutrient split calculation."""

    @abstractmethod
    def compute_macros(
        self,
        calories: float,
        protein_g: float,
        fat_fraction: float,
    ) -> Tuple[MacroTargets, List[str]]:
        """Split calories into protein/fat/carbs.

        Args:
            calories: Daily calorie target
            protein_g: Protein target in grams
            fat_fraction: Share of calories from fat

        Returns:
            Tuple of rounded targets and the warnings raised by this split
        """
        pass
