"""Calculation engine - profile in, BMR/TDEE/macro targets out."""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from ..core.ports.calculators import (
    IBMRCalculator,
    ICompositionResolver,
    IMacroCalculator,
    ITDEECalculator,
)
from ..core.value_objects.bmr import BMRBreakdown, BMRMethods
from ..core.value_objects.goal import GoalMode
from ..core.value_objects.macro_targets import MacroTargets
from ..core.value_objects.measurements import ResolvedMeasurements
from ..core.value_objects.profile_input import ProfileInput
from ..core.value_objects.results import Results
from .bmr_service import BMRService
from .composition_service import CompositionService
from .macro_service import MacroService
from .tdee_service import TDEEService
from .units import round_half_up


@dataclass(frozen=True)
class GoalPlan:
    """How one goal derives its calorie base and protein target.

    Attributes:
        goal: Goal mode
        calorie_delta: Offset added to TDEE, read from the profile
        protein_g_per_lb: Protein density, read from the profile
    """

    goal: GoalMode
    calorie_delta: Callable[[ProfileInput], float]
    protein_g_per_lb: Callable[[ProfileInput], float]


GOAL_PLANS: Tuple[GoalPlan, ...] = (
    GoalPlan(GoalMode.MAINTENANCE, lambda p: 0.0, lambda p: 1.0),
    GoalPlan(GoalMode.CUT, lambda p: p.deltas.cut, lambda p: 1.0),
    GoalPlan(GoalMode.BULK, lambda p: p.deltas.bulk, lambda p: p.bulk_protein_g_per_lb),
    GoalPlan(GoalMode.RECOMP, lambda p: p.deltas.recomp, lambda p: 1.0),
)


def _round_optional(value: Optional[float]) -> Optional[int]:
    if value is None:
        return None
    return round_half_up(value)


class NutritionEngine:
    """
    Orchestrates the calculation steps for one profile.

    Flow:
    1. Convert height/weight and resolve body composition
    2. Evaluate the BMR formula bank and pick the recommended BMR
    3. Calculate TDEE from BMR and activity multiplier
    4. Split calories into macros for each goal, collecting warnings
    5. Round and assemble results

    Stateless: one instance can serve concurrent calls.
    """

    def __init__(
        self,
        composition_resolver: Optional[ICompositionResolver] = None,
        bmr_calculator: Optional[IBMRCalculator] = None,
        tdee_calculator: Optional[ITDEECalculator] = None,
        macro_calculator: Optional[IMacroCalculator] = None,
    ):
        self._composition_resolver = composition_resolver or CompositionService()
        self._bmr_calculator = bmr_calculator or BMRService()
        self._tdee_calculator = tdee_calculator or TDEEService()
        self._macro_calculator = macro_calculator or MacroService()

    def calculate(self, profile: ProfileInput) -> Results:
        """
        Calculate BMR, TDEE and macro targets for every goal.

        Args:
            profile: Normalized profile

        Returns:
            Results with all computed metrics

        Raises:
            MissingProfileValueError: If the active unit system's
                height/weight or the active activity source is absent
        """
        # Step 1: Units and body composition
        measurements = self._composition_resolver.resolve_measurements(profile)
        composition = self._composition_resolver.resolve_body_composition(
            profile, measurements.weight_kg
        )

        # Step 2: BMR formula bank
        breakdown = self._bmr_calculator.calculate(profile, measurements, composition)

        # Step 3: TDEE
        tdee = self._tdee_calculator.calculate(breakdown.recommended_bmr, profile.activity)

        # Step 4: Macro split per goal
        targets, warnings = self._calculate_goals(profile, measurements, tdee)

        # Step 5: Assemble
        return Results(
            bmr=self._round_breakdown(breakdown),
            tdee=round_half_up(tdee),
            maintenance=targets[GoalMode.MAINTENANCE],
            cut=targets[GoalMode.CUT],
            bulk=targets[GoalMode.BULK],
            recomp=targets[GoalMode.RECOMP],
            warnings=tuple(warnings),
        )

    def _calculate_goals(
        self,
        profile: ProfileInput,
        measurements: ResolvedMeasurements,
        tdee: float,
    ) -> Tuple[Dict[GoalMode, MacroTargets], List[str]]:
        targets: Dict[GoalMode, MacroTargets] = {}
        warnings: List[str] = []

        for plan in GOAL_PLANS:
            goal_targets, goal_warnings = self._macro_calculator.compute_macros(
                calories=tdee + plan.calorie_delta(profile),
                protein_g=measurements.weight_lb * plan.protein_g_per_lb(profile),
                fat_fraction=plan.goal.fat_fraction(),
            )
            targets[plan.goal] = goal_targets
            warnings.extend(goal_warnings)

        return targets, warnings

    @staticmethod
    def _round_breakdown(breakdown: BMRBreakdown) -> BMRBreakdown:
        methods = breakdown.methods
        return BMRBreakdown(
            recommended_bmr=round_half_up(breakdown.recommended_bmr),
            methods=BMRMethods(
                mifflin=_round_optional(methods.mifflin),
                revised_harris_benedict=_round_optional(methods.revised_harris_benedict),
                katch_mcardle=_round_optional(methods.katch_mcardle),
                nelson=_round_optional(methods.nelson),
                muller=_round_optional(methods.muller),
            ),
        )


_default_engine = NutritionEngine()


def calculate_all(profile: ProfileInput) -> Results:
    """Calculate results for a profile with the default services.

    Args:
        profile: Normalized profile

    Returns:
        Results: BMR breakdown, TDEE, four macro targets and warnings

    Raises:
        MissingProfileValueError: If a required scalar is absent
    """
    return _default_engine.calculate(profile)
