"""CalculateResultsQuery - run the calculation engine for a profile."""

from dataclasses import dataclass
from typing import Optional

import structlog

from domain.nutrition_calculator.calculation.engine import NutritionEngine
from domain.nutrition_calculator.core.exceptions.domain_errors import (
    NutritionCalculatorError,
)
from domain.nutrition_calculator.core.value_objects.profile_input import (
    ProfileInput,
)
from domain.nutrition_calculator.core.value_objects.results import Results

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CalculateResultsQuery:
    """Query to calculate results for a normalized profile.

    Attributes:
        profile: Canonical profile produced by the normalizer
    """

    profile: ProfileInput


class CalculateResultsQueryHandler:
    """Handler for CalculateResults queries.

    Either the full results are returned or none at all: engine errors
    are logged and mapped to None so the caller can show a fallback.
    """

    def __init__(self, engine: Optional[NutritionEngine] = None):
        self._engine = engine or NutritionEngine()

    def handle(self, query: CalculateResultsQuery) -> Optional[Results]:
        """
        Handle calculate results query.

        Args:
            query: CalculateResultsQuery with profile

        Returns:
            Optional[Results]: Results, or None if the engine rejected
            the profile
        """
        profile = query.profile
        try:
            results = self._engine.calculate(profile)
        except NutritionCalculatorError as e:
            logger.warning(
                "Calculation failed",
                unit_system=profile.unit_system.value,
                error=str(e),
            )
            return None

        logger.info(
            "Calculation completed",
            unit_system=profile.unit_system.value,
            body_fat_mode=profile.body_fat_mode.value,
            dexa_enabled=profile.dexa.enabled,
            bmr=str(results.bmr),
            tdee=results.tdee,
            maintenance=str(results.maintenance),
            warnings=len(results.warnings),
        )
        return results
