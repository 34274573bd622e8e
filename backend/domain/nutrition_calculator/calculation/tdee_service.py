"""TDEEService - Total Daily Energy Expenditure calculation."""

from ..core.ports.calculators import ITDEECalculator
from ..core.value_objects.activity import ActivitySelection


class TDEEService(ITDEECalculator):
    """Calculate Total Daily Energy Expenditure.

    TDEE represents total calories burned per day, calculated by
    multiplying BMR by Physical Activity Level (PAL) multiplier.

    Formula:
        TDEE = BMR × PAL

    PAL comes from the custom multiplier when the user enabled it,
    otherwise from the selected preset:
        - Sedentary: 1.2
        - Light: 1.375
        - Moderate: 1.55
        - Very: 1.725
        - Extreme: 1.9
    """

    def calculate(self, bmr: float, activity: ActivitySelection) -> float:
        """Calculate TDEE from BMR and activity selection.

        Args:
            bmr: Recommended basal metabolic rate (unrounded)
            activity: Activity multiplier source

        Returns:
            float: Total daily energy expenditure in kcal/day (unrounded)

        Raises:
            MissingProfileValueError: If the selected multiplier is absent

        Example:
            >>> service = TDEEService()
            >>> service.calculate(1780.0, ActivitySelection(preset=ActivityPreset.MODERATE))
            2759.0
        """
        return bmr * activity.multiplier()
