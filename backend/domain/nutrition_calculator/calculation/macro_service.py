"""MacroService - macronutrient split calculation."""

from typing import List, Tuple

from ..core.ports.calculators import IMacroCalculator
from ..core.value_objects.macro_targets import (
    CARBS_KCAL_PER_G,
    FAT_KCAL_PER_G,
    PROTEIN_KCAL_PER_G,
    MacroTargets,
)
from .units import round_half_up

LOW_FAT_THRESHOLD_G = 50
LOW_FAT_WARNING = "Fat intake is below 50 g/day."


class MacroService(IMacroCalculator):
    """Split a calorie target into protein, fat and carbohydrate grams.

    Protein is fixed in grams by the caller, fat is a share of calories,
    carbohydrates take whatever is left:
        fat_g   = calories × fat_fraction / 9
        carbs_g = (calories - protein_g × 4 - fat_g × 9) / 4

    Carbohydrates are not floored at zero. Values are rounded only at the
    end, each independently.
    """

    def compute_macros(
        self,
        calories: float,
        protein_g: float,
        fat_fraction: float,
    ) -> Tuple[MacroTargets, List[str]]:
        """Calculate macro split for one goal.

        Args:
            calories: Daily calorie target
            protein_g: Protein target in grams
            fat_fraction: Share of calories from fat (0.0-1.0)

        Returns:
            Tuple of the rounded targets and the warnings for this split

        Example:
            >>> service = MacroService()
            >>> targets, warnings = service.compute_macros(1800.0, 180.0, 0.2)
            >>> targets.fat_g, targets.carbs_g
            (40, 180)
            >>> warnings
            ['Fat intake is below 50 g/day.']
        """
        warnings: List[str] = []

        fat_g = calories * fat_fraction / FAT_KCAL_PER_G
        if fat_g < LOW_FAT_THRESHOLD_G:
            warnings.append(LOW_FAT_WARNING)

        carbs_g = (
            calories - protein_g * PROTEIN_KCAL_PER_G - fat_g * FAT_KCAL_PER_G
        ) / CARBS_KCAL_PER_G

        targets = MacroTargets(
            calories=round_half_up(calories),
            protein_g=round_half_up(protein_g),
            fat_g=round_half_up(fat_g),
            carbs_g=round_half_up(carbs_g),
        )
        return targets, warnings
