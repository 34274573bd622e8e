"""MacroTargets value object - daily calories and macronutrient grams."""

from dataclasses import dataclass
from typing import Dict

PROTEIN_KCAL_PER_G = 4
CARBS_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9


@dataclass(frozen=True)
class MacroTargets:
    """Daily target for one goal.

    Each field is rounded independently, so the kcal implied by the gram
    values may drift from ``calories`` by a couple of kcal. ``carbs_g`` can
    be negative when protein and fat already exceed the calorie budget.

    Attributes:
        calories: Calorie target in kcal/day
        protein_g: Protein in grams
        fat_g: Fat in grams
        carbs_g: Carbohydrates in grams (may be negative)
    """

    calories: int
    protein_g: int
    fat_g: int
    carbs_g: int

    def protein_calories(self) -> int:
        return self.protein_g * PROTEIN_KCAL_PER_G

    def fat_calories(self) -> int:
        return self.fat_g * FAT_KCAL_PER_G

    def carbs_calories(self) -> int:
        return self.carbs_g * CARBS_KCAL_PER_G

    def to_dict(self) -> Dict[str, int]:
        return {
            "calories": self.calories,
            "proteinG": self.protein_g,
            "fatG": self.fat_g,
            "carbsG": self.carbs_g,
        }

    def __str__(self) -> str:
        """String representation.

        Returns:
            str: Calories and macros in P/F/C format
        """
        return (
            f"{self.calories} kcal: "
            f"{self.protein_g}P / {self.fat_g}F / {self.carbs_g}C"
        )
