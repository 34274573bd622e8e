"""BMR value objects - per-formula estimates and the recommended value."""

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class BMRMethods:
    """Basal Metabolic Rate estimates in kcal/day, one per formula.

    A method is None when its inputs were not available. None means
    "not computed"; zero is a computed value and must be kept.

    Attributes:
        mifflin: Mifflin-St Jeor (always computed)
        revised_harris_benedict: Revised Harris-Benedict (always computed)
        katch_mcardle: Katch-McArdle (needs lean mass)
        nelson: Nelson (needs fat and lean mass)
        muller: Muller (needs fat and lean mass)
    """

    mifflin: Optional[float] = None
    revised_harris_benedict: Optional[float] = None
    katch_mcardle: Optional[float] = None
    nelson: Optional[float] = None
    muller: Optional[float] = None

    def to_dict(self) -> Dict[str, float]:
        """Serialize present methods with their camelCase keys.

        Returns:
            dict: Only the methods that were computed
        """
        keyed = {
            "mifflin": self.mifflin,
            "revisedHarrisBenedict": self.revised_harris_benedict,
            "katchMcArdle": self.katch_mcardle,
            "nelson": self.nelson,
            "muller": self.muller,
        }
        return {key: value for key, value in keyed.items() if value is not None}


@dataclass(frozen=True)
class BMRBreakdown:
    """All BMR estimates plus the one used downstream.

    Attributes:
        recommended_bmr: BMR used for TDEE
        methods: Every formula's estimate
    """

    recommended_bmr: float
    methods: BMRMethods

    def __str__(self) -> str:
        return f"{self.recommended_bmr:.0f} kcal/day"

    def to_dict(self) -> dict:
        return {
            "recommendedBmr": self.recommended_bmr,
            "methods": self.methods.to_dict(),
        }
