"""Activity value objects - multiplier applied to BMR to obtain TDEE."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..exceptions.domain_errors import MissingProfileValueError


class ActivityPreset(float, Enum):
    """Physical Activity Level (PAL) presets offered on the form.

    - SEDENTARY: Little or no exercise (office job)
    - LIGHT: Light exercise 1-3 days/week
    - MODERATE: Moderate exercise 3-5 days/week
    - VERY: Hard exercise 6-7 days/week
    - EXTREME: Very hard exercise + physical job
    """

    SEDENTARY = 1.2
    LIGHT = 1.375
    MODERATE = 1.55
    VERY = 1.725
    EXTREME = 1.9


@dataclass(frozen=True)
class ActivitySelection:
    """Activity multiplier source.

    Exactly one of ``preset`` / ``custom_multiplier`` is authoritative,
    selected by ``use_custom``.

    Attributes:
        preset: One of the PAL presets
        use_custom: Whether the custom multiplier is authoritative
        custom_multiplier: Free-form multiplier entered by the user
    """

    preset: Optional[ActivityPreset] = None
    use_custom: bool = False
    custom_multiplier: Optional[float] = None

    def multiplier(self) -> float:
        """Get the authoritative activity multiplier.

        Returns:
            float: Multiplier for BMR to calculate TDEE

        Raises:
            MissingProfileValueError: If the selected source is absent
        """
        if self.use_custom:
            if self.custom_multiplier is None:
                raise MissingProfileValueError("activity.custom_multiplier")
            return float(self.custom_multiplier)

        if self.preset is None:
            raise MissingProfileValueError("activity.preset")
        return float(self.preset.value)
