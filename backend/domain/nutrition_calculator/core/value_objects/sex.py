"""Sex value object - drives BMR formula coefficients."""

from enum import Enum


class Sex(str, Enum):
    """Biological sex used by the population-average BMR equations."""

    MALE = "male"
    FEMALE = "female"
