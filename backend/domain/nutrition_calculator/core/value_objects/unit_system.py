"""UnitSystem value object - which measurement system the user entered."""

from enum import Enum


class UnitSystem(str, Enum):
    """Measurement system selected on the profile form.

    - US: pounds and inches
    - METRIC: kilograms and centimeters
    """

    US = "us"
    METRIC = "metric"
