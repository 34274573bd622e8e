"""BodyFatMode value object - whether the user knows their body-fat %."""

from enum import Enum


class BodyFatMode(str, Enum):
    """Gates whether the body-fat percentage takes part in calculations.

    - KNOWN: body_fat_percent is present and used
    - UNKNOWN: body_fat_percent is ignored even if supplied
    """

    KNOWN = "known"
    UNKNOWN = "unknown"
