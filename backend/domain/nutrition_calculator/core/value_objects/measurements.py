"""Height and Weight value objects - unit-paired body measurements."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Height:
    """Body height entered in either unit system.

    Only the half matching the profile's unit system is authoritative;
    the other half is ignored even if populated.

    Attributes:
        cm: Height in centimeters (metric)
        inches: Height in inches (US)
    """

    cm: Optional[float] = None
    inches: Optional[float] = None


@dataclass(frozen=True)
class Weight:
    """Body weight entered in either unit system.

    Attributes:
        kg: Weight in kilograms (metric)
        lb: Weight in pounds (US)
    """

    kg: Optional[float] = None
    lb: Optional[float] = None


@dataclass(frozen=True)
class ResolvedMeasurements:
    """Weight and height converted to every unit the formulas need.

    Attributes:
        weight_kg: Body weight in kilograms
        weight_lb: Body weight in pounds (protein targets are per lb)
        height_cm: Height in centimeters
    """

    weight_kg: float
    weight_lb: float
    height_cm: float
