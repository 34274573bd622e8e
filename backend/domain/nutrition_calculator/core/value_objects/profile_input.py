"""ProfileInput value object - canonical, normalized calculator input."""

from dataclasses import dataclass, field
from typing import Optional

from .activity import ActivitySelection
from .body_fat_mode import BodyFatMode
from .calorie_deltas import CalorieDeltas
from .dexa import DexaInput
from .measurements import Height, Weight
from .sex import Sex
from .unit_system import UnitSystem


@dataclass(frozen=True)
class ProfileInput:
    """Body profile consumed by the calculation engine.

    Produced by the input normalizer, which guarantees that:
    - the active unit system's height and weight are populated
    - age_years is a positive integer
    - the active activity source is populated
    - body_fat_percent is a percentage in [0, 80] when mode is KNOWN
    - at least one DEXA mass is present when DEXA is enabled
    - bulk_protein_g_per_lb is within [0.7, 1.0]

    The engine trusts these guarantees and never mutates the instance.

    Attributes:
        unit_system: Selects the authoritative half of height/weight
        sex: Biological sex
        age_years: Age in whole years
        height: Unit-paired height
        weight: Unit-paired weight
        body_fat_mode: Whether body_fat_percent is used
        body_fat_percent: Body fat as a percentage (20 means 20%)
        activity: Activity multiplier source
        deltas: Per-goal calorie offsets
        bulk_protein_g_per_lb: Protein density for the bulk goal
        dexa: DEXA scan results
    """

    unit_system: UnitSystem
    sex: Sex
    age_years: int
    height: Height
    weight: Weight
    body_fat_mode: BodyFatMode = BodyFatMode.UNKNOWN
    body_fat_percent: Optional[float] = None
    activity: ActivitySelection = field(default_factory=ActivitySelection)
    deltas: CalorieDeltas = field(default_factory=CalorieDeltas)
    bulk_protein_g_per_lb: float = 1.0
    dexa: DexaInput = field(default_factory=DexaInput)

    @property
    def knows_body_fat(self) -> bool:
        """Body fat mode is KNOWN and a percentage was supplied."""
        return (
            self.body_fat_mode == BodyFatMode.KNOWN
            and self.body_fat_percent is not None
        )
