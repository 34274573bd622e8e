"""BodyComposition value object - fat mass / lean mass decomposition."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class BodyComposition:
    """Fat mass (FM) and fat-free mass (FFM) in kilograms.

    Either mass may be absent; formulas requiring an absent mass are
    skipped rather than evaluated with a placeholder.

    Attributes:
        fat_mass_kg: Fat mass, None if not derivable
        lean_mass_kg: Lean mass, None if not derivable
    """

    fat_mass_kg: Optional[float] = None
    lean_mass_kg: Optional[float] = None

    @property
    def has_lean_mass(self) -> bool:
        return self.lean_mass_kg is not None

    @property
    def is_complete(self) -> bool:
        """Both masses resolved."""
        return self.fat_mass_kg is not None and self.lean_mass_kg is not None

    @classmethod
    def unknown(cls) -> "BodyComposition":
        return cls()
