"""DexaInput value object - body composition from a DEXA scan."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DexaInput:
    """Fat/lean mass measured by dual-energy X-ray absorptiometry.

    When enabled and at least one mass is present, DEXA figures take
    precedence over masses derived from body-fat percentage.

    Attributes:
        enabled: Whether DEXA figures should be used
        fat_mass_kg: Fat mass in kilograms
        lean_mass_kg: Lean (fat-free) mass in kilograms
    """

    enabled: bool = False
    fat_mass_kg: Optional[float] = None
    lean_mass_kg: Optional[float] = None

    def has_measurements(self) -> bool:
        """Check whether the scan contributes any mass.

        Returns:
            bool: True if enabled and at least one mass is present
        """
        return self.enabled and (
            self.fat_mass_kg is not None or self.lean_mass_kg is not None
        )
