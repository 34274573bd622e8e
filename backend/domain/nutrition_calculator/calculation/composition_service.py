"""CompositionService - unit conversion and body composition resolution."""

from ..core.exceptions.domain_errors import MissingProfileValueError
from ..core.ports.calculators import ICompositionResolver
from ..core.value_objects.body_composition import BodyComposition
from ..core.value_objects.measurements import ResolvedMeasurements
from ..core.value_objects.profile_input import ProfileInput
from ..core.value_objects.unit_system import UnitSystem
from .units import inches_to_cm, kg_to_lb, lb_to_kg


class CompositionService(ICompositionResolver):
    """Resolve the scalars every BMR formula is built from.

    Measurements:
        The profile's unit system selects the source field; the other
        system's fields are ignored even when populated.
        1 lb = 0.45359237 kg, 1 in = 2.54 cm.

    Body composition (first applicable wins):
        1. DEXA enabled with at least one mass: masses used as measured.
           A missing mass stays absent.
        2. Body fat known: FM = weight × BF% / 100, FFM = weight - FM.
        3. Otherwise: both absent.
    """

    def resolve_measurements(self, profile: ProfileInput) -> ResolvedMeasurements:
        """Convert height/weight from the active unit system.

        Args:
            profile: Normalized profile

        Returns:
            ResolvedMeasurements: Weight in kg and lb, height in cm

        Raises:
            MissingProfileValueError: If the active system's height or
                weight is absent

        Example:
            >>> service = CompositionService()
            >>> m = service.resolve_measurements(us_profile_180lb_70in)
            >>> round(m.weight_kg, 4), m.height_cm
            (81.6466, 177.8)
        """
        if profile.unit_system == UnitSystem.US:
            if profile.weight.lb is None:
                raise MissingProfileValueError("weight.lb")
            if profile.height.inches is None:
                raise MissingProfileValueError("height.inches")
            return ResolvedMeasurements(
                weight_kg=lb_to_kg(profile.weight.lb),
                weight_lb=float(profile.weight.lb),
                height_cm=inches_to_cm(profile.height.inches),
            )

        if profile.weight.kg is None:
            raise MissingProfileValueError("weight.kg")
        if profile.height.cm is None:
            raise MissingProfileValueError("height.cm")
        return ResolvedMeasurements(
            weight_kg=float(profile.weight.kg),
            weight_lb=kg_to_lb(profile.weight.kg),
            height_cm=float(profile.height.cm),
        )

    def resolve_body_composition(
        self, profile: ProfileInput, weight_kg: float
    ) -> BodyComposition:
        """Resolve fat/lean mass.

        Args:
            profile: Normalized profile
            weight_kg: Body weight in kilograms

        Returns:
            BodyComposition: Masses, absent where not derivable
        """
        dexa = profile.dexa
        if dexa.has_measurements():
            return BodyComposition(
                fat_mass_kg=dexa.fat_mass_kg,
                lean_mass_kg=dexa.lean_mass_kg,
            )

        if profile.knows_body_fat:
            fat_mass_kg = weight_kg * profile.body_fat_percent / 100
            return BodyComposition(
                fat_mass_kg=fat_mass_kg,
                lean_mass_kg=weight_kg - fat_mass_kg,
            )

        return BodyComposition.unknown()
