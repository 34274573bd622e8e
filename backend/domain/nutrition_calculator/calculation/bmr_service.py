"""BMRService - Basal Metabolic Rate formula bank."""

from ..core.ports.calculators import IBMRCalculator
from ..core.value_objects.bmr import BMRBreakdown, BMRMethods
from ..core.value_objects.body_composition import BodyComposition
from ..core.value_objects.body_fat_mode import BodyFatMode
from ..core.value_objects.measurements import ResolvedMeasurements
from ..core.value_objects.profile_input import ProfileInput
from ..core.value_objects.sex import Sex


class BMRService(IBMRCalculator):
    """Calculate Basal Metabolic Rate with five competing equations.

    Population-average formulas (always computed):
        Mifflin-St Jeor:
            Men:   10 × weight(kg) + 6.25 × height(cm) - 5 × age + 5
            Women: 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 161
        Revised Harris-Benedict (Roza & Shizgal, 1984):
            Men:   88.362 + 13.397 × kg + 4.799 × cm - 5.677 × age
            Women: 447.593 + 9.247 × kg + 3.098 × cm - 4.33 × age

    Composition-aware formulas (computed only when masses resolve):
        Katch-McArdle: 370 + 21.6 × FFM
        Nelson:        25.8 × FFM + 4.04 × FM
        Muller:        13.587 × FFM + 9.613 × FM + 198

    Recommended BMR:
        Katch-McArdle when body fat is known and lean mass resolved,
        otherwise the mean of Mifflin-St Jeor and Revised Harris-Benedict.

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. Am J Clin Nutr.
        1990;51(2):241-247.
        Roza AM, Shizgal HM. Am J Clin Nutr. 1984;40(1):168-182.
    """

    def calculate(
        self,
        profile: ProfileInput,
        measurements: ResolvedMeasurements,
        composition: BodyComposition,
    ) -> BMRBreakdown:
        """Calculate every available BMR estimate.

        Args:
            profile: Normalized profile (sex, age, body fat mode)
            measurements: Weight in kg and height in cm
            composition: Fat and lean mass, possibly absent

        Returns:
            BMRBreakdown: Unrounded estimates and the recommended value

        Example:
            >>> service = BMRService()
            >>> breakdown = service.calculate(profile, measurements, composition)
            >>> breakdown.methods.mifflin
            1780.0  # 80 kg, 180 cm, 30 y, male
        """
        weight_kg = measurements.weight_kg
        height_cm = measurements.height_cm
        age = profile.age_years
        lean = composition.lean_mass_kg
        fat = composition.fat_mass_kg

        methods = BMRMethods(
            mifflin=self.mifflin_st_jeor(weight_kg, height_cm, age, profile.sex),
            revised_harris_benedict=self.revised_harris_benedict(
                weight_kg, height_cm, age, profile.sex
            ),
            katch_mcardle=(
                self.katch_mcardle(lean) if composition.has_lean_mass else None
            ),
            nelson=self.nelson(lean, fat) if composition.is_complete else None,
            muller=self.muller(lean, fat) if composition.is_complete else None,
        )

        return BMRBreakdown(
            recommended_bmr=self._recommend(profile.body_fat_mode, methods),
            methods=methods,
        )

    @staticmethod
    def mifflin_st_jeor(
        weight_kg: float, height_cm: float, age: int, sex: Sex
    ) -> float:
        base = 10 * weight_kg + 6.25 * height_cm - 5 * age
        if sex == Sex.MALE:
            return base + 5
        return base - 161

    @staticmethod
    def revised_harris_benedict(
        weight_kg: float, height_cm: float, age: int, sex: Sex
    ) -> float:
        if sex == Sex.MALE:
            return 88.362 + 13.397 * weight_kg + 4.799 * height_cm - 5.677 * age
        return 447.593 + 9.247 * weight_kg + 3.098 * height_cm - 4.33 * age

    @staticmethod
    def katch_mcardle(lean_mass_kg: float) -> float:
        return 370 + 21.6 * lean_mass_kg

    @staticmethod
    def nelson(lean_mass_kg: float, fat_mass_kg: float) -> float:
        return 25.8 * lean_mass_kg + 4.04 * fat_mass_kg

    @staticmethod
    def muller(lean_mass_kg: float, fat_mass_kg: float) -> float:
        return 13.587 * lean_mass_kg + 9.613 * fat_mass_kg + 198

    @staticmethod
    def _recommend(body_fat_mode: BodyFatMode, methods: BMRMethods) -> float:
        # Presence check only: a computed 0 is still a computed value.
        if body_fat_mode == BodyFatMode.KNOWN and methods.katch_mcardle is not None:
            return methods.katch_mcardle
        return (methods.mifflin + methods.revised_harris_benedict) / 2
