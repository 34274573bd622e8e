"""ProfileForm - validation and normalization of raw form values.

Turns loosely-typed form values (strings from a form or CLI flags) into the
canonical ``ProfileInput`` consumed by the calculation engine. Every
guarantee the engine relies on is established here.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from domain.nutrition_calculator.core.exceptions.domain_errors import (
    FieldIssue,
    InvalidProfileInputError,
)
from domain.nutrition_calculator.core.value_objects import (
    ActivityPreset,
    ActivitySelection,
    BodyFatMode,
    CalorieDeltas,
    DexaInput,
    Height,
    ProfileInput,
    Sex,
    UnitSystem,
    Weight,
)

BODY_FAT_MIN_PERCENT = 0.0
BODY_FAT_MAX_PERCENT = 80.0
BULK_PROTEIN_MIN_G_PER_LB = 0.7
BULK_PROTEIN_MAX_G_PER_LB = 1.0

_OPTIONAL_NUMBER_FIELDS = (
    "height_inches",
    "height_cm",
    "weight_lb",
    "weight_kg",
    "body_fat_percent",
    "activity_preset",
    "activity_custom",
    "dexa_fat_mass_kg",
    "dexa_lean_mass_kg",
)


@dataclass(frozen=True)
class FormDefaults:
    """Values used for form fields the user left untouched.

    Attributes:
        cut_delta: Default cut offset (kcal/day)
        bulk_delta: Default bulk offset (kcal/day)
        recomp_delta: Default recomp offset (kcal/day)
        bulk_protein_g_per_lb: Default bulk protein density
    """

    cut_delta: float = -500.0
    bulk_delta: float = 500.0
    recomp_delta: float = -200.0
    bulk_protein_g_per_lb: float = 1.0

    def as_form_values(self) -> Dict[str, float]:
        return {
            "cut_delta": self.cut_delta,
            "bulk_delta": self.bulk_delta,
            "recomp_delta": self.recomp_delta,
            "bulk_protein_g_per_lb": self.bulk_protein_g_per_lb,
        }


class ProfileForm(BaseModel):
    """
    Raw profile form values after type coercion.

    Height and weight are split by unit system; which pair is required
    depends on ``unit_system`` and is checked by ``collect_form_issues``.
    Numeric fields reject NaN and infinity.

    Example:
        >>> form = ProfileForm(
        ...     unit_system="us", sex="male", age_years="30",
        ...     height_inches="70", weight_lb="180", activity_preset="1.55",
        ... )
        >>> form.age_years
        30
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    unit_system: UnitSystem
    sex: Sex
    age_years: int = Field(..., gt=0, description="Age in whole years")

    height_inches: Optional[float] = None
    height_cm: Optional[float] = None
    weight_lb: Optional[float] = None
    weight_kg: Optional[float] = None

    body_fat_mode: BodyFatMode = BodyFatMode.UNKNOWN
    body_fat_percent: Optional[float] = None

    activity_preset: Optional[float] = None
    activity_use_custom: bool = False
    activity_custom: Optional[float] = None

    cut_delta: float = -500.0
    bulk_delta: float = 500.0
    recomp_delta: float = -200.0

    bulk_protein_g_per_lb: float = 1.0

    dexa_enabled: bool = False
    dexa_fat_mass_kg: Optional[float] = None
    dexa_lean_mass_kg: Optional[float] = None

    @field_validator(*_OPTIONAL_NUMBER_FIELDS, mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        """Treat empty form inputs as missing."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


def normalize_body_fat_percent(raw: float) -> float:
    """Normalize a body-fat entry to a percentage.

    Users should enter 20 meaning 20%; an entry in (0, 1] is read as a
    fraction and scaled (0.2 -> 20). Non-finite values pass through.

    Args:
        raw: Body fat as entered

    Returns:
        float: Body fat percentage

    Example:
        >>> normalize_body_fat_percent(0.2)
        20.0
    """
    if not math.isfinite(raw):
        return raw
    if 0 < raw <= 1:
        return raw * 100
    return raw


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _is_positive(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value) and value > 0


def _is_finite(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value)


def collect_form_issues(form: ProfileForm) -> List[FieldIssue]:
    """Check cross-field rules.

    Args:
        form: Type-coerced form values

    Returns:
        List of issues, empty when the form is complete
    """
    issues: List[FieldIssue] = []

    if form.unit_system == UnitSystem.US:
        if not _is_positive(form.height_inches):
            issues.append(FieldIssue("height_inches", "Height (inches) is required"))
        if not _is_positive(form.weight_lb):
            issues.append(FieldIssue("weight_lb", "Weight (lb) is required"))
    else:
        if not _is_positive(form.height_cm):
            issues.append(FieldIssue("height_cm", "Height (cm) is required"))
        if not _is_positive(form.weight_kg):
            issues.append(FieldIssue("weight_kg", "Weight (kg) is required"))

    if form.body_fat_mode == BodyFatMode.KNOWN and not _is_finite(form.body_fat_percent):
        issues.append(
            FieldIssue(
                "body_fat_percent",
                "Body fat % is required when you choose “I know my BF%”",
            )
        )

    if form.activity_use_custom:
        if not _is_finite(form.activity_custom):
            issues.append(
                FieldIssue("activity_custom", "Custom activity multiplier is required")
            )
    elif form.activity_preset not in {preset.value for preset in ActivityPreset}:
        issues.append(
            FieldIssue(
                "activity_preset", "Choose an activity preset (or enable custom)"
            )
        )

    if form.dexa_enabled and not (
        _is_positive(form.dexa_fat_mass_kg) or _is_positive(form.dexa_lean_mass_kg)
    ):
        issues.append(
            FieldIssue(
                "dexa_fat_mass_kg",
                "If DEXA is enabled, enter fat mass, lean mass, or both.",
            )
        )

    if not _is_finite(form.bulk_protein_g_per_lb):
        issues.append(
            FieldIssue("bulk_protein_g_per_lb", "Bulk protein target must be a number")
        )
    elif not (
        BULK_PROTEIN_MIN_G_PER_LB
        <= form.bulk_protein_g_per_lb
        <= BULK_PROTEIN_MAX_G_PER_LB
    ):
        issues.append(
            FieldIssue(
                "bulk_protein_g_per_lb",
                "Bulk protein target should be between 0.7 and 1.0 g/lb",
            )
        )

    return issues


def parse_profile_form(
    raw: Mapping[str, Any], defaults: Optional[FormDefaults] = None
) -> ProfileForm:
    """Coerce and validate raw form values.

    Args:
        raw: Field name -> value (strings or numbers); None means unset
        defaults: Values for fields missing from ``raw``

    Returns:
        ProfileForm: Validated form

    Raises:
        InvalidProfileInputError: With every type and cross-field issue
    """
    values: Dict[str, Any] = (defaults or FormDefaults()).as_form_values()
    values.update({key: value for key, value in raw.items() if value is not None})

    try:
        form = ProfileForm(**values)
    except ValidationError as e:
        raise InvalidProfileInputError(
            [
                FieldIssue(".".join(str(part) for part in error["loc"]), error["msg"])
                for error in e.errors()
            ]
        ) from e

    issues = collect_form_issues(form)
    if issues:
        raise InvalidProfileInputError(issues)
    return form


def to_profile_input(form: ProfileForm) -> ProfileInput:
    """Convert a validated form into the engine's canonical input.

    Only the active unit system's measurements, the active activity
    source and (when enabled) the DEXA masses are carried over. Body fat
    is normalized to a percentage and clamped to [0, 80].

    Args:
        form: Form that passed ``collect_form_issues``

    Returns:
        ProfileInput: Canonical profile
    """
    is_us = form.unit_system == UnitSystem.US

    body_fat_percent: Optional[float] = None
    if form.body_fat_mode == BodyFatMode.KNOWN and form.body_fat_percent is not None:
        body_fat_percent = _clamp(
            normalize_body_fat_percent(form.body_fat_percent),
            BODY_FAT_MIN_PERCENT,
            BODY_FAT_MAX_PERCENT,
        )

    if form.activity_use_custom:
        activity = ActivitySelection(
            use_custom=True, custom_multiplier=form.activity_custom
        )
    else:
        activity = ActivitySelection(
            preset=ActivityPreset(form.activity_preset), use_custom=False
        )

    return ProfileInput(
        unit_system=form.unit_system,
        sex=form.sex,
        age_years=form.age_years,
        height=Height(
            inches=form.height_inches if is_us else None,
            cm=None if is_us else form.height_cm,
        ),
        weight=Weight(
            lb=form.weight_lb if is_us else None,
            kg=None if is_us else form.weight_kg,
        ),
        body_fat_mode=form.body_fat_mode,
        body_fat_percent=body_fat_percent,
        activity=activity,
        deltas=CalorieDeltas(
            cut=form.cut_delta,
            bulk=form.bulk_delta,
            recomp=form.recomp_delta,
        ),
        bulk_protein_g_per_lb=form.bulk_protein_g_per_lb,
        dexa=DexaInput(
            enabled=form.dexa_enabled,
            fat_mass_kg=form.dexa_fat_mass_kg if form.dexa_enabled else None,
            lean_mass_kg=form.dexa_lean_mass_kg if form.dexa_enabled else None,
        ),
    )


def normalize_profile(
    raw: Mapping[str, Any], defaults: Optional[FormDefaults] = None
) -> ProfileInput:
    """Validate raw form values and build a ``ProfileInput`` in one step."""
    return to_profile_input(parse_profile_form(raw, defaults))
