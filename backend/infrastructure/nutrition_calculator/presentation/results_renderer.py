"""Plain-text rendering of calculation results."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from domain.nutrition_calculator.calculation.units import round_half_up
from domain.nutrition_calculator.core.value_objects import (
    GoalMode,
    MacroTargets,
    ProfileInput,
    Results,
)

from .formatting import fmt_int, fmt_maybe_int

FALLBACK_MESSAGE = "Calculation engine not available: inputs incomplete."
COMPOSITION_NOTE = "Nelson/Muller require FM & FFM (from BF% or DEXA)."

GOAL_ORDER = (GoalMode.MAINTENANCE, GoalMode.CUT, GoalMode.BULK, GoalMode.RECOMP)


@dataclass(frozen=True)
class MacroShare:
    """Energy contributed by one macro.

    Attributes:
        name: Macro name
        grams: Grams per day
        calories: kcal per day from those grams
        percent: Share of the goal's calories (0-100)
    """

    name: str
    grams: int
    calories: int
    percent: int


def macro_breakdown(targets: MacroTargets) -> List[MacroShare]:
    """Calculate kcal and percentage share for protein, fat and carbs.

    Percentages are 0 when the calorie target is not positive.

    Args:
        targets: Goal targets

    Returns:
        List of shares in protein, fat, carbs order
    """

    def pct(calories: int) -> int:
        if targets.calories <= 0:
            return 0
        return round_half_up(calories / targets.calories * 100)

    shares = [
        ("Protein", targets.protein_g, targets.protein_calories()),
        ("Fat", targets.fat_g, targets.fat_calories()),
        ("Carbs", targets.carbs_g, targets.carbs_calories()),
    ]
    return [
        MacroShare(name=name, grams=grams, calories=calories, percent=pct(calories))
        for name, grams, calories in shares
    ]


def _stat_row(label: str, value: str, width: int = 26) -> str:
    return f"  {label:<{width}}{value}"


def render_macro_card(title: str, targets: MacroTargets) -> List[str]:
    lines = [f"{title} ({fmt_int(targets.calories)} kcal)"]
    for share in macro_breakdown(targets):
        lines.append(
            _stat_row(
                share.name,
                f"{fmt_int(share.grams)}g  "
                f"{fmt_int(share.calories)} kcal - {share.percent}%",
                width=10,
            )
        )
    return lines


def render_results(results: Optional[Results]) -> str:
    """
    Render results as a plain-text report.

    Args:
        results: Engine output, or None when it could not be produced

    Returns:
        Report text; the fallback message when results are None
    """
    if results is None:
        return FALLBACK_MESSAGE

    lines: List[str] = []

    if results.warnings:
        lines.append("Warnings")
        lines.extend(f"  - {warning}" for warning in results.warnings)
        lines.append("")

    methods = results.bmr.methods
    lines.append("BMR & TDEE")
    lines.append(
        _stat_row("Recommended BMR", f"{fmt_int(results.bmr.recommended_bmr)} kcal")
    )
    lines.append(_stat_row("TDEE", f"{fmt_int(results.tdee)} kcal"))
    lines.append("")
    lines.append("All BMR formulas")
    lines.append(_stat_row("Mifflin-St Jeor", f"{fmt_maybe_int(methods.mifflin)} kcal"))
    lines.append(
        _stat_row(
            "Revised Harris-Benedict",
            f"{fmt_maybe_int(methods.revised_harris_benedict)} kcal",
        )
    )
    lines.append(
        _stat_row("Katch-McArdle", f"{fmt_maybe_int(methods.katch_mcardle)} kcal")
    )
    lines.append(_stat_row("Nelson", f"{fmt_maybe_int(methods.nelson)} kcal"))
    lines.append(_stat_row("Muller", f"{fmt_maybe_int(methods.muller)} kcal"))
    lines.append(f"  {COMPOSITION_NOTE}")

    for goal in GOAL_ORDER:
        lines.append("")
        lines.extend(render_macro_card(goal.card_title(), results.for_goal(goal)))

    return "\n".join(lines)


def profile_snapshot(profile: ProfileInput) -> Dict[str, Any]:
    """Serialize a profile with the camelCase keys of the results view."""
    return {
        "unitSystem": profile.unit_system.value,
        "sex": profile.sex.value,
        "ageYears": profile.age_years,
        "height": {"cm": profile.height.cm, "inches": profile.height.inches},
        "weight": {"kg": profile.weight.kg, "lb": profile.weight.lb},
        "bodyFatMode": profile.body_fat_mode.value,
        "bodyFatPercent": profile.body_fat_percent,
        "activity": {
            "preset": (
                profile.activity.preset.value
                if profile.activity.preset is not None
                else None
            ),
            "useCustom": profile.activity.use_custom,
            "customMultiplier": profile.activity.custom_multiplier,
        },
        "deltas": {
            "cut": profile.deltas.cut,
            "bulk": profile.deltas.bulk,
            "recomp": profile.deltas.recomp,
        },
        "bulkProteinGPerLb": profile.bulk_protein_g_per_lb,
        "dexa": {
            "enabled": profile.dexa.enabled,
            "fatMassKg": profile.dexa.fat_mass_kg,
            "leanMassKg": profile.dexa.lean_mass_kg,
        },
    }
