"""Number formatting for calculator output."""

import math
from typing import Optional

from domain.nutrition_calculator.calculation.units import round_half_up

PLACEHOLDER = "—"


def fmt_int(n: float) -> str:
    """Format a number as a rounded integer with thousands separators.

    Example:
        >>> fmt_int(2827.08)
        '2,827'
    """
    if not math.isfinite(n):
        return PLACEHOLDER
    return f"{round_half_up(n):,}"


def fmt_maybe_int(n: Optional[float]) -> str:
    """Like ``fmt_int`` but renders a missing value as a placeholder."""
    if n is None:
        return PLACEHOLDER
    return fmt_int(n)
