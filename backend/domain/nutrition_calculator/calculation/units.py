"""Unit conversion helpers for the calculation engine."""

import math

KG_PER_LB = 0.45359237
CM_PER_INCH = 2.54


def lb_to_kg(lb: float) -> float:
    return lb * KG_PER_LB


def kg_to_lb(kg: float) -> float:
    return kg / KG_PER_LB


def inches_to_cm(inches: float) -> float:
    return inches * CM_PER_INCH


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward positive infinity.

    Built-in ``round`` rounds ties to even (``round(2.5) == 2``); results
    shown to users round ties up (2.5 -> 3, -2.5 -> -2).

    Example:
        >>> round_half_up(1823.5)
        1824
    """
    return int(math.floor(value + 0.5))
