"""Presentation helpers for the nutrition calculator."""

from .formatting import PLACEHOLDER, fmt_int, fmt_maybe_int
from .results_renderer import (
    FALLBACK_MESSAGE,
    MacroShare,
    macro_breakdown,
    profile_snapshot,
    render_results,
)

__all__ = [
    "PLACEHOLDER",
    "fmt_int",
    "fmt_maybe_int",
    "FALLBACK_MESSAGE",
    "MacroShare",
    "macro_breakdown",
    "profile_snapshot",
    "render_results",
]
