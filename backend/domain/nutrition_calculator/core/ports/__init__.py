"""Ports for the nutrition calculator domain."""

from .calculators import (
    IBMRCalculator,
    ICompositionResolver,
    IMacroCalculator,
    ITDEECalculator,
)

__all__ = [
    "ICompositionResolver",
    "IBMRCalculator",
    "ITDEECalculator",
    "IMacroCalculator",
]
