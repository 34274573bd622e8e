"""Calculation services for the nutrition calculator."""

from .bmr_service import BMRService
from .composition_service import CompositionService
from .engine import NutritionEngine, calculate_all
from .macro_service import LOW_FAT_WARNING, MacroService
from .tdee_service import TDEEService

__all__ = [
    "CompositionService",
    "BMRService",
    "TDEEService",
    "MacroService",
    "NutritionEngine",
    "calculate_all",
    "LOW_FAT_WARNING",
]
