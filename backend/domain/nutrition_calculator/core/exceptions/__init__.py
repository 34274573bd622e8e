"""Domain exceptions for the nutrition calculator."""

from .domain_errors import (
    FieldIssue,
    InvalidProfileInputError,
    MissingProfileValueError,
    NutritionCalculatorError,
)

__all__ = [
    "NutritionCalculatorError",
    "MissingProfileValueError",
    "InvalidProfileInputError",
    "FieldIssue",
]
