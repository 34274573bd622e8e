"""Domain exceptions for the nutrition calculator."""

from dataclasses import dataclass
from typing import Sequence


class NutritionCalculatorError(Exception):
    """Base exception for nutrition calculator domain errors."""

    pass


class MissingProfileValueError(NutritionCalculatorError):
    """Raised when a value required by the active selection is absent.

    The engine never guesses a default: a missing height/weight for the
    selected unit system, or a missing activity multiplier for the selected
    activity source, aborts the calculation.
    """

    def __init__(self, field: str):
        super().__init__(f"Missing required profile value: {field}")
        self.field = field


class InvalidProfileInputError(NutritionCalculatorError):
    """Raised when raw form values fail validation.

    Carries every issue found, not just the first one.
    """

    def __init__(self, issues: Sequence["FieldIssue"]):
        summary = "; ".join(f"{issue.path}: {issue.message}" for issue in issues)
        super().__init__(f"Invalid profile input: {summary}")
        self.issues = list(issues)


@dataclass(frozen=True)
class FieldIssue:
    """A single validation problem attached to a form field.

    Attributes:
        path: Form field name
        message: Human-readable problem description
    """

    path: str
    message: str
