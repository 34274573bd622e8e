"""Queries for the nutrition calculator."""

from .calculate_results import CalculateResultsQuery, CalculateResultsQueryHandler

__all__ = ["CalculateResultsQuery", "CalculateResultsQueryHandler"]
