"""Domain layer for the nutrition calculator.

This package implements the calculation logic (BMR, TDEE, macro targets),
decoupled from input normalization and presentation.
"""
