"""Input normalization for the nutrition calculator."""

from .profile_form import (
    FormDefaults,
    ProfileForm,
    collect_form_issues,
    normalize_body_fat_percent,
    normalize_profile,
    parse_profile_form,
    to_profile_input,
)

__all__ = [
    "FormDefaults",
    "ProfileForm",
    "collect_form_issues",
    "normalize_body_fat_percent",
    "normalize_profile",
    "parse_profile_form",
    "to_profile_input",
]
