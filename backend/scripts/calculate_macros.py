#!/usr/bin/env python
"""Calculate BMR, TDEE and macro targets from the command line.

Examples:
    calculate_macros.py --sex male --age 30 --height-in 70 --weight-lb 180 \
        --activity 1.55
    calculate_macros.py --units metric --sex female --age 28 --height-cm 165 \
        --weight-kg 60 --body-fat 24 --activity 1.375 --json

Exit codes:
    0 success
    1 invalid input
    2 results could not be calculated
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from application.nutrition_calculator.normalization.profile_form import (
    normalize_profile,
)
from application.nutrition_calculator.queries.calculate_results import (
    CalculateResultsQuery,
    CalculateResultsQueryHandler,
)
from domain.nutrition_calculator.core.exceptions.domain_errors import (
    InvalidProfileInputError,
)
from infrastructure.config import configure_logging, get_form_defaults, load_environment
from infrastructure.nutrition_calculator.presentation.results_renderer import (
    FALLBACK_MESSAGE,
    profile_snapshot,
    render_results,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Nutrition calculator: BMR, TDEE and macro targets."
    )
    parser.add_argument("--units", dest="unit_system", choices=["us", "metric"], default="us")
    parser.add_argument("--sex", choices=["male", "female"], required=True)
    parser.add_argument("--age", dest="age_years", required=True)

    parser.add_argument("--height-in", dest="height_inches")
    parser.add_argument("--height-cm", dest="height_cm")
    parser.add_argument("--weight-lb", dest="weight_lb")
    parser.add_argument("--weight-kg", dest="weight_kg")

    parser.add_argument(
        "--body-fat",
        dest="body_fat_percent",
        help="Body fat %% (20 or 0.2); implies the known body-fat mode",
    )

    parser.add_argument(
        "--activity",
        dest="activity_preset",
        help="Preset multiplier: 1.2, 1.375, 1.55, 1.725 or 1.9",
    )
    parser.add_argument(
        "--custom-activity",
        dest="activity_custom",
        help="Custom multiplier; overrides --activity",
    )

    parser.add_argument("--cut-delta", dest="cut_delta")
    parser.add_argument("--bulk-delta", dest="bulk_delta")
    parser.add_argument("--recomp-delta", dest="recomp_delta")
    parser.add_argument("--bulk-protein", dest="bulk_protein_g_per_lb", help="g/lb, 0.7-1.0")

    parser.add_argument("--dexa-fat-kg", dest="dexa_fat_mass_kg")
    parser.add_argument("--dexa-lean-kg", dest="dexa_lean_mass_kg")

    parser.add_argument("--json", dest="as_json", action="store_true", help="Print JSON")
    return parser


def to_form_values(args: argparse.Namespace) -> Dict[str, Any]:
    """Map parsed flags to profile form fields."""
    values: Dict[str, Any] = {
        key: value
        for key, value in vars(args).items()
        if key != "as_json" and value is not None
    }
    values["body_fat_mode"] = "known" if args.body_fat_percent is not None else "unknown"
    values["activity_use_custom"] = args.activity_custom is not None
    values["dexa_enabled"] = (
        args.dexa_fat_mass_kg is not None or args.dexa_lean_mass_kg is not None
    )
    return values


def main(argv: Optional[List[str]] = None) -> int:
    load_environment()
    configure_logging()

    args = build_parser().parse_args(argv)

    try:
        profile = normalize_profile(to_form_values(args), defaults=get_form_defaults())
    except InvalidProfileInputError as e:
        for issue in e.issues:
            print(f"[ERROR] {issue.path}: {issue.message}", file=sys.stderr)
        return 1

    results = CalculateResultsQueryHandler().handle(CalculateResultsQuery(profile=profile))
    if results is None:
        print(FALLBACK_MESSAGE, file=sys.stderr)
        return 2

    if args.as_json:
        payload = {"results": results.to_dict(), "input": profile_snapshot(profile)}
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        print(render_results(results))
    return 0


if __name__ == "__main__":
    sys.exit(main())
