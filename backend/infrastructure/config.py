"""Configuration utilities for infrastructure layer."""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

import structlog
from dotenv import load_dotenv

from application.nutrition_calculator.normalization.profile_form import (
    FormDefaults,
)

logger = logging.getLogger(__name__)

_DEFAULTS = FormDefaults()


def load_environment(env_path: Optional[Path] = None) -> bool:
    """
    Load variables from a .env file, keeping values already exported.

    Args:
        env_path: Explicit .env location; defaults to the repository root

    Returns:
        True if a file was loaded
    """
    path = env_path or Path(__file__).resolve().parent.parent.parent / ".env"
    if not path.exists():
        return False
    load_dotenv(path)
    logger.debug("Loaded environment from: %s", path)
    return True


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Invalid value for %s=%r, using default %s", name, raw, default)
        return default


def get_form_defaults() -> FormDefaults:
    """
    Get defaults for calorie deltas and bulk protein density.

    Environment variables:
        NUTRITION_DEFAULT_CUT_DELTA (default -500)
        NUTRITION_DEFAULT_BULK_DELTA (default 500)
        NUTRITION_DEFAULT_RECOMP_DELTA (default -200)
        NUTRITION_DEFAULT_BULK_PROTEIN_G_PER_LB (default 1.0)

    Returns:
        FormDefaults built from the environment
    """
    return FormDefaults(
        cut_delta=_get_float("NUTRITION_DEFAULT_CUT_DELTA", _DEFAULTS.cut_delta),
        bulk_delta=_get_float("NUTRITION_DEFAULT_BULK_DELTA", _DEFAULTS.bulk_delta),
        recomp_delta=_get_float(
            "NUTRITION_DEFAULT_RECOMP_DELTA", _DEFAULTS.recomp_delta
        ),
        bulk_protein_g_per_lb=_get_float(
            "NUTRITION_DEFAULT_BULK_PROTEIN_G_PER_LB",
            _DEFAULTS.bulk_protein_g_per_lb,
        ),
    )


def get_log_level() -> int:
    """
    Get log level from LOG_LEVEL.

    Returns:
        Logging level, INFO when unset or unknown
    """
    name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: Optional[int] = None) -> None:
    """
    Route stdlib and structlog output to stderr.

    stdout stays reserved for calculation output.
    """
    resolved = level if level is not None else get_log_level()
    logging.basicConfig(
        level=resolved,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
