"""Library defaults, overridable through ``FUZZBRIDGE_*`` environment variables."""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class Settings(BaseModel):
    """Defaults used by the CLI when an option is not given."""

    score_cutoff: float = 50.0
    limit: int = 3
    scorer: str = "WRatio"
    metric: str = "levenshtein"
    log_level: str = "WARNING"


def _env_number(name: str, default, cast):
    raw = os.getenv(name, "")
    if not raw.strip():
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a valid %s", name, raw, cast.__name__)
        return default


def _env_log_level(name: str, default: str) -> str:
    raw = os.getenv(name, "").strip().upper()
    if not raw:
        return default
    if not isinstance(logging.getLevelName(raw), int):
        logger.warning("Ignoring %s=%r: not a logging level", name, raw)
        return default
    return raw


def get_settings() -> Settings:
    """Read settings from the environment, falling back to the defaults."""
    defaults = Settings()
    return Settings(
        score_cutoff=_env_number("FUZZBRIDGE_SCORE_CUTOFF", defaults.score_cutoff, float),
        limit=_env_number("FUZZBRIDGE_LIMIT", defaults.limit, int),
        scorer=os.getenv("FUZZBRIDGE_SCORER", "") or defaults.scorer,
        metric=os.getenv("FUZZBRIDGE_METRIC", "") or defaults.metric,
        log_level=_env_log_level("FUZZBRIDGE_LOG_LEVEL", defaults.log_level),
    )
