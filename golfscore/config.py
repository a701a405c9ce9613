"""Scoring engine configuration."""

from functools import lru_cache
from pathlib import Path

from .schemas import ScoringConfig
from .utils import load_json

CONFIG_PATH = Path(__file__).parent.parent / 'data' / 'scoring_config.json'


@lru_cache(maxsize=1)
def get_config() -> ScoringConfig:
    """
    Load engine configuration from data/scoring_config.json.

    The configuration is read once and cached.

    Returns:
        ScoringConfig with validated settings

    Raises:
        FileNotFoundError: If scoring_config.json doesn't exist
        ValueError: If the config file has an invalid structure
    """
    return load_json(CONFIG_PATH, schema=ScoringConfig)


def get_default_format() -> str:
    """Scoring format used when a competition doesn't name one."""
    return get_config().default_format


def get_default_scoring_mode() -> str:
    """Scoring mode used when a competition doesn't name one."""
    return get_config().default_scoring_mode


def get_standard_ratings() -> tuple[float, int]:
    """(course rating, slope rating) used when a tee has no ratings."""
    config = get_config()
    return config.standard_course_rating, config.standard_slope_rating


def get_points_multiplier() -> float:
    return get_config().points_multiplier


def clear_config_cache() -> None:
    """
    Clear the configuration cache.

    Use this if scoring_config.json changes while the process is running.
    """
    get_config.cache_clear()
