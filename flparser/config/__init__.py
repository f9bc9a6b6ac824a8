"""Configuration package exports."""

from .loader import CONFIG_EXTENSIONS, load_run_config, save_run_config
from .models import (
    ALL_SKILLS,
    DEFAULT_CLIENT_COUNTRIES,
    DEFAULT_SKILLS,
    DEFAULT_SORT,
    DEFAULT_TYPES,
    DEFAULT_USER_AGENT,
    SORT_OPTIONS,
    FilterConfig,
    RunConfig,
    ScraperSettings,
)

__all__ = [
    "ALL_SKILLS",
    "CONFIG_EXTENSIONS",
    "DEFAULT_CLIENT_COUNTRIES",
    "DEFAULT_SKILLS",
    "DEFAULT_SORT",
    "DEFAULT_TYPES",
    "DEFAULT_USER_AGENT",
    "FilterConfig",
    "RunConfig",
    "SORT_OPTIONS",
    "ScraperSettings",
    "load_run_config",
    "save_run_config",
]
