"""Pydantic models describing search filters and scraper settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TYPES = "hourly,fixed"
DEFAULT_SKILLS = "7,9,13,31,68,137,305,323,335,500,598,613,673,759,913,1031,1087,1088,1936,2376"
DEFAULT_CLIENT_COUNTRIES: tuple[str, ...] = (
    "ca", "au", "no", "de", "se", "ch", "gb", "us", "at", "fr", "jp", "ae",
    "es", "lu", "ie", "nl", "be", "fi", "it", "sg", "kr", "hk", "is", "nz",
)
DEFAULT_SORT = "latest"
ALL_SKILLS = "all"
SORT_OPTIONS = ("latest", "oldest", "lowestPrice", "highestPrice", "fewestBids", "mostBids")

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class FilterConfig(BaseModel):
    """Immutable snapshot of every search filter for one run.

    Numeric bounds use ``0`` as the "unbounded" sentinel; the query builder
    omits any bound that is not strictly positive.
    """

    model_config = ConfigDict(frozen=True)

    types: str = DEFAULT_TYPES
    client_countries: tuple[str, ...] = DEFAULT_CLIENT_COUNTRIES
    fixed_price_min: int = 0
    fixed_price_max: int = 0
    hourly_rate_min: int = 0
    hourly_rate_max: int = 0
    skills: str = DEFAULT_SKILLS
    sort: str = DEFAULT_SORT
    query: str = ""
    page: int = 1

    @field_validator("client_countries", mode="before")
    @classmethod
    def _split_countries(cls, value: Any) -> tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, str):
            value = value.split(",")
        codes = []
        for item in value:
            if not isinstance(item, str):
                # unquoted YAML scalars such as `no` load as booleans
                raise ValueError(f"country code must be a string, got {item!r}; quote it in the preset")
            if item.strip():
                codes.append(item.strip())
        return tuple(codes)

    @field_validator("types", "skills", "sort", "query", mode="before")
    @classmethod
    def _strip_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value).strip()

    @property
    def all_skills(self) -> bool:
        """True when the caller asked for no skill filter."""

        return self.skills in ("", ALL_SKILLS)

    def with_overrides(self, **overrides: Any) -> "FilterConfig":
        """Return a new config with non-``None`` overrides applied."""

        changes = {key: value for key, value in overrides.items() if value is not None}
        if not changes:
            return self
        payload = self.model_dump()
        payload.update(changes)
        return FilterConfig.model_validate(payload)


class ScraperSettings(BaseModel):
    """Site and transport settings shared by the pipeline stages."""

    base_url: str = "https://www.freelancer.com"
    search_path: str = "/search/projects"
    timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
    output_dir: Path = Field(default=Path("."))

    @field_validator("base_url", mode="before")
    @classmethod
    def _trim_base_url(cls, value: Any) -> str:
        text = str(value).strip().rstrip("/")
        if not text.startswith(("http://", "https://")):
            raise ValueError("base_url must be an absolute http(s) URL")
        return text

    @field_validator("search_path", mode="before")
    @classmethod
    def _normalise_path(cls, value: Any) -> str:
        text = str(value).strip()
        return text if text.startswith("/") else f"/{text}"

    @field_validator("timeout")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("timeout must be greater than 0")
        return value

    @field_validator("output_dir", mode="before")
    @classmethod
    def _coerce_dir(cls, value: Any) -> Path:
        return Path(value)

    @property
    def search_url(self) -> str:
        return f"{self.base_url}{self.search_path}"


class RunConfig(BaseModel):
    """Configuration file payload: settings plus a filter preset."""

    settings: ScraperSettings = Field(default_factory=ScraperSettings)
    filters: FilterConfig = Field(default_factory=FilterConfig)


__all__ = [
    "ALL_SKILLS",
    "DEFAULT_CLIENT_COUNTRIES",
    "DEFAULT_SKILLS",
    "DEFAULT_SORT",
    "DEFAULT_TYPES",
    "DEFAULT_USER_AGENT",
    "FilterConfig",
    "RunConfig",
    "SORT_OPTIONS",
    "ScraperSettings",
]
