"""Translate a FilterConfig into the search URL and its provenance parameters."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping
from urllib.parse import urlencode

from ..config import ALL_SKILLS, DEFAULT_SORT, FilterConfig, ScraperSettings

QueryParameters = Mapping[str, str]

_BOUNDS = (
    ("projectFixedPriceMin", "fixed_price_min"),
    ("projectFixedPriceMax", "fixed_price_max"),
    ("projectHourlyRateMin", "hourly_rate_min"),
    ("projectHourlyRateMax", "hourly_rate_max"),
)


@dataclass(frozen=True, slots=True)
class BuiltQuery:
    """Request URL plus the read-only parameter map recorded for provenance."""

    url: str
    params: QueryParameters


class QueryBuilder:
    """Build the listing URL; no network access happens here."""

    def __init__(self, settings: ScraperSettings | None = None) -> None:
        self.settings = settings or ScraperSettings()

    def build(self, config: FilterConfig) -> BuiltQuery:
        url_params: dict[str, str] = {}
        record: dict[str, str] = {}

        def include(key: str, value: str, *, in_url: bool = True) -> None:
            record[key] = value
            if in_url:
                url_params[key] = value

        if config.types:
            include("types", config.types)
        if config.client_countries:
            include("clientCountries", ",".join(config.client_countries))
        for key, attr in _BOUNDS:
            bound = getattr(config, attr)
            if bound > 0:
                include(key, str(bound))
        if config.all_skills:
            include("projectSkills", ALL_SKILLS, in_url=False)
        else:
            include("projectSkills", config.skills)
        if config.sort and config.sort != DEFAULT_SORT:
            include("projectSort", config.sort)
        if config.query:
            include("q", config.query)
        if config.page > 1:
            include("page", str(config.page))

        url = self.settings.search_url
        if url_params:
            url = f"{url}?{urlencode(url_params)}"
        return BuiltQuery(url=url, params=MappingProxyType(record))


__all__ = ["BuiltQuery", "QueryBuilder", "QueryParameters"]
