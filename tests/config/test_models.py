from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from flparser.config import DEFAULT_CLIENT_COUNTRIES, DEFAULT_SKILLS, FilterConfig, ScraperSettings


def test_filter_defaults() -> None:
    config = FilterConfig()
    assert config.types == "hourly,fixed"
    assert config.client_countries == DEFAULT_CLIENT_COUNTRIES
    assert len(config.client_countries) == 24
    assert config.skills == DEFAULT_SKILLS
    assert config.sort == "latest"
    assert config.query == ""
    assert config.page == 1
    assert (config.fixed_price_min, config.fixed_price_max) == (0, 0)
    assert (config.hourly_rate_min, config.hourly_rate_max) == (0, 0)
    assert not config.all_skills


def test_filter_config_is_frozen() -> None:
    config = FilterConfig()
    with pytest.raises(ValidationError):
        config.page = 3  # type: ignore[misc]


def test_client_countries_accept_comma_string() -> None:
    config = FilterConfig(client_countries=" us, gb ,,de ")
    assert config.client_countries == ("us", "gb", "de")


def test_with_overrides_ignores_none() -> None:
    base = FilterConfig(query="python")
    updated = base.with_overrides(query=None, page=2, skills="all")
    assert updated.query == "python"
    assert updated.page == 2
    assert updated.all_skills
    assert base.page == 1
    assert base.with_overrides() is base


def test_settings_validation() -> None:
    settings = ScraperSettings(base_url="https://example.com/", output_dir="exports")
    assert settings.search_url == "https://example.com/search/projects"
    assert settings.output_dir == Path("exports")
    with pytest.raises(ValidationError):
        ScraperSettings(timeout=0)
    with pytest.raises(ValidationError):
        ScraperSettings(base_url="www.freelancer.com")


@pytest.mark.parametrize("countries", [["us", 1], ["no", False], ["gb", None]])
def test_client_countries_reject_non_string_codes(countries) -> None:
    with pytest.raises(ValidationError, match="country code must be a string"):
        FilterConfig(client_countries=countries)
