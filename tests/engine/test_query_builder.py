from __future__ import annotations

from urllib.parse import parse_qs, urlparse

import pytest

from flparser.config import DEFAULT_CLIENT_COUNTRIES, DEFAULT_SKILLS, ScraperSettings
from flparser.engine import QueryBuilder


def _query(url: str) -> dict[str, list[str]]:
    return parse_qs(urlparse(url).query)


def test_default_filters(sample_filters) -> None:
    built = QueryBuilder().build(sample_filters())
    assert built.url.startswith("https://www.freelancer.com/search/projects?")
    assert list(built.params) == ["types", "clientCountries", "projectSkills"]
    assert built.params["clientCountries"] == ",".join(DEFAULT_CLIENT_COUNTRIES)
    query = _query(built.url)
    assert query["types"] == ["hourly,fixed"]
    assert query["projectSkills"] == [DEFAULT_SKILLS]
    assert query["clientCountries"] == [",".join(DEFAULT_CLIENT_COUNTRIES)]


@pytest.mark.parametrize(
    ("field", "key"),
    [
        ("fixed_price_min", "projectFixedPriceMin"),
        ("fixed_price_max", "projectFixedPriceMax"),
        ("hourly_rate_min", "projectHourlyRateMin"),
        ("hourly_rate_max", "projectHourlyRateMax"),
    ],
)
@pytest.mark.parametrize("value", [0, -5])
def test_unset_bounds_are_omitted(sample_filters, field, key, value) -> None:
    built = QueryBuilder().build(sample_filters(**{field: value}))
    assert key not in built.params
    assert key not in built.url


def test_positive_bounds_are_included_independently(sample_filters) -> None:
    built = QueryBuilder().build(sample_filters(fixed_price_min=100, hourly_rate_max=40))
    assert built.params["projectFixedPriceMin"] == "100"
    assert built.params["projectHourlyRateMax"] == "40"
    assert "projectFixedPriceMax" not in built.params
    assert "projectHourlyRateMin" not in built.params
    query = _query(built.url)
    assert query["projectFixedPriceMin"] == ["100"]
    assert query["projectHourlyRateMax"] == ["40"]


def test_all_skills_recorded_but_not_requested(sample_filters) -> None:
    built = QueryBuilder().build(sample_filters(skills="all"))
    assert built.params["projectSkills"] == "all"
    assert "projectSkills" not in built.url


def test_empty_skills_means_all(sample_filters) -> None:
    built = QueryBuilder().build(sample_filters(skills=""))
    assert built.params["projectSkills"] == "all"
    assert "projectSkills" not in built.url


def test_explicit_skills(sample_filters) -> None:
    built = QueryBuilder().build(sample_filters(skills="3,13"))
    assert built.params["projectSkills"] == "3,13"
    assert _query(built.url)["projectSkills"] == ["3,13"]


def test_default_sort_is_never_written(sample_filters) -> None:
    for sort in ("latest", ""):
        built = QueryBuilder().build(sample_filters(sort=sort))
        assert "projectSort" not in built.params
        assert "projectSort" not in built.url


def test_non_default_sort(sample_filters) -> None:
    built = QueryBuilder().build(sample_filters(sort="oldest"))
    assert built.params["projectSort"] == "oldest"
    assert _query(built.url)["projectSort"] == ["oldest"]


def test_query_text_and_page(sample_filters) -> None:
    built = QueryBuilder().build(sample_filters(query="web scraping & data", page=3))
    assert built.params["q"] == "web scraping & data"
    assert built.params["page"] == "3"
    query = _query(built.url)
    assert query["q"] == ["web scraping & data"]
    assert query["page"] == ["3"]
    assert "web+scraping+%26+data" in built.url


def test_first_page_and_empty_query_omitted(sample_filters) -> None:
    built = QueryBuilder().build(sample_filters(page=1, query=""))
    assert "page" not in built.params
    assert "q" not in built.params


def test_empty_countries_and_types_omitted(sample_filters) -> None:
    built = QueryBuilder().build(sample_filters(client_countries="", types=""))
    assert "clientCountries" not in built.params
    assert "types" not in built.params


def test_countries_keep_input_order(sample_filters) -> None:
    built = QueryBuilder().build(sample_filters(client_countries="us, de,gb"))
    assert built.params["clientCountries"] == "us,de,gb"


def test_params_are_read_only(sample_filters) -> None:
    built = QueryBuilder().build(sample_filters())
    with pytest.raises(TypeError):
        built.params["types"] = "hourly"  # type: ignore[index]


def test_custom_base_url(sample_filters) -> None:
    settings = ScraperSettings(base_url="https://staging.example.org/", search_path="jobs")
    built = QueryBuilder(settings).build(sample_filters(skills="all", client_countries="", types=""))
    assert built.url == "https://staging.example.org/jobs"
