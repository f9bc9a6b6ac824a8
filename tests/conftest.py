"""Shared fixtures for flparser tests."""

from __future__ import annotations

from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Callable

import pytest

from flparser.config import FilterConfig, ScraperSettings
from flparser.engine import ProjectRecord

LISTING_HTML = """
<html><body>
<div class="JobSearchCard-list">
  <div class="JobSearchCard-item">
    <div class="JobSearchCard-primary-heading">
      <a href="/projects/python/scraper-123" class="JobSearchCard-primary-heading-link">
        Build a   web
        scraper
      </a>
      <span class="JobSearchCard-primary-heading-days">6 days left</span>
    </div>
    <p class="JobSearchCard-primary-description">
      Need a Python developer
      to scrape listings.
    </p>
    <div class="JobSearchCard-secondary-price">
      $250
      <span class="JobSearchCard-secondary-avgBid">Avg Bid</span>
    </div>
    <div class="JobSearchCard-secondary-entry">14 bids</div>
    <a class="JobSearchCard-ctas-btn" href="/projects/python/scraper-123/details">Bid now</a>
  </div>
  <div class="JobSearchCard-item">
    <div class="JobSearchCard-primary-heading">
      <a href="https://www.freelancer.com/projects/design/logo-9">Logo design</a>
      <span class="JobSearchCard-primary-heading-days">2 days left</span>
    </div>
    <div class="JobSearchCard-secondary-price">$15 - $25 USD / hour</div>
    <div class="JobSearchCard-secondary-entry">3 bids</div>
  </div>
</div>
</body></html>
"""


@pytest.fixture
def listing_html() -> str:
    return LISTING_HTML


@pytest.fixture
def fixed_moment() -> datetime:
    return datetime(2026, 10, 18, 14, 3, 59, tzinfo=timezone.utc)


@pytest.fixture
def sample_settings(tmp_path) -> ScraperSettings:
    return ScraperSettings(output_dir=tmp_path / "outputs")


@pytest.fixture
def sample_filters() -> Callable[..., FilterConfig]:
    def _builder(**overrides: Any) -> FilterConfig:
        return FilterConfig(**overrides)

    return _builder


@pytest.fixture
def sample_records() -> tuple[ProjectRecord, ...]:
    return (
        ProjectRecord(
            title="Build a web scraper",
            link="https://www.freelancer.com/projects/python/scraper-123",
            budget="$250",
            average_bid="$250",
            bids_count="14 bids",
            time_left="6 days left",
            description="Need a Python developer to scrape listings.",
        ),
        ProjectRecord(
            title="Logo design, modern",
            link="https://www.freelancer.com/projects/design/logo-9",
            budget="$15 - $25 USD / hour",
            average_bid="$15 - $25 USD / hour",
            bids_count="3 bids",
            time_left="2 days left",
            description='Flat "minimal" logo',
        ),
        ProjectRecord(
            title="Übersetzung ins Deutsche",
            link="https://www.freelancer.com/projects/translation/de-77",
            budget="€30",
            average_bid="€30",
            bids_count="0 bids",
            time_left="",
            description="",
        ),
    )


@pytest.fixture
def sample_params() -> MappingProxyType:
    return MappingProxyType({"types": "hourly,fixed", "projectSkills": "all"})
