"""Listing page parsing helpers."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from selectolax.lexbor import LexborHTMLParser, LexborNode

CARD_SELECTOR = ".JobSearchCard-item"
TITLE_SELECTOR = ".JobSearchCard-primary-heading a"
CTA_SELECTOR = "a.JobSearchCard-ctas-btn"
DESCRIPTION_SELECTOR = ".JobSearchCard-primary-description"
DAYS_LEFT_SELECTOR = ".JobSearchCard-primary-heading-days"
PRICE_SELECTOR = ".JobSearchCard-secondary-price"
BIDS_SELECTOR = ".JobSearchCard-secondary-entry"

AVG_BID_LABEL = "Avg Bid"


def normalize_text(value: str | None) -> str:
    """Flatten line breaks, collapse repeated spaces and trim."""

    if not value:
        return ""
    text = value.replace("\n", " ").replace("\r", " ")
    while "  " in text:
        text = text.replace("  ", " ")
    return text.strip()


@dataclass(frozen=True, slots=True)
class ProjectRecord:
    """One marketplace listing.

    ``average_bid`` mirrors ``budget``: the card markup renders a single price
    block that covers both, so the two fields carry the same value.
    """

    title: str = ""
    link: str = ""
    budget: str = ""
    average_bid: str = ""
    bids_count: str = ""
    time_left: str = ""
    description: str = ""

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "ProjectRecord":
        fields = cls.__dataclass_fields__
        return cls(**{key: str(value) for key, value in payload.items() if key in fields})


ResultSet = tuple[ProjectRecord, ...]


def resolve_text(container: LexborNode, selector: str) -> str:
    """Concatenated text of every match, normalized; ``""`` when absent."""

    return normalize_text("".join(node.text() for node in container.css(selector)))


def resolve_link(container: LexborNode, base_url: str) -> str:
    """Prefer the call-to-action href, fall back to the heading link."""

    href: str | None = None
    cta = container.css_first(CTA_SELECTOR)
    if cta is not None and "href" in cta.attributes:
        href = cta.attributes.get("href")
    else:
        heading = container.css_first(TITLE_SELECTOR)
        if heading is not None:
            href = heading.attributes.get("href")
    href = href or ""
    if href.startswith("/"):
        return base_url.rstrip("/") + href
    return href


def resolve_price(container: LexborNode) -> str:
    price = resolve_text(container, PRICE_SELECTOR)
    return normalize_text(price.replace(AVG_BID_LABEL, ""))


class RecordExtractor:
    """Turn a search results page into ProjectRecords in document order."""

    def __init__(self, base_url: str = "https://www.freelancer.com") -> None:
        self.base_url = base_url

    def extract(self, html: str) -> ResultSet:
        tree = LexborHTMLParser(html or "")
        return tuple(self.extract_card(card) for card in tree.css(CARD_SELECTOR))

    def extract_card(self, card: LexborNode) -> ProjectRecord:
        price = resolve_price(card)
        return ProjectRecord(
            title=resolve_text(card, TITLE_SELECTOR),
            link=resolve_link(card, self.base_url),
            budget=price,
            average_bid=price,
            bids_count=resolve_text(card, BIDS_SELECTOR),
            time_left=resolve_text(card, DAYS_LEFT_SELECTOR),
            description=resolve_text(card, DESCRIPTION_SELECTOR),
        )


__all__ = [
    "ProjectRecord",
    "RecordExtractor",
    "ResultSet",
    "normalize_text",
    "resolve_link",
    "resolve_price",
    "resolve_text",
]
