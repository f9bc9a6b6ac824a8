"""HTTP fetching for the listing page."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

import httpx
import structlog

from ..config import ScraperSettings
from ..errors import FetchError


@dataclass(slots=True)
class FetchResponse:
    """Standardised response wrapper."""

    url: str
    status_code: int
    text: str
    headers: Dict[str, str]
    raw: httpx.Response | None = field(repr=False, default=None)


class Fetcher:
    """Single GET with a fixed timeout and User-Agent; no retries."""

    def __init__(
        self,
        settings: ScraperSettings | None = None,
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        self.settings = settings or ScraperSettings()
        self.logger = logger or structlog.get_logger("flparser.fetcher")
        self._client = httpx.Client(
            follow_redirects=True,
            timeout=self.settings.timeout,
            headers={"User-Agent": self.settings.user_agent},
        )

    def __enter__(self) -> "Fetcher":
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def fetch(self, url: str) -> FetchResponse:
        self.logger.info("fetch_start", url=url, timeout=self.settings.timeout)
        try:
            response = self._client.request(
                method="GET",
                url=url,
                headers={"User-Agent": self.settings.user_agent},
                timeout=self.settings.timeout,
            )
        except httpx.TimeoutException as exc:
            self.logger.error("fetch_failed", url=url, error="timeout")
            raise FetchError(url, f"timed out after {self.settings.timeout}s") from exc
        except httpx.HTTPError as exc:
            self.logger.error("fetch_failed", url=url, error=str(exc))
            raise FetchError(url, str(exc) or exc.__class__.__name__) from exc

        if self._is_failure(response):
            reason = f"status code error: {response.status_code} {response.reason_phrase}".rstrip()
            self.logger.error("fetch_failed", url=url, status=response.status_code)
            raise FetchError(url, reason, status_code=response.status_code)

        return FetchResponse(
            url=str(response.url),
            status_code=response.status_code,
            text=response.text,
            headers=dict(response.headers),
            raw=response,
        )

    @staticmethod
    def _is_failure(response: httpx.Response) -> bool:
        return getattr(response, "status_code", 0) != 200


__all__ = ["FetchResponse", "Fetcher"]
