"""Run orchestrator wiring query building, fetching, parsing and export."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

import structlog

from .config import FilterConfig, ScraperSettings
from .engine import Fetcher, QueryBuilder, RecordExtractor, ResultSet
from .engine.exporter import ExportMultiplexer
from .errors import ExportError
from .logging_conf import component_logger


@dataclass(slots=True)
class RunSummary:
    """Outcome of one pipeline run."""

    url: str
    params: Mapping[str, str]
    records: ResultSet
    written: list[tuple[Path, str]] = field(default_factory=list)
    failures: list[tuple[Path, str, ExportError]] = field(default_factory=list)

    @property
    def record_count(self) -> int:
        return len(self.records)


class Orchestrator:
    """Execute the sequential pipeline for a single FilterConfig."""

    def __init__(
        self,
        settings: ScraperSettings | None = None,
        fetcher: Fetcher | None = None,
        multiplexer: ExportMultiplexer | None = None,
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        self.settings = settings or ScraperSettings()
        self.logger = logger or component_logger("orchestrator")
        self.query_builder = QueryBuilder(self.settings)
        self.extractor = RecordExtractor(self.settings.base_url)
        self._fetcher = fetcher
        self.multiplexer = multiplexer or ExportMultiplexer(
            output_dir=self.settings.output_dir,
            logger=component_logger("exporter"),
        )

    def run(
        self,
        filters: FilterConfig,
        filename: str | None = None,
        fmt: str | None = None,
    ) -> RunSummary:
        query = self.query_builder.build(filters)
        self.logger.info("query_built", url=query.url, params=dict(query.params))

        # FetchError propagates: nothing is extracted or written after a failed fetch
        fetcher = self._fetcher or Fetcher(self.settings, logger=component_logger("fetcher"))
        try:
            response = fetcher.fetch(query.url)
        finally:
            if self._fetcher is None:
                fetcher.close()

        records = self.extractor.extract(response.text)
        self.logger.info("records_extracted", count=len(records))

        written = self.multiplexer.dispatch(records, query.params, filename=filename, fmt=fmt)
        return RunSummary(
            url=query.url,
            params=query.params,
            records=records,
            written=written,
            failures=list(self.multiplexer.last_failures),
        )


__all__ = ["Orchestrator", "RunSummary"]
