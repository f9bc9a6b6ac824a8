"""Lookup table from format name to exporter class."""

from __future__ import annotations

from datetime import datetime

import structlog

from ...errors import UnsupportedFormatError
from .base import BaseExporter
from .csv_exporter import CSVExporter
from .json_exporter import JSONExporter
from .markdown_exporter import MarkdownExporter

EXPORTERS: dict[str, type[BaseExporter]] = {
    MarkdownExporter.format: MarkdownExporter,
    CSVExporter.format: CSVExporter,
    JSONExporter.format: JSONExporter,
}


def known_formats() -> tuple[str, ...]:
    return tuple(EXPORTERS)


def create_exporter(
    fmt: str,
    generated_at: datetime | None = None,
    logger: structlog.BoundLogger | None = None,
) -> BaseExporter:
    key = (fmt or "").lower()
    exporter_cls = EXPORTERS.get(key)
    if exporter_cls is None:
        raise UnsupportedFormatError(fmt)
    if exporter_cls is MarkdownExporter:
        return MarkdownExporter(generated_at=generated_at, logger=logger)
    return exporter_cls(logger=logger)


__all__ = ["EXPORTERS", "create_exporter", "known_formats"]
