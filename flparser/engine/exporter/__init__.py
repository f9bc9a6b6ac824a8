"""Exporter SPI and implementations."""

from .base import BaseExporter
from .csv_exporter import CSVExporter
from .json_exporter import JSONExporter, read_structured
from .markdown_exporter import MarkdownExporter
from .multiplexer import ExportMultiplexer, ExportTarget, generated_base_name, plan_exports
from .registry import create_exporter, known_formats

__all__ = [
    "BaseExporter",
    "CSVExporter",
    "ExportMultiplexer",
    "ExportTarget",
    "JSONExporter",
    "MarkdownExporter",
    "create_exporter",
    "generated_base_name",
    "known_formats",
    "plan_exports",
    "read_structured",
]
