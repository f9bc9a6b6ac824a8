"""Tabular CSV exporter with commented provenance header."""

from __future__ import annotations

import csv
import io
from typing import Mapping, Sequence

from ..parser import ProjectRecord
from .base import BaseExporter

CSV_HEADER = ("Title", "Time Left", "Bids", "Price/AvgBid", "Link", "Description")


def _flatten(value: str) -> str:
    return value.replace("\r", " ").replace("\n", " ")


class CSVExporter(BaseExporter):
    format = "csv"
    extension = "csv"

    def serialize(self, records: Sequence[ProjectRecord], params: Mapping[str, str]) -> bytes:
        buffer = io.StringIO(newline="")
        buffer.write("# Parameters Used:\n")
        for key, value in params.items():
            buffer.write(f"# {_flatten(key)}: {_flatten(value)}\n")
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for record in records:
            writer.writerow(
                (
                    record.title,
                    record.time_left,
                    record.bids_count,
                    record.budget,
                    record.link,
                    _flatten(record.description),
                )
            )
        return buffer.getvalue().encode("utf-8")


__all__ = ["CSVExporter", "CSV_HEADER"]
