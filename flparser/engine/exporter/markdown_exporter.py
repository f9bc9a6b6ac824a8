"""Markdown report exporter."""

from __future__ import annotations

from datetime import datetime
from typing import Mapping, Sequence

import structlog

from ..parser import ProjectRecord
from .base import BaseExporter

REPORT_TITLE = "Freelancer.com Projects"
RFC1123_FORMAT = "%a, %d %b %Y %H:%M:%S %Z"


def _cell(value: str) -> str:
    # a table row must stay on one line
    return value.replace("\r", " ").replace("\n", " ").replace("|", "\\|")


class MarkdownExporter(BaseExporter):
    """Human-readable report: parameter table followed by one section per project."""

    format = "md"
    extension = "md"

    def __init__(
        self,
        generated_at: datetime | None = None,
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        super().__init__(logger)
        self.generated_at = generated_at

    def serialize(self, records: Sequence[ProjectRecord], params: Mapping[str, str]) -> bytes:
        generated = self.generated_at or datetime.now().astimezone()
        lines = [
            f"# {REPORT_TITLE}",
            "",
            f"**Generated:** {generated.strftime(RFC1123_FORMAT).rstrip()}",
            "",
            "### Search Parameters",
            "| Parameter | Value |",
            "| --- | --- |",
        ]
        lines.extend(f"| {_cell(key)} | {_cell(value)} |" for key, value in params.items())
        lines.extend(["", "---", ""])
        for record in records:
            lines.append(f"## [{record.title.strip()}]({record.link})")
            lines.append(f"- **Budget/Price:** {record.budget}")
            lines.append(f"- **Bids:** {record.bids_count}")
            lines.append(f"- **Time:** {record.time_left}")
            lines.append("")
            lines.append(f"> {record.description}")
            lines.append("")
            lines.append("---")
        return ("\n".join(lines) + "\n").encode("utf-8")


__all__ = ["MarkdownExporter"]
