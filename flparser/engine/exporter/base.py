"""Exporter Service Provider Interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Mapping, Sequence

import structlog

from ...errors import ExportError
from ..parser import ProjectRecord


class BaseExporter(ABC):
    """Uniform serializer contract shared by every output format."""

    format: str = ""
    extension: str = ""

    def __init__(self, logger: structlog.BoundLogger | None = None) -> None:
        self.logger = logger or structlog.get_logger("flparser.exporter").bind(format=self.format)

    @abstractmethod
    def serialize(self, records: Sequence[ProjectRecord], params: Mapping[str, str]) -> bytes:
        """Render records plus provenance parameters to bytes."""

    def write(
        self, path: Path, records: Sequence[ProjectRecord], params: Mapping[str, str]
    ) -> Path:
        """Serialize fully, then write the file in one go."""

        path = Path(path)
        try:
            payload = self.serialize(records, params)
        except (TypeError, ValueError) as exc:
            raise ExportError(self.format, path, f"encoding failed: {exc}") from exc
        try:
            path.write_bytes(payload)
        except OSError as exc:
            raise ExportError(self.format, path, exc.strerror or str(exc)) from exc
        self.logger.info("export_written", path=str(path), records=len(records))
        return path


__all__ = ["BaseExporter"]
