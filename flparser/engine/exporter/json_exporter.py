"""Structured JSON exporter."""

from __future__ import annotations

import json
from typing import Mapping, Sequence

from ..parser import ProjectRecord
from .base import BaseExporter


class JSONExporter(BaseExporter):
    """Write ``{"parameters": ..., "projects": [...]}`` with 2-space indentation."""

    format = "json"
    extension = "json"

    def serialize(self, records: Sequence[ProjectRecord], params: Mapping[str, str]) -> bytes:
        payload = {
            "parameters": dict(params),
            "projects": [record.to_dict() for record in records],
        }
        return json.dumps(payload, indent=2, ensure_ascii=False).encode("utf-8")


def read_structured(payload: str | bytes) -> tuple[list[ProjectRecord], dict[str, str]]:
    """Parse JSON exporter output back into records and parameters."""

    data = json.loads(payload)
    if not isinstance(data, dict):
        raise ValueError("Structured export must be a JSON object")
    params = {str(key): str(value) for key, value in (data.get("parameters") or {}).items()}
    records = [ProjectRecord.from_dict(item) for item in data.get("projects") or []]
    return records, params


__all__ = ["JSONExporter", "read_structured"]
