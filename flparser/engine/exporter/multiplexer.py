"""Decide which serializers run and where their output lands."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Mapping, Sequence

import structlog

from ...errors import ExportError, UnsupportedFormatError
from ..parser import ProjectRecord
from .registry import create_exporter

DEFAULT_FORMAT = "csv"
DEFAULT_FORMATS = ("md", "csv")
BASE_NAME_PREFIX = "freelancer.com"
TIMESTAMP_FORMAT = "%H-%M-%S_%d-%m-%Y"


@dataclass(frozen=True, slots=True)
class ExportTarget:
    path: Path
    format: str


def generated_base_name(moment: datetime) -> str:
    """Run-specific file stem, e.g. ``freelancer.com_14-03-59_18-10-2026``."""

    return f"{BASE_NAME_PREFIX}_{moment.strftime(TIMESTAMP_FORMAT)}"


def plan_exports(
    filename: str | None,
    fmt: str | None,
    base_name: str,
    output_dir: Path = Path("."),
) -> list[ExportTarget]:
    """Resolve the (path, format) pairs for one dispatch.

    Rules, first match wins:

    1. filename with an extension: that extension is the format.
    2. filename without extension and an explicit format: ``filename.fmt``.
    3. filename without extension: ``filename.csv``.
    4. no filename, explicit format: ``<base>.<fmt>`` in ``output_dir``.
    5. neither: ``<base>.md`` and ``<base>.csv`` in ``output_dir``.
    """

    fmt = (fmt or "").strip().lower() or None
    if filename:
        path = Path(filename)
        suffix = path.suffix.lower()
        if suffix:
            return [ExportTarget(path, suffix[1:])]
        chosen = fmt or DEFAULT_FORMAT
        return [ExportTarget(Path(f"{filename}.{chosen}"), chosen)]
    if fmt:
        return [ExportTarget(output_dir / f"{base_name}.{fmt}", fmt)]
    return [ExportTarget(output_dir / f"{base_name}.{ext}", ext) for ext in DEFAULT_FORMATS]


class ExportMultiplexer:
    """Fan one record set out to every selected serializer."""

    def __init__(
        self,
        output_dir: Path | str = Path("."),
        clock: Callable[[], datetime] | None = None,
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        self.output_dir = Path(output_dir)
        self.clock = clock or (lambda: datetime.now().astimezone())
        self.logger = logger or structlog.get_logger("flparser.exporter")
        self.last_failures: list[tuple[Path, str, ExportError]] = []

    def dispatch(
        self,
        records: Sequence[ProjectRecord],
        params: Mapping[str, str],
        filename: str | None = None,
        fmt: str | None = None,
    ) -> list[tuple[Path, str]]:
        moment = self.clock()
        targets = plan_exports(filename, fmt, generated_base_name(moment), self.output_dir)
        written: list[tuple[Path, str]] = []
        self.last_failures = []
        if not filename:
            try:
                self.output_dir.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                reason = exc.strerror or str(exc)
                for target in targets:
                    error = ExportError(target.format, target.path, reason)
                    self.logger.error(
                        "export_failed", path=str(target.path), format=target.format, error=reason
                    )
                    self.last_failures.append((target.path, target.format, error))
                return written

        for target in targets:
            try:
                exporter = create_exporter(target.format, generated_at=moment)
                exporter.write(target.path, records, params)
            except UnsupportedFormatError as exc:
                self.logger.warning("export_skipped", path=str(target.path), format=target.format)
                self.last_failures.append((target.path, target.format, exc))
                continue
            except ExportError as exc:
                self.logger.error(
                    "export_failed", path=str(target.path), format=target.format, error=exc.reason
                )
                self.last_failures.append((target.path, target.format, exc))
                continue
            written.append((target.path, target.format))
        return written


__all__ = [
    "ExportMultiplexer",
    "ExportTarget",
    "generated_base_name",
    "plan_exports",
]
