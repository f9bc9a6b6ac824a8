"""Exception hierarchy shared across flparser components."""

from __future__ import annotations


class FLParserError(Exception):
    """Base class for every error raised by flparser."""


class FetchError(FLParserError):
    """Listing page could not be retrieved (transport error, timeout or bad status)."""

    def __init__(self, url: str, reason: str, status_code: int | None = None) -> None:
        self.url = url
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Fetch failed for {url}: {reason}")


class ExportError(FLParserError):
    """A serializer could not produce or write its output file."""

    def __init__(self, fmt: str, path: object, reason: str) -> None:
        self.fmt = fmt
        self.path = path
        self.reason = reason
        super().__init__(f"{fmt} export to {path} failed: {reason}")


class UnsupportedFormatError(ExportError):
    """Requested output format is not one of the known serializers."""

    def __init__(self, fmt: str, path: object = None) -> None:
        super().__init__(fmt, path, f"unknown format {fmt!r}")


__all__ = ["ExportError", "FLParserError", "FetchError", "UnsupportedFormatError"]
