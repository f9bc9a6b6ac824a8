"""Engine components wiring query → fetch → parse → export."""

from .fetcher import FetchResponse, Fetcher
from .parser import ProjectRecord, RecordExtractor, ResultSet, normalize_text
from .query import BuiltQuery, QueryBuilder, QueryParameters

__all__ = [
    "BuiltQuery",
    "FetchResponse",
    "Fetcher",
    "ProjectRecord",
    "QueryBuilder",
    "QueryParameters",
    "RecordExtractor",
    "ResultSet",
    "normalize_text",
]
