"""
Schemas Module - Pydantic Models

Data models for library search, documentation requests and tool outcomes.
"""

from context_seven.schemas.search import SearchResult, SearchResponse
from context_seven.schemas.docs import DocsRequest, FOLDERS_MARKER, normalize_library_id
from context_seven.schemas.outcome import ToolOutcome

__all__ = [
    "SearchResult",
    "SearchResponse",
    "DocsRequest",
    "FOLDERS_MARKER",
    "normalize_library_id",
    "ToolOutcome",
]
