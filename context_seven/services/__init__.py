"""
Services Module - Business Logic Layer

Provides the Context7 API client, result formatting and the
documentation service behind the MCP tools.
"""

from context_seven.services.context7_client import Context7Client
from context_seven.services.formatter import format_search_results
from context_seven.services.docs_service import DocsService

__all__ = [
    "Context7Client",
    "format_search_results",
    "DocsService",
]
