"""
Tools Module - MCP Tool Implementations

Echo tools plus the two Context7 documentation tools.
"""

from context_seven.tools import echo
from context_seven.tools import resolve_library_id
from context_seven.tools import get_library_docs

__all__ = [
    "echo",
    "resolve_library_id",
    "get_library_docs",
]
