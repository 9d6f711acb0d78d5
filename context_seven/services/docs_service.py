"""
Services - Documentation Service

Tool-facing operations over the Context7 client. Every call returns a
string; failures are rendered as messages instead of raised.
"""

from typing import Optional

from context_seven.logging_config import ToolCallLogger
from context_seven.schemas import DocsRequest, ToolOutcome
from context_seven.services.context7_client import Context7Client
from context_seven.services.formatter import format_search_results

NO_LIBRARIES_MESSAGE = "No libraries found matching your query."
DOCS_NOT_FOUND_MESSAGE = (
    "Documentation not found for this library. "
    "Please verify the library ID is correct."
)
DEFAULT_TOKENS = 10000


class DocsService:
    """Resolves library IDs and fetches documentation."""

    def __init__(
        self,
        client: Context7Client,
        call_log: Optional[ToolCallLogger] = None,
        default_tokens: int = DEFAULT_TOKENS,
    ):
        self.client = client
        self.call_log = call_log or ToolCallLogger()
        self.default_tokens = default_tokens

    async def _resolve(self, library_name: str) -> ToolOutcome:
        try:
            response = await self.client.search_libraries(library_name)
            if response is None or not response.results:
                return ToolOutcome.failure(NO_LIBRARIES_MESSAGE)
            return ToolOutcome.success(format_search_results(response))
        except Exception as e:
            self.call_log.error("resolve_library_id", library_name, e)
            return ToolOutcome.failure(f"Error resolving library ID: {e}")

    async def resolve_library_id(self, library_name: str) -> str:
        """
        Search for libraries and format the matches.

        Args:
            library_name: Library name to search for

        Returns:
            Formatted matches, or a message when nothing was found
        """
        self.call_log.call("resolve_library_id", library_name)
        outcome = await self._resolve(library_name)
        text = outcome.render()
        self.call_log.result("resolve_library_id", text)
        return text

    async def _fetch_docs(self, args: dict) -> ToolOutcome:
        try:
            request = DocsRequest.from_tool_input(**args)
            documentation = await self.client.fetch_library_documentation(
                request.library_id,
                tokens=request.tokens,
                topic=request.topic,
                folders=request.folders,
            )
            if not documentation:
                return ToolOutcome.failure(DOCS_NOT_FOUND_MESSAGE)
            return ToolOutcome.success(documentation)
        except Exception as e:
            self.call_log.error("get_library_docs", args, e)
            return ToolOutcome.failure(f"Error fetching library documentation: {e}")

    async def get_library_docs(
        self,
        library_id: str,
        topic: Optional[str] = None,
        tokens: Optional[int] = None,
        folders: Optional[str] = None,
    ) -> str:
        """
        Fetch documentation for a Context7-compatible library ID.

        Args:
            library_id: Library ID, optionally with an inline
                ``?folders=<value>`` scope
            topic: Topic to focus documentation on
            tokens: Maximum tokens to retrieve (service default if None)
            folders: Folder scope, overridden by an inline scope

        Returns:
            Documentation text, or a message when none is available
        """
        args = {
            "library_id": library_id,
            "topic": topic,
            "tokens": self.default_tokens if tokens is None else tokens,
            "folders": folders,
        }
        self.call_log.call("get_library_docs", args)
        outcome = await self._fetch_docs(args)
        text = outcome.render()
        self.call_log.result("get_library_docs", text)
        return text
