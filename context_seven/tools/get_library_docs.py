"""
MCP Tool - get_library_docs

Fetch up-to-date documentation for a library.
"""

from typing import Optional

from fastmcp import FastMCP

from context_seven.services import DocsService


def create_router(service: DocsService, default_tokens: int = 10000) -> FastMCP:
    router = FastMCP("get_library_docs")

    @router.tool()
    async def get_library_docs(
        library_id: str,
        topic: Optional[str] = None,
        tokens: int = default_tokens,
    ) -> str:
        """
        Fetches up-to-date documentation for a library using a
        Context7-compatible library ID.

        Args:
            library_id: Context7-compatible library ID retrieved from
                resolve_library_id (e.g. /dotnet/runtime). A folder scope
                may be appended as /org/repo?folders=path
            topic: Optional topic to focus documentation on
            tokens: Maximum number of tokens to retrieve (default: 10000)

        Returns:
            Documentation text
        """
        return await service.get_library_docs(
            library_id=library_id,
            topic=topic,
            tokens=tokens,
        )

    return router
