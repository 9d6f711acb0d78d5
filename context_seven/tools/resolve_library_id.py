"""
MCP Tool - resolve_library_id

Resolve a library name to Context7-compatible library IDs.
"""

from fastmcp import FastMCP

from context_seven.services import DocsService


def create_router(service: DocsService) -> FastMCP:
    router = FastMCP("resolve_library_id")

    @router.tool()
    async def resolve_library_id(library_name: str) -> str:
        """
        Searches for libraries matching the given query and returns
        Context7-compatible library IDs.

        Call this before get_library_docs to obtain a valid library ID,
        unless the user already supplied one in the form /org/repo.
        Matches returned without a library ID are left out, so a search
        whose matches all lack an ID reports that no libraries were found.

        Args:
            library_name: Library name to search for

        Returns:
            Matching libraries with ID, name, description, code snippet
            count and trust score
        """
        return await service.resolve_library_id(library_name)

    return router
