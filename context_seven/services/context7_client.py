"""
Services - Context7 API Client

Library search and documentation fetching against the Context7 REST API.
"""

import json
import logging
from typing import List, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from context_seven.config import Context7Settings
from context_seven.schemas import SearchResponse, normalize_library_id

DEFAULT_TYPE = "txt"
SOURCE_HEADER = "X-Context7-Source"
NO_CONTENT_SENTINELS = frozenset({"No content available", "No context data available"})


def _escape(value: str) -> str:
    """Percent-encode everything outside the unreserved set."""
    return quote(value, safe="")


class Context7Client:
    """
    Thin async client for the Context7 API.

    Every failure (transport error, non-2xx status, malformed payload,
    empty or placeholder body) is logged and returned as ``None``.
    """

    def __init__(
        self,
        settings: Optional[Context7Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.settings = settings or Context7Settings()
        self.base_url = self.settings.base_url.rstrip("/")
        self.timeout = self.settings.timeout_s
        self._http_client = http_client
        self.logger = logger or logging.getLogger(__name__)

    async def _get(self, url: str, headers: Optional[dict] = None) -> httpx.Response:
        if self._http_client is not None:
            return await self._http_client.get(url, headers=headers)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.get(url, headers=headers)

    def search_url(self, query: str) -> str:
        return f"{self.base_url}/v1/search?query={_escape(query)}"

    def docs_url(
        self,
        library_id: str,
        tokens: Optional[int] = None,
        topic: Optional[str] = None,
        folders: Optional[str] = None,
    ) -> str:
        """
        Build the documentation URL.

        Query parameters always appear in the order
        ``type``, ``tokens``, ``topic``, ``folders``.
        """
        library_id = normalize_library_id(library_id)
        params: List[str] = [f"type={DEFAULT_TYPE}"]
        if tokens is not None:
            params.append(f"tokens={tokens}")
        if topic:
            params.append(f"topic={_escape(topic)}")
        if folders:
            params.append(f"folders={_escape(folders)}")
        return f"{self.base_url}/v1/{library_id}?{'&'.join(params)}"

    async def search_libraries(self, query: str) -> Optional[SearchResponse]:
        """
        Search for libraries matching a name.

        Args:
            query: Library name to search for

        Returns:
            SearchResponse (possibly with zero results) or None on failure
        """
        try:
            self.logger.info("Searching libraries with query: %s", query)
            response = await self._get(self.search_url(query))

            if not response.is_success:
                self.logger.error(
                    "Failed to search libraries: %s", response.status_code
                )
                return None

            result = SearchResponse.from_json_text(response.text)
            self.logger.info(
                "Search complete. Found %d results", len(result.results)
            )
            return result
        except (json.JSONDecodeError, ValidationError) as e:
            self.logger.error("Malformed search response for query %s: %s", query, e)
            return None
        except Exception:
            self.logger.exception("Error searching libraries with query: %s", query)
            return None

    async def fetch_library_documentation(
        self,
        library_id: str,
        tokens: Optional[int] = None,
        topic: Optional[str] = None,
        folders: Optional[str] = None,
    ) -> Optional[str]:
        """
        Fetch plain-text documentation for a library.

        Args:
            library_id: Context7-compatible ID, with or without leading slash
            tokens: Maximum number of tokens to retrieve
            topic: Topic to focus documentation on
            folders: Folder scope within the library

        Returns:
            Documentation text or None if unavailable
        """
        try:
            self.logger.info(
                "Fetching documentation for library: %s, Topic: %s, Folders: %s",
                library_id, topic, folders,
            )
            url = self.docs_url(library_id, tokens, topic, folders)
            headers = {SOURCE_HEADER: self.settings.source_header}

            self.logger.info("Sending request to: %s", url)
            response = await self._get(url, headers=headers)

            if not response.is_success:
                self.logger.error(
                    "Failed to fetch documentation: %s", response.status_code
                )
                return None

            text = response.text
            if not text or text in NO_CONTENT_SENTINELS:
                self.logger.warning(
                    "No documentation content available for library: %s", library_id
                )
                return None

            self.logger.info(
                "Successfully fetched documentation for library: %s (%d characters)",
                library_id, len(text),
            )
            return text
        except Exception:
            self.logger.exception(
                "Error fetching library documentation for: %s", library_id
            )
            return None
