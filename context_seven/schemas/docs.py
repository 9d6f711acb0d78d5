"""
Schemas - Documentation Request

Parameters for a documentation fetch, including the inline
``<id>?folders=<value>`` convention accepted by the get_library_docs tool.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

FOLDERS_MARKER = "?folders="


def normalize_library_id(library_id: str) -> str:
    """Strip exactly one leading slash: ``/org/repo`` -> ``org/repo``."""
    if library_id.startswith("/"):
        return library_id[1:]
    return library_id


class DocsRequest(BaseModel):
    """Documentation fetch parameters."""
    model_config = ConfigDict(frozen=True)

    library_id: str
    tokens: Optional[int] = None
    topic: Optional[str] = None
    folders: Optional[str] = None

    @field_validator("library_id")
    @classmethod
    def _non_empty_id(cls, value: str) -> str:
        if not normalize_library_id(value.strip()):
            raise ValueError("library ID must not be empty")
        return value

    @classmethod
    def from_tool_input(
        cls,
        library_id: str,
        topic: Optional[str] = None,
        tokens: Optional[int] = None,
        folders: Optional[str] = None,
    ) -> "DocsRequest":
        """
        Build a request from raw tool arguments.

        A library ID may carry a folder scope inline, e.g.
        ``/dotnet/runtime?folders=src/libraries``. The ID is split once on
        the ``?folders=`` marker; the part after it becomes ``folders`` and
        takes precedence over a separately supplied ``folders`` value.
        """
        if FOLDERS_MARKER in library_id:
            library_id, folders = library_id.split(FOLDERS_MARKER, 1)
        return cls(
            library_id=library_id,
            tokens=tokens,
            topic=topic,
            folders=folders,
        )
