"""
Schemas - Search Models

Pydantic models for Context7 library search results.
"""

import json
import math
import re
from datetime import datetime
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# JSON strings are matched first so commas inside them are left alone
_TRAILING_COMMA = re.compile(r'("(?:\\.|[^"\\])*")|,(\s*[\]}])')


def _to_number(value: Any) -> Optional[Union[int, float]]:
    """Read a JSON number (int, float or numeric string), else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if isinstance(number, float) and not math.isfinite(number):
        return None
    return number


def _match_field_names(model: type, data: Any) -> Any:
    """Rename payload keys onto field aliases, ignoring case."""
    if not isinstance(data, dict):
        return data
    known = {}
    for name, field in model.model_fields.items():
        key = field.alias or name
        known[name.lower()] = key
        known[key.lower()] = key
    return {known.get(str(k).lower(), k): v for k, v in data.items()}


class SearchResult(BaseModel):
    """Single library match returned by the search endpoint."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = ""
    title: str = ""
    description: str = ""
    branch: str = ""
    last_update_date: Optional[datetime] = Field(None, alias="lastUpdateDate")
    state: str = ""
    total_tokens: int = Field(0, alias="totalTokens")
    total_snippets: int = Field(0, alias="totalSnippets")
    total_pages: int = Field(0, alias="totalPages")
    stars: Optional[int] = None
    trust_score: Optional[float] = Field(None, alias="trustScore")

    @model_validator(mode="before")
    @classmethod
    def _case_insensitive_keys(cls, data: Any) -> Any:
        return _match_field_names(cls, data)

    @field_validator("title", "description", "branch", "state", mode="before")
    @classmethod
    def _text_or_empty(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("id", mode="before")
    @classmethod
    def _canonical_id(cls, value: Any) -> str:
        if value is None:
            return ""
        library_id = str(value).strip()
        if library_id and not library_id.startswith("/"):
            library_id = f"/{library_id}"
        return library_id

    @field_validator("total_tokens", "total_snippets", "total_pages", mode="before")
    @classmethod
    def _count_or_zero(cls, value: Any) -> int:
        number = _to_number(value)
        return int(number) if number is not None else 0

    @field_validator("stars", mode="before")
    @classmethod
    def _optional_count(cls, value: Any) -> Optional[int]:
        number = _to_number(value)
        return int(number) if number is not None else None

    @field_validator("trust_score", mode="before")
    @classmethod
    def _optional_score(cls, value: Any) -> Optional[float]:
        number = _to_number(value)
        return float(number) if number is not None else None

    @field_validator("last_update_date", mode="before")
    @classmethod
    def _optional_datetime(cls, value: Any) -> Optional[datetime]:
        if isinstance(value, datetime):
            return value
        if not isinstance(value, str) or not value.strip():
            return None
        try:
            return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None


class SearchResponse(BaseModel):
    """Search results in the relevance order given by the API."""
    model_config = ConfigDict(frozen=True)

    results: List[SearchResult] = []

    @model_validator(mode="before")
    @classmethod
    def _case_insensitive_keys(cls, data: Any) -> Any:
        data = _match_field_names(cls, data)
        if not isinstance(data, dict):
            return data
        results = data.get("results")
        if results is None:
            data = {**data, "results": []}
        elif isinstance(results, list):
            # null or non-object entries are skipped like id-less ones
            data = {**data, "results": [r for r in results if isinstance(r, dict)]}
        return data

    @field_validator("results", mode="after")
    @classmethod
    def _drop_unidentified(cls, results: List[SearchResult]) -> List[SearchResult]:
        return [r for r in results if r.id]

    @classmethod
    def from_json_text(cls, text: str) -> "SearchResponse":
        """
        Parse a search payload, tolerating trailing commas.

        Raises:
            json.JSONDecodeError: Body is not JSON even after cleanup
            pydantic.ValidationError: Body does not describe a search response
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError:
            data = json.loads(
                _TRAILING_COMMA.sub(lambda m: m.group(1) or m.group(2), text)
            )
        return cls.model_validate(data)
