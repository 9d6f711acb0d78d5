"""
Services - Result Formatter

Renders library search results as text for tool consumers.
"""

from typing import List

from context_seven.schemas import SearchResponse, SearchResult

RESULT_DELIMITER = "----------"

HEADER_LINES = [
    "Available Libraries (top matches):\n",
    "Each result includes:",
    "- Library ID: Context7-compatible identifier (format: /org/repo)",
    "- Name: Library or package name",
    "- Description: Short summary",
    "- Code Snippets: Number of available code examples",
    "- Trust Score: Authority indicator\n",
]


def format_score(score: float) -> str:
    # 95.0 -> "95", 7.5 -> "7.5"
    return str(int(score)) if score.is_integer() else str(score)


def format_result(result: SearchResult) -> str:
    lines = [
        f"- Title: {result.title}",
        f"- Context7-compatible library ID: {result.id}",
        f"- Description: {result.description}",
    ]

    if result.total_snippets >= 0:
        lines.append(f"- Code Snippets: {result.total_snippets}")

    if result.trust_score is not None and result.trust_score >= 0:
        lines.append(f"- Trust Score: {format_score(result.trust_score)}")

    return "\n".join(lines)


def format_search_results(response: SearchResponse) -> str:
    """
    Format every search result, in order, under a legend header.

    Args:
        response: Search response (may be empty)

    Returns:
        Text block with one delimited entry per result
    """
    blocks: List[str] = list(HEADER_LINES)
    for result in response.results:
        blocks.append(format_result(result))
        blocks.append(RESULT_DELIMITER)
    return "\n".join(blocks)
