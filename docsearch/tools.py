"""
Search tool wrappers for docsearch.
"""

from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Union

from langchain_core.tools import StructuredTool
from loguru import logger
from pydantic import BaseModel, Field

from .config import SearchConfig
from .errors import InvalidPaginationParams, MalformedJsonError, UpstreamFetchError
from .fetch import fetch_upstream
from .models import SearchResult
from .utils.search_normalization import normalize_search_response

Fetcher = Callable[[str], Awaitable[str]]


async def search_docs(
    query: str,
    options: Optional[Mapping[str, Any]] = None,
    *,
    config: Optional[SearchConfig] = None,
    fetcher: Optional[Fetcher] = None,
) -> SearchResult:
    """
    Search the docs endpoint and return one normalized page of results.

    Args:
        query: Free-text search query.
        options: Optional ``{"page": ..., "per_page": ...}``; values may be
            strings or numbers.
        config: Endpoint and default-pagination settings.
        fetcher: Coroutine ``fetcher(query) -> str`` used instead of the
            HTTP fetch (e.g. in tests).

    Returns:
        SearchResult with ``formatted_text`` on success, ``error`` otherwise.
    """
    config = config or SearchConfig()
    options = options or {}
    if fetcher is None:
        async def fetcher(q: str) -> str:
            return await fetch_upstream(q, config)

    try:
        raw = await fetcher(query)
        formatted = normalize_search_response(
            raw,
            page=options.get("page"),
            per_page=options.get("per_page"),
            default_page=config.default_page,
            default_per_page=config.default_per_page,
        )
    except (UpstreamFetchError, MalformedJsonError, InvalidPaginationParams) as exc:
        logger.warning("Docs search failed for {!r}: {}", query, exc)
        return SearchResult.failure(str(exc))

    return SearchResult.ok(formatted)


class SearchDocsInput(BaseModel):
    """Arguments accepted by the search_docs tool."""

    query: str = Field(description="Free-text search query")
    page: Optional[Union[int, str]] = Field(
        default=None, description="1-based page number (default 1)"
    )
    per_page: Optional[Union[int, str]] = Field(
        default=None, description="Results per page (default 10)"
    )


def make_search_tool(
    config: Optional[SearchConfig] = None,
    fetcher: Optional[Fetcher] = None,
) -> StructuredTool:
    """
    Create a configured docs search tool.

    Args:
        config: Endpoint and default-pagination settings
        fetcher: Optional replacement for the HTTP fetch

    Returns:
        StructuredTool whose result is ``{"success", "formattedText"|"error"}``
    """
    async def _run(
        query: str,
        page: Optional[Union[int, str]] = None,
        per_page: Optional[Union[int, str]] = None,
    ) -> Dict[str, Any]:
        result = await search_docs(
            query,
            {"page": page, "per_page": per_page},
            config=config,
            fetcher=fetcher,
        )
        return result.to_dict()

    return StructuredTool.from_function(
        coroutine=_run,
        name="search_docs",
        description=(
            "Search the developer documentation. Results are paginated; "
            "use page and per_page to walk through them."
        ),
        args_schema=SearchDocsInput,
    )
