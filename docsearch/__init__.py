"""
docsearch: paginated search over a remote documentation endpoint.

This package:
- Fetches raw JSON from a docs search endpoint
- Detects whether the response is a bare list, a results wrapper,
  or already paginated
- Slices the results into pages and attaches pagination metadata
- Exposes the search as a LangChain tool

Example:
    from docsearch import search_docs

    result = await search_docs("checkout extensions", {"page": 2, "per_page": 5})
    if result.success:
        print(result.formatted_text)
"""

from .config import (
    SearchConfig,
    validate_config,
    configure_logging,
    DEFAULT_PAGE,
    DEFAULT_PER_PAGE,
    __version__,
)
from .errors import (
    DocSearchError,
    UpstreamFetchError,
    MalformedJsonError,
    InvalidPaginationParams,
)
from .models import (
    PaginationParams,
    PaginationMetadata,
    ResponseShape,
    DetectedResponse,
    SearchResult,
)
from .utils.search_normalization import (
    normalize_search_response,
    resolve_pagination_params,
    detect_response_shape,
    paginate_items,
    compute_pagination,
)
from .fetch import fetch_upstream
from .tools import search_docs, make_search_tool

__all__ = [
    # Configuration
    "SearchConfig",
    "validate_config",
    "configure_logging",
    "DEFAULT_PAGE",
    "DEFAULT_PER_PAGE",

    # Errors
    "DocSearchError",
    "UpstreamFetchError",
    "MalformedJsonError",
    "InvalidPaginationParams",

    # Models
    "PaginationParams",
    "PaginationMetadata",
    "ResponseShape",
    "DetectedResponse",
    "SearchResult",

    # Normalization
    "normalize_search_response",
    "resolve_pagination_params",
    "detect_response_shape",
    "paginate_items",
    "compute_pagination",

    # Search
    "fetch_upstream",
    "search_docs",
    "make_search_tool",
]
