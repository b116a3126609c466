"""Response normalization helpers."""

from .search_normalization import (
    normalize_search_response,
    resolve_pagination_params,
    detect_response_shape,
)

__all__ = [
    "normalize_search_response",
    "resolve_pagination_params",
    "detect_response_shape",
]
