"""Error kinds raised while fetching and paginating search responses."""

from __future__ import annotations


class DocSearchError(Exception):
    """Base class for every error raised by docsearch."""


class UpstreamFetchError(DocSearchError):
    """Raised when the upstream search request fails or times out."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedJsonError(DocSearchError, ValueError):
    """Raised when the upstream body is not valid JSON."""


class InvalidPaginationParams(DocSearchError, ValueError):
    """Raised when page or per_page is below 1 at the arithmetic step."""

    def __init__(self, *, page: int, per_page: int) -> None:
        super().__init__(
            f"Invalid pagination parameters: page={page}, per_page={per_page} "
            "(both must be integers >= 1)"
        )
        self.page = page
        self.per_page = per_page
