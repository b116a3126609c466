from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .errors import InvalidPaginationParams


@dataclass(frozen=True)
class PaginationParams:
    page: int = 1
    per_page: int = 10

    def __post_init__(self) -> None:
        if self.page < 1 or self.per_page < 1:
            raise InvalidPaginationParams(page=self.page, per_page=self.per_page)

    @property
    def start(self) -> int:
        return (self.page - 1) * self.per_page

    @property
    def end(self) -> int:
        return self.page * self.per_page


@dataclass(frozen=True)
class PaginationMetadata:
    page: int
    per_page: int
    total_results: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool

    @classmethod
    def compute(cls, total_results: int, params: PaginationParams) -> PaginationMetadata:
        """Derive page count and boundary flags from a result total."""
        total_pages = -(-total_results // params.per_page)
        return cls(
            page=params.page,
            per_page=params.per_page,
            total_results=total_results,
            total_pages=total_pages,
            has_next_page=params.page < total_pages,
            has_previous_page=params.page > 1,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "page": self.page,
            "per_page": self.per_page,
            "total_results": self.total_results,
            "total_pages": self.total_pages,
            "has_next_page": self.has_next_page,
            "has_previous_page": self.has_previous_page,
        }


class ResponseShape(str, Enum):
    LIST = "list"                      # bare array of records
    PAGINATED = "paginated"            # object that already carries "pagination"
    RESULTS_OBJECT = "results_object"  # object wrapping a "results" array
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class DetectedResponse:
    shape: ResponseShape
    original: Any
    items: List[Any] = field(default_factory=list)
    total_results: Optional[int] = None
    extra_fields: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_passthrough(self) -> bool:
        return self.shape in (ResponseShape.PAGINATED, ResponseShape.UNRECOGNIZED)


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one search call, successful or not."""
    success: bool
    formatted_text: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, formatted_text: str) -> SearchResult:
        return cls(success=True, formatted_text=formatted_text)

    @classmethod
    def failure(cls, error: str) -> SearchResult:
        return cls(success=False, error=error)

    def to_dict(self) -> Dict[str, Any]:
        if self.success:
            return {"success": True, "formattedText": self.formatted_text}
        return {"success": False, "error": self.error}
