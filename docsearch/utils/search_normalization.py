"""
Normalize raw docs-search responses into a consistent paginated shape.

The upstream search endpoint may return:
- A bare ``list`` of result records
- A ``dict`` with a ``"results"`` list, optionally with ``"total_results"``
- A ``dict`` that already carries its own ``"pagination"`` block

``normalize_search_response`` turns the first two into a single page of
results plus a ``pagination`` block, and hands anything else back
unchanged::

    {
        ...other top-level fields,
        "results": [...],
        "pagination": {
            "page": 2, "per_page": 10, "total_results": 25,
            "total_pages": 3, "has_next_page": true, "has_previous_page": true
        }
    }
"""

import json
import re
from typing import Any, Dict, List, Optional, Union

from loguru import logger

from ..errors import MalformedJsonError
from ..models import DetectedResponse, PaginationMetadata, PaginationParams, ResponseShape

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 10

_DIGITS = re.compile(r"^\s*\+?(\d+)\s*$")

PageValue = Union[int, float, str, None]


def parse_positive_int(value: PageValue, default: int) -> int:
    """
    Parse a loosely typed page value into a positive integer.

    Accepts ints, integral floats and strings of decimal digits. Anything
    else (``None``, booleans, fractions, non-numeric text, zero or a
    negative number) yields ``default``.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        parsed = value
    elif isinstance(value, float):
        if not value.is_integer():
            return default
        parsed = int(value)
    elif isinstance(value, str):
        match = _DIGITS.match(value)
        if not match:
            return default
        try:
            parsed = int(match.group(1))
        except ValueError:
            # longer than the interpreter's int conversion limit
            return default
    else:
        return default
    return parsed if parsed >= 1 else default


def resolve_pagination_params(
    page: PageValue = None,
    per_page: PageValue = None,
    default_page: int = DEFAULT_PAGE,
    default_per_page: int = DEFAULT_PER_PAGE,
) -> PaginationParams:
    """
    Resolve caller-supplied page/per_page into ``PaginationParams``.

    Raises:
        InvalidPaginationParams: if a default itself is below 1.
    """
    return PaginationParams(
        page=parse_positive_int(page, default_page),
        per_page=parse_positive_int(per_page, default_per_page),
    )


def parse_raw_response(raw: Any) -> Any:
    """Decode JSON text; values that are already parsed pass through."""
    if not isinstance(raw, (str, bytes, bytearray)):
        return raw
    try:
        return json.loads(raw)
    except (ValueError, RecursionError) as exc:
        raise MalformedJsonError(f"Upstream response is not valid JSON: {exc}") from exc


def _explicit_total(value: Any) -> Optional[int]:
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value
    return None


def detect_response_shape(data: Any) -> DetectedResponse:
    """Classify a parsed response. First matching rule wins."""
    if isinstance(data, list):
        return DetectedResponse(shape=ResponseShape.LIST, original=data, items=data)

    if isinstance(data, dict):
        if "pagination" in data:
            return DetectedResponse(shape=ResponseShape.PAGINATED, original=data)

        results = data.get("results")
        if isinstance(results, list):
            return DetectedResponse(
                shape=ResponseShape.RESULTS_OBJECT,
                original=data,
                items=results,
                total_results=_explicit_total(data.get("total_results")),
                extra_fields={k: v for k, v in data.items() if k != "results"},
            )

    return DetectedResponse(shape=ResponseShape.UNRECOGNIZED, original=data)


def paginate_items(items: List[Any], params: PaginationParams) -> List[Any]:
    """Return one page of ``items``; pages past the end are empty."""
    return items[params.start:params.end]


def compute_pagination(total_results: int, params: PaginationParams) -> PaginationMetadata:
    return PaginationMetadata.compute(total_results, params)


def build_normalized_response(detected: DetectedResponse, params: PaginationParams) -> Any:
    """Assemble the paginated payload, or the original value on passthrough."""
    if detected.is_passthrough:
        return detected.original

    total = detected.total_results
    if total is None:
        total = len(detected.items)

    metadata = compute_pagination(total, params)
    payload: Dict[str, Any] = dict(detected.extra_fields)
    payload["results"] = paginate_items(detected.items, params)
    payload["pagination"] = metadata.to_dict()
    return payload


def normalize_search_response(
    raw: Any,
    page: PageValue = None,
    per_page: PageValue = None,
    default_page: int = DEFAULT_PAGE,
    default_per_page: int = DEFAULT_PER_PAGE,
) -> str:
    """
    Normalize one upstream response into a paginated JSON string.

    Args:
        raw: JSON text (``str`` or ``bytes``) or an already-parsed value.
        page: Requested 1-based page; string or number.
        per_page: Requested page size; string or number.
        default_page: Used when ``page`` is missing or not a positive int.
        default_per_page: Used when ``per_page`` is missing or not a positive int.

    Returns:
        The normalized response, JSON-encoded with two-space indentation.

    Raises:
        MalformedJsonError: ``raw`` is text but not valid JSON.
        InvalidPaginationParams: a default is below 1.
    """
    data = parse_raw_response(raw)
    params = resolve_pagination_params(page, per_page, default_page, default_per_page)

    detected = detect_response_shape(data)
    logger.debug(
        "Detected {} response (page={}, per_page={})",
        detected.shape.value, params.page, params.per_page,
    )

    normalized = build_normalized_response(detected, params)
    return json.dumps(normalized, indent=2, ensure_ascii=False)
