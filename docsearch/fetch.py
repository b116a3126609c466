"""
Upstream fetch for the docs search endpoint.
"""

from typing import Dict, Optional

import httpx
from loguru import logger

from .config import SearchConfig
from .errors import UpstreamFetchError


def build_headers(config: SearchConfig) -> Dict[str, str]:
    """Request headers sent with every search call."""
    headers = {
        "Accept": "application/json",
        "Cache-Control": "no-cache",
        "User-Agent": config.user_agent,
    }
    headers.update(config.extra_headers)
    return headers


async def fetch_upstream(
    query: str,
    config: Optional[SearchConfig] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """
    Run one search against the upstream endpoint and return the raw body.

    Args:
        query: Free-text search query, sent as the ``query`` parameter.
        config: Endpoint settings; defaults to ``SearchConfig()``.
        client: Optional shared client. It is used as-is and left open.

    Returns:
        The response body as text (expected to be JSON).

    Raises:
        UpstreamFetchError: on transport errors, timeouts or non-2xx status.
    """
    config = config or SearchConfig()
    url = config.search_url
    logger.debug("GET {} query={!r}", url, query)

    try:
        if client is not None:
            response = await _get(client, url, query, config)
        else:
            async with httpx.AsyncClient(timeout=config.timeout_s) as own_client:
                response = await _get(own_client, url, query, config)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        status = exc.response.status_code
        error = UpstreamFetchError(
            f"Search request failed with HTTP {status}: {exc.response.reason_phrase}",
            status_code=status,
        )
        logger.warning("GET {} failed: {}", url, error)
        raise error from exc
    except httpx.TimeoutException as exc:
        error = UpstreamFetchError(f"Search request timed out after {config.timeout_s}s")
        logger.warning("GET {} failed: {}", url, error)
        raise error from exc
    except httpx.HTTPError as exc:
        error = UpstreamFetchError(f"Search request failed: {exc}")
        logger.warning("GET {} failed: {}", url, error)
        raise error from exc

    return response.text


async def _get(
    client: httpx.AsyncClient, url: str, query: str, config: SearchConfig
) -> httpx.Response:
    return await client.get(
        url,
        params={"query": query},
        headers=build_headers(config),
        timeout=config.timeout_s,
    )
