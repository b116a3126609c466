"""Pytest configuration and shared fixtures."""

import json
import os
import pytest
from unittest.mock import patch


@pytest.fixture(autouse=True)
def mock_search_env():
    """
    Automatically pin the search endpoint for all tests.

    This keeps SearchConfig.from_env() deterministic and makes sure
    nothing points at the real documentation host.
    """
    with patch.dict(os.environ, {
        "DOCS_SEARCH_BASE_URL": "https://docs.example.test",
        "DOCS_SEARCH_PATH": "/api/search",
        "DOCS_SEARCH_TIMEOUT_S": "5",
    }):
        yield


@pytest.fixture
def make_records():
    """Factory for numbered result records: make_records(3) -> ids 1..3."""
    def factory(count):
        return [{"id": i + 1, "title": f"Result {i + 1}"} for i in range(count)]

    return factory


@pytest.fixture
def sample_records(make_records):
    """Twenty-five flat result records."""
    return make_records(25)


@pytest.fixture
def fake_fetcher():
    """
    Build a fetcher coroutine that returns a canned body.

    Dicts and lists are JSON-encoded; strings are returned verbatim;
    exceptions are raised. The queries it was called with are recorded
    on ``fetcher.calls``.
    """
    def factory(body):
        calls = []

        async def fetcher(query):
            calls.append(query)
            if isinstance(body, BaseException):
                raise body
            if isinstance(body, str):
                return body
            return json.dumps(body)

        fetcher.calls = calls
        return fetcher

    return factory


@pytest.fixture
def reset_logger():
    """Restore loguru's default stderr sink after a test reconfigures it."""
    import sys
    from loguru import logger

    yield
    logger.remove()
    logger.add(sys.stderr)
