"""Tests for docsearch.tools module."""

import asyncio
import json
import pytest

from docsearch.config import SearchConfig
from docsearch.errors import UpstreamFetchError
from docsearch.models import SearchResult
from docsearch.tools import SearchDocsInput, make_search_tool, search_docs


class TestSearchDocs:
    """Tests for search_docs."""

    @pytest.mark.asyncio
    async def test_paginates_array_response(self, fake_fetcher, make_records):
        fetcher = fake_fetcher(make_records(5))

        result = await search_docs("test query", {"page": "1", "per_page": "2"}, fetcher=fetcher)

        assert result.success is True
        assert result.error is None
        parsed = json.loads(result.formatted_text)
        assert parsed["pagination"]["total_pages"] == 3
        assert [r["id"] for r in parsed["results"]] == [1, 2]
        assert fetcher.calls == ["test query"]

    @pytest.mark.asyncio
    async def test_default_options(self, fake_fetcher, sample_records):
        result = await search_docs("test query", fetcher=fake_fetcher(sample_records))

        parsed = json.loads(result.formatted_text)
        assert parsed["pagination"]["page"] == 1
        assert parsed["pagination"]["per_page"] == 10
        assert len(parsed["results"]) == 10

    @pytest.mark.asyncio
    async def test_numeric_options(self, fake_fetcher, sample_records):
        result = await search_docs(
            "test query", {"page": 3, "per_page": 10}, fetcher=fake_fetcher(sample_records)
        )

        parsed = json.loads(result.formatted_text)
        assert [r["id"] for r in parsed["results"]] == list(range(21, 26))
        assert parsed["pagination"]["has_next_page"] is False

    @pytest.mark.asyncio
    async def test_configured_defaults(self, fake_fetcher, sample_records):
        config = SearchConfig(default_per_page=5)
        result = await search_docs("q", config=config, fetcher=fake_fetcher(sample_records))

        parsed = json.loads(result.formatted_text)
        assert parsed["pagination"]["per_page"] == 5
        assert parsed["pagination"]["total_pages"] == 5

    @pytest.mark.asyncio
    async def test_existing_pagination_preserved(self, fake_fetcher):
        body = {
            "pagination": {"page": 1, "per_page": 10, "total_results": 50, "total_pages": 5},
            "results": [{"id": 1, "title": "Result 1"}],
        }
        result = await search_docs("q", {"page": "1", "per_page": "10"}, fetcher=fake_fetcher(body))

        assert result.success is True
        assert json.loads(result.formatted_text)["pagination"] == body["pagination"]

    @pytest.mark.asyncio
    async def test_fetch_error_is_failure(self, fake_fetcher):
        fetcher = fake_fetcher(UpstreamFetchError("Search request failed with HTTP 503", status_code=503))

        result = await search_docs("q", fetcher=fetcher)

        assert result.success is False
        assert result.formatted_text is None
        assert "503" in result.error

    @pytest.mark.asyncio
    async def test_malformed_json_is_failure(self, fake_fetcher):
        result = await search_docs("q", fetcher=fake_fetcher("<html>oops</html>"))

        assert result.success is False
        assert "not valid JSON" in result.error

    @pytest.mark.asyncio
    async def test_invalid_default_is_failure(self, fake_fetcher, sample_records):
        config = SearchConfig(default_per_page=0)
        result = await search_docs("q", config=config, fetcher=fake_fetcher(sample_records))

        assert result.success is False
        assert "per_page=0" in result.error

    @pytest.mark.asyncio
    async def test_overlong_number_body_is_failure(self, fake_fetcher):
        result = await search_docs("q", fetcher=fake_fetcher("[" + "9" * 5000 + "]"))

        assert result.success is False
        assert "not valid JSON" in result.error

    @pytest.mark.asyncio
    async def test_overlong_page_falls_back(self, fake_fetcher, sample_records):
        result = await search_docs(
            "q", {"page": "9" * 5000}, fetcher=fake_fetcher(sample_records)
        )

        assert result.success is True
        assert json.loads(result.formatted_text)["pagination"]["page"] == 1

    @pytest.mark.asyncio
    async def test_huge_upstream_total_is_success(self, fake_fetcher):
        body = '{"results": [], "total_results": 1' + "0" * 400 + "}"
        result = await search_docs("q", {"per_page": 3}, fetcher=fake_fetcher(body))

        assert result.success is True
        total_pages = json.loads(result.formatted_text)["pagination"]["total_pages"]
        assert total_pages == (10**400 + 2) // 3

    @pytest.mark.asyncio
    async def test_unexpected_errors_propagate(self, fake_fetcher):
        with pytest.raises(RuntimeError):
            await search_docs("q", fetcher=fake_fetcher(RuntimeError("boom")))

    @pytest.mark.asyncio
    async def test_concurrent_calls_independent(self, fake_fetcher, make_records):
        fetcher = fake_fetcher(make_records(30))

        results = await asyncio.gather(*[
            search_docs(f"q{page}", {"page": page, "per_page": 10}, fetcher=fetcher)
            for page in (1, 2, 3)
        ])

        first_ids = [json.loads(r.formatted_text)["results"][0]["id"] for r in results]
        assert first_ids == [1, 11, 21]
        assert sorted(fetcher.calls) == ["q1", "q2", "q3"]


class TestSearchResult:
    """Tests for the SearchResult wire shape."""

    def test_success_dict(self):
        assert SearchResult.ok("{}").to_dict() == {"success": True, "formattedText": "{}"}

    def test_failure_dict(self):
        assert SearchResult.failure("nope").to_dict() == {"success": False, "error": "nope"}


class TestMakeSearchTool:
    """Tests for make_search_tool."""

    def test_tool_metadata(self):
        tool = make_search_tool()
        assert tool.name == "search_docs"
        assert tool.args_schema is SearchDocsInput
        assert set(tool.args) == {"query", "page", "per_page"}

    @pytest.mark.asyncio
    async def test_tool_invocation(self, fake_fetcher, make_records):
        tool = make_search_tool(fetcher=fake_fetcher(make_records(5)))

        output = await tool.ainvoke({"query": "test", "page": "2", "per_page": 2})

        assert output["success"] is True
        parsed = json.loads(output["formattedText"])
        assert [r["id"] for r in parsed["results"]] == [3, 4]

    @pytest.mark.asyncio
    async def test_tool_failure(self, fake_fetcher):
        tool = make_search_tool(fetcher=fake_fetcher(UpstreamFetchError("timed out")))

        output = await tool.ainvoke({"query": "test"})

        assert output == {"success": False, "error": "timed out"}
