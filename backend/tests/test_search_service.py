"""Tests for payload validation and provider response handling."""

import asyncio

import httpx
import pytest

from pharmasearch.search import service
from pharmasearch.search.errors import MalformedPayloadError, ProviderError, QueryRequiredError
from pharmasearch.search.query_builder import build_filter_clauses
from pharmasearch.search.schemas import SearchFilters


def test_parse_year_numeric_string():
    assert service.parse_year("2010") == 2010


def test_parse_year_leading_digits():
    assert service.parse_year(" 2010abc") == 2010


def test_parse_year_invalid_values():
    for value in ["abc", "", None, True, float("nan"), [2010]]:
        assert service.parse_year(value) is None


def test_parse_year_numbers():
    assert service.parse_year(2015) == 2015
    assert service.parse_year(2015.9) == 2015


def test_parse_filters_trims_query():
    filters = service.parse_filters({"query": "  imatinib  "})
    assert filters.query == "imatinib"


def test_parse_filters_blank_query():
    for payload in [{}, {"query": ""}, {"query": "   "}, {"query": None}, {"query": 0}, {"query": False}]:
        with pytest.raises(QueryRequiredError):
            service.parse_filters(payload)


def test_parse_filters_non_string_query():
    for payload in [{"query": 42}, {"query": True}, {"query": ["x"]}, {"query": {}}]:
        with pytest.raises(MalformedPayloadError):
            service.parse_filters(payload)


def test_parse_filters_non_string_publication_type():
    for value in [5, 0, False, ["Review"]]:
        with pytest.raises(MalformedPayloadError):
            service.parse_filters({"query": "x", "publicationType": value})


def test_parse_filters_null_publication_type():
    assert service.parse_filters({"query": "x", "publicationType": None}).publication_type is None


def test_parse_filters_rejects_non_object():
    with pytest.raises(MalformedPayloadError):
        service.parse_filters(["query"])


def test_parse_payload_rejects_invalid_json():
    with pytest.raises(MalformedPayloadError):
        service.parse_payload(b"{not json")


def test_non_numeric_start_year_same_as_omitted():
    with_junk = service.parse_filters({"query": "x", "startYear": "abc", "endYear": "2015"})
    without = service.parse_filters({"query": "x", "endYear": "2015"})
    assert build_filter_clauses(with_junk, 2026) == build_filter_clauses(without, 2026)


def test_parse_filters_blank_publication_type():
    filters = service.parse_filters({"query": "x", "publicationType": "  "})
    assert filters.publication_type is None


def _run_fetch(handler, filters=None):
    async def go():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await service.fetch_papers(filters or SearchFilters(query="x"), client, current_year=2026)

    return asyncio.run(go())


def test_fetch_papers_sends_accept_header():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"total": 0, "data": []})

    _run_fetch(handler)
    assert seen[0].headers["Accept"] == "application/json"
    assert "x-api-key" not in seen[0].headers


def test_fetch_papers_sends_api_key_when_configured(monkeypatch):
    monkeypatch.setattr(service.settings, "SEMANTIC_SCHOLAR_API_KEY", "secret")
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"total": 0, "data": []})

    _run_fetch(handler)
    assert seen[0].headers["x-api-key"] == "secret"


def test_fetch_papers_provider_error():
    def handler(request):
        return httpx.Response(503, text="overloaded")

    with pytest.raises(ProviderError) as exc_info:
        _run_fetch(handler)
    assert exc_info.value.status == 503
    assert exc_info.value.status_code == 502


def test_fetch_papers_missing_data_means_no_papers():
    def handler(request):
        return httpx.Response(200, json={"total": 0, "offset": 0})

    result = _run_fetch(handler)
    assert result.papers == []
    assert result.total == 0


def test_fetch_papers_missing_total_raises():
    def handler(request):
        return httpx.Response(200, json={"data": []})

    with pytest.raises(KeyError):
        _run_fetch(handler)


def test_fetch_papers_cached_within_ttl():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json={"total": 1, "data": [{"paperId": "a"}]})

    first = _run_fetch(handler)
    second = _run_fetch(handler)
    assert len(calls) == 1
    assert first == second


def test_fetch_papers_cache_disabled(monkeypatch):
    monkeypatch.setattr(service.settings, "PROVIDER_CACHE_TTL", 0)
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json={"total": 0, "data": []})

    _run_fetch(handler)
    _run_fetch(handler)
    assert len(calls) == 2


def test_failed_responses_not_cached():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(500, text="boom")

    for _ in range(2):
        with pytest.raises(ProviderError):
            _run_fetch(handler)
    assert len(calls) == 2
