"""Search service: payload validation, provider call and response shaping."""

import json
import logging
import math
import re
import time
from typing import Any, Dict, Optional, Tuple

import httpx

from pharmasearch.config import settings
from pharmasearch.search.errors import MalformedPayloadError, ProviderError, QueryRequiredError
from pharmasearch.search.query_builder import build_query_url
from pharmasearch.search.schemas import SearchFilters, SearchResponse
from pharmasearch.utils.helpers import current_year as get_current_year

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

# Provider response cache: url -> (expires_at, response)
_response_cache: Dict[str, Tuple[float, SearchResponse]] = {}
_CACHE_MAX = 256


def clear_cache():
    _response_cache.clear()


def _cache_get(url: str) -> Optional[SearchResponse]:
    entry = _response_cache.get(url)
    if entry is None:
        return None
    expires_at, response = entry
    if expires_at <= time.monotonic():
        del _response_cache[url]
        return None
    return response


def _cache_put(url: str, response: SearchResponse):
    if settings.PROVIDER_CACHE_TTL <= 0:
        return
    if len(_response_cache) >= _CACHE_MAX:
        # Remove oldest entry
        oldest_key = next(iter(_response_cache))
        del _response_cache[oldest_key]
    _response_cache[url] = (time.monotonic() + settings.PROVIDER_CACHE_TTL, response)


def parse_payload(raw: bytes) -> Any:
    """Decode the request body. Anything that isn't JSON is malformed."""
    try:
        return json.loads(raw)
    except (ValueError, UnicodeDecodeError) as e:
        raise MalformedPayloadError(str(e)) from e


def parse_year(value: Any) -> Optional[int]:
    """
    Lenient year parsing: "2010", " 2010", "2010abc" and 2010.0 all give 2010.
    Empty strings, non-numeric text, booleans and null give None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else None
    return None


def parse_filters(payload: Any) -> SearchFilters:
    """Narrow an untyped request body into SearchFilters."""
    if not isinstance(payload, dict):
        raise MalformedPayloadError(f"Expected a JSON object, got {type(payload).__name__}")

    query = payload.get("query")
    # null, 0, false and blank strings all mean "no query"
    if query in (None, False, 0) or (isinstance(query, str) and not query.strip()):
        raise QueryRequiredError()
    if not isinstance(query, str):
        raise MalformedPayloadError(f"query must be a string, got {type(query).__name__}")

    publication_type = payload.get("publicationType")
    if publication_type is not None and not isinstance(publication_type, str):
        raise MalformedPayloadError(
            f"publicationType must be a string, got {type(publication_type).__name__}"
        )

    return SearchFilters(
        query=query.strip(),
        start_year=parse_year(payload.get("startYear")),
        end_year=parse_year(payload.get("endYear")),
        publication_type=publication_type,
    )


def _provider_headers() -> Dict[str, str]:
    headers = {"Accept": "application/json"}
    if settings.SEMANTIC_SCHOLAR_API_KEY:
        headers["x-api-key"] = settings.SEMANTIC_SCHOLAR_API_KEY
    return headers


async def fetch_papers(
    filters: SearchFilters,
    client: httpx.AsyncClient,
    current_year: int = None,
) -> SearchResponse:
    """
    Query Semantic Scholar once and reshape the page into {papers, total}.
    Successful responses are reused for PROVIDER_CACHE_TTL seconds.
    """
    url = build_query_url(filters, current_year or get_current_year())

    cached = _cache_get(url)
    if cached is not None:
        logger.debug(f"Serving cached provider response for {url}")
        return cached

    resp = await client.get(url, headers=_provider_headers())
    if not resp.is_success:
        logger.error(f"Semantic Scholar request failed {resp.status_code} {resp.text}")
        raise ProviderError(resp.status_code, resp.text)

    data = resp.json()
    # Pages with no matches omit "data"
    result = SearchResponse(papers=data.get("data") or [], total=data["total"])

    _cache_put(url, result)
    return result


async def search_papers(payload: Any, client: httpx.AsyncClient) -> SearchResponse:
    filters = parse_filters(payload)
    return await fetch_papers(filters, client)
