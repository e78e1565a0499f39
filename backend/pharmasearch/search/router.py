import logging

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from pharmasearch.search import service
from pharmasearch.search.dependencies import get_http_client
from pharmasearch.search.errors import SearchError, UNEXPECTED_ERROR
from pharmasearch.search.options import search_options
from pharmasearch.search.presenters import card_view
from pharmasearch.search.schemas import CardsResponse, ErrorResponse, SearchOptions, SearchResponse
from pharmasearch.utils.helpers import current_year

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search", tags=["Search"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
}


def _error_response(e: Exception) -> JSONResponse:
    if not isinstance(e, SearchError):
        logger.exception(f"Unexpected search error: {e}")
        return JSONResponse({"error": UNEXPECTED_ERROR}, status_code=500)
    if e.status_code == 500:
        logger.exception(f"Search failed: {e}")
    return JSONResponse({"error": e.message}, status_code=e.status_code)


@router.post("", response_model=SearchResponse, responses=ERROR_RESPONSES)
async def search(
    request: Request,
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """Search Semantic Scholar with the submitted filters."""
    try:
        payload = service.parse_payload(await request.body())
        return await service.search_papers(payload, client)
    except Exception as e:
        return _error_response(e)


@router.post("/cards", response_model=CardsResponse, responses=ERROR_RESPONSES)
async def search_cards(
    request: Request,
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """Same search, shaped as result cards with a summary line."""
    try:
        filters = service.parse_filters(service.parse_payload(await request.body()))
        result = await service.fetch_papers(filters, client)
        return card_view(result, filters.query)
    except Exception as e:
        return _error_response(e)


@router.get("/options", response_model=SearchOptions)
async def get_search_options():
    """Publication types, year bounds and form messages."""
    return search_options(current_year())
