"""Translate search filters into a Semantic Scholar paper search URL."""

from typing import List

import httpx

from pharmasearch.config import settings
from pharmasearch.search.schemas import SearchFilters

RESULT_LIMIT = 15
FIELDS = "title,abstract,year,authors,venue,url,publicationTypes,journal"
MIN_YEAR = 1900


def build_filter_clauses(filters: SearchFilters, current_year: int) -> List[str]:
    """
    Year bounds come first, then the publication type.
    A single year bound is completed with MIN_YEAR or current_year.
    A year of 0 counts as unset.
    """
    clauses = []

    if filters.start_year or filters.end_year:
        start = filters.start_year if filters.start_year is not None else MIN_YEAR
        end = filters.end_year if filters.end_year is not None else current_year
        clauses.append(f"year>={start}")
        clauses.append(f"year<={end}")

    publication_type = (filters.publication_type or "").strip()
    if publication_type:
        clauses.append(f"publicationTypes:{publication_type}")

    return clauses


def build_query_url(
    filters: SearchFilters,
    current_year: int,
    endpoint: str = None,
) -> str:
    """Build the provider request URL. Deterministic for a given current_year."""
    params = {
        "query": filters.query,
        "limit": RESULT_LIMIT,
        "fields": FIELDS,
    }

    clauses = build_filter_clauses(filters, current_year)
    if clauses:
        params["filter"] = ",".join(clauses)

    return str(httpx.URL(endpoint or settings.SEMANTIC_SCHOLAR_ENDPOINT, params=params))
