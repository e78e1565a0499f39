"""Filter choices and messages for the search form."""

from pharmasearch.search.query_builder import MIN_YEAR
from pharmasearch.search.schemas import PublicationTypeOption, SearchOptions

PUBLICATION_TYPE_OPTIONS = [
    PublicationTypeOption(value="", label="Any publication type"),
    PublicationTypeOption(value="Clinical Trial", label="Clinical Trial"),
    PublicationTypeOption(value="Review", label="Review & Survey"),
    PublicationTypeOption(value="Meta Analysis", label="Meta Analysis"),
    PublicationTypeOption(value="Case Report", label="Case Report"),
    PublicationTypeOption(value="Conference", label="Conference"),
]

EMPTY_QUERY_MESSAGE = "Enter a research topic, drug target, or molecule."
FETCH_FAILED_MESSAGE = "Unable to fetch research papers. Try refining your filters."
NO_RESULTS_MESSAGE = "No papers found for that query. Try expanding your keywords or date range."


def search_options(current_year: int) -> SearchOptions:
    return SearchOptions(
        publication_types=PUBLICATION_TYPE_OPTIONS,
        min_year=MIN_YEAR,
        max_year=current_year,
        messages={
            "empty_query": EMPTY_QUERY_MESSAGE,
            "fetch_failed": FETCH_FAILED_MESSAGE,
            "no_results": NO_RESULTS_MESSAGE,
        },
    )
