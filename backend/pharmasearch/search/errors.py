"""Search errors and the fixed messages returned to clients."""

QUERY_REQUIRED = "Query is required."
PROVIDER_FAILED = "Failed to retrieve research papers."
UNEXPECTED_ERROR = "Unexpected server error."


class SearchError(Exception):
    status_code = 500
    message = UNEXPECTED_ERROR


class QueryRequiredError(SearchError):
    status_code = 400
    message = QUERY_REQUIRED


class MalformedPayloadError(SearchError):
    """Request body is not a JSON object."""


class ProviderError(SearchError):
    status_code = 502
    message = PROVIDER_FAILED

    def __init__(self, status: int, body: str):
        super().__init__(f"Provider returned {status}")
        self.status = status
        self.body = body
