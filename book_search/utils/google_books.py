"""
Google Books API client
"""
import httpx
from pydantic import ValidationError
from typing import Optional
from book_search.config import settings
from book_search.models.books import GoogleBooksResponse
import logging

logger = logging.getLogger(__name__)


class GoogleBooksError(Exception):
    """Google Books request failed"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class GoogleBooksNetworkError(GoogleBooksError):
    """Google Books could not be reached"""


class GoogleBooksRateLimitError(GoogleBooksError):
    """Google Books returned 429"""


class GoogleBooksAuthError(GoogleBooksError):
    """Google Books rejected the API key (401/403)"""


def build_search_params(query: str, max_results: int) -> dict:
    """
    Build query-string parameters for a volumes search

    The key is only sent when one is configured.
    """
    params = {
        "q": query,
        "maxResults": max_results,
    }
    if settings.google_books_api_key:
        params["key"] = settings.google_books_api_key
    return params


def raise_for_provider_status(response: httpx.Response) -> None:
    """
    Map a failed provider response to a GoogleBooksError

    Raises:
        GoogleBooksRateLimitError: On 429
        GoogleBooksAuthError: On 401/403
        GoogleBooksError: On any other error status
    """
    if not response.is_error:
        return

    status_code = response.status_code
    message = f"Failed to search books: HTTP {status_code}"

    if status_code == 429:
        raise GoogleBooksRateLimitError(message, status_code)
    if status_code in (401, 403):
        raise GoogleBooksAuthError(message, status_code)
    raise GoogleBooksError(message, status_code)


async def search_books(query: str, max_results: Optional[int] = None) -> GoogleBooksResponse:
    """
    Search Google Books volumes

    Args:
        query: Provider query string (already optimized)
        max_results: Page size, defaults to settings.google_books_max_results

    Returns:
        Parsed volumes in provider order

    Raises:
        GoogleBooksNetworkError: If the request could not be sent
        GoogleBooksError: If Google Books answered with an error
    """
    params = build_search_params(
        query,
        max_results if max_results is not None else settings.google_books_max_results
    )

    try:
        async with httpx.AsyncClient(timeout=settings.google_books_timeout) as client:
            response = await client.get(settings.google_books_base_url, params=params)

    except httpx.TransportError as e:
        logger.error(f"Network error searching Google Books: {e}")
        raise GoogleBooksNetworkError(f"Failed to search books: {e}") from e

    if response.is_error:
        logger.error(f"Google Books returned HTTP {response.status_code} for query {query!r}")
    raise_for_provider_status(response)

    try:
        payload = response.json()
    except ValueError as e:
        logger.error(f"Invalid JSON from Google Books: {e}")
        raise GoogleBooksError("Failed to search books: invalid response body") from e

    try:
        result = GoogleBooksResponse.from_payload(payload)
    except (ValidationError, AttributeError, TypeError) as e:
        logger.error(f"Malformed volumes payload from Google Books: {e}")
        raise GoogleBooksError("Failed to search books: malformed response body") from e

    logger.info(f"Google Books returned {len(result.items)} of {result.total_items} items for {query!r}")

    return result
