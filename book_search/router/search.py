"""
Book Search API Router
Handles the club search box endpoints

Ranking is controlled by settings.ranking_enabled flag
"""
from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse
from typing import Optional
import time
import logging

from book_search.models.responses import BookSearchResponse, QueryAnalysisResponse, ErrorResponse
from book_search.services.query_classifier import classify
from book_search.services.query_builder import build_query, optimize_query
from book_search.services.popularity import rank_results, InvalidRatingError
from book_search.utils.google_books import (
    search_books,
    GoogleBooksError,
    GoogleBooksNetworkError,
    GoogleBooksRateLimitError,
    GoogleBooksAuthError,
)
from book_search.config import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/books", tags=["books"])


# Provider failures -> (status, error, message), checked in order
PROVIDER_ERROR_RESPONSES = [
    (
        GoogleBooksNetworkError,
        status.HTTP_503_SERVICE_UNAVAILABLE,
        "Network error",
        "Unable to connect to Google Books. Please check your internet connection and try again."
    ),
    (
        GoogleBooksRateLimitError,
        status.HTTP_429_TOO_MANY_REQUESTS,
        "Rate limit exceeded",
        "Too many search requests. Please wait a moment and try again."
    ),
    (
        GoogleBooksAuthError,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "API authentication error",
        "There was a problem with the book search service. Please try again later."
    ),
    (
        GoogleBooksError,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Search failed",
        "Unable to search for books. Please try again or use different search terms."
    ),
]


def error_response(status_code: int, error: str, message: str) -> JSONResponse:
    """Build a JSON error body the search box can show"""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error, message=message).model_dump()
    )


def provider_error_response(exc: GoogleBooksError) -> JSONResponse:
    """Map a provider failure to its HTTP response"""
    for error_type, status_code, error, message in PROVIDER_ERROR_RESPONSES:
        if isinstance(exc, error_type):
            return error_response(status_code, error, message)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Search failed", str(exc))


def missing_query_response() -> JSONResponse:
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "Query parameter is required",
        "Please enter a search term"
    )


@router.get(
    "/search",
    response_model=BookSearchResponse,
    responses={
        400: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    }
)
async def search(q: Optional[str] = Query(None, description="Search box text")):
    """
    Book search endpoint

    Processes the search box text through:
    1. Query optimization (operators for ISBNs, authors, long titles)
    2. Google Books volumes search
    3. Popularity ranking (feature-flagged)

    If ranking fails on bad rating data the provider order is returned with
    ranked=false.
    """
    if not q or not q.strip():
        return missing_query_response()

    start_time = time.time()

    optimized = optimize_query(q)

    try:
        provider_response = await search_books(optimized)
    except GoogleBooksError as e:
        logger.error(f"Book search failed for {optimized!r}: {e}")
        return provider_error_response(e)

    items = provider_response.items
    ranked = False

    if settings.ranking_enabled:
        try:
            items = rank_results(items)
            ranked = True
        except InvalidRatingError as e:
            logger.warning(f"Ranking skipped for {optimized!r}, returning provider order: {e}")

    latency_ms = int((time.time() - start_time) * 1000)

    logger.info(
        f"Search {q!r} -> {optimized!r}: {len(items)} items "
        f"(ranked={ranked}, {latency_ms}ms)"
    )

    return BookSearchResponse(
        query=q,
        optimized_query=optimized,
        total_items=provider_response.total_items,
        ranked=ranked,
        items=items,
        latency_ms=latency_ms
    )


@router.get(
    "/search/analyze",
    response_model=QueryAnalysisResponse,
    responses={400: {"model": ErrorResponse}}
)
async def analyze_query(q: Optional[str] = Query(None, description="Search box text")):
    """
    Show how a query would be classified and rewritten

    Useful for debugging; does not call Google Books.
    """
    if not q or not q.strip():
        return missing_query_response()

    classification = classify(q)

    return QueryAnalysisResponse(
        query=q,
        classification=classification,
        optimized_query=build_query(classification)
    )
