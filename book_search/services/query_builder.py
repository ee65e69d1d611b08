"""
Query Builder Module
Renders a query classification into a Google Books query string
"""
from typing import Callable, Dict

from book_search.models.query import (
    QueryKind,
    QueryClassification,
    Passthrough,
    IsbnLookup,
    ScopedSearch,
    TitleHint,
)
from book_search.services.query_classifier import classify
from book_search.services.query_patterns import (
    TITLE_OPERATOR,
    AUTHOR_OPERATOR,
    ISBN_OPERATOR,
)
import logging

logger = logging.getLogger(__name__)


def build_passthrough(classification: Passthrough) -> str:
    return classification.text


def build_isbn_lookup(classification: IsbnLookup) -> str:
    return f"{ISBN_OPERATOR}{classification.isbn}"


def build_scoped_search(classification: ScopedSearch) -> str:
    clauses = []
    if classification.title:
        clauses.append(f"{TITLE_OPERATOR}{classification.title}")
    if classification.author:
        clauses.append(f"{AUTHOR_OPERATOR}{classification.author}")
    return " ".join(clauses)


def build_title_hint(classification: TitleHint) -> str:
    return f"{TITLE_OPERATOR}{classification.text}"


# One builder per QueryKind
QUERY_BUILDERS: Dict[QueryKind, Callable[..., str]] = {
    QueryKind.PASSTHROUGH: build_passthrough,
    QueryKind.ISBN_LOOKUP: build_isbn_lookup,
    QueryKind.SCOPED_SEARCH: build_scoped_search,
    QueryKind.TITLE_HINT: build_title_hint,
}


def build_query(classification: QueryClassification) -> str:
    """
    Assemble the provider query string

    No escaping is done here; URL encoding happens in the HTTP client.

    Args:
        classification: Output of classify()

    Returns:
        Google Books query string (may be empty)
    """
    return QUERY_BUILDERS[classification.kind](classification)


def optimize_query(raw: str) -> str:
    """
    Classify and rebuild a raw search string

    Idempotent: an optimized query contains an operator (or is short free
    text), so optimizing it again returns it unchanged.

    Args:
        raw: Raw user search query

    Returns:
        Optimized query with appropriate operators
    """
    classification = classify(raw)
    query = build_query(classification)

    logger.info(f"Optimized query {raw!r} -> {query!r} ({classification.kind.value})")

    return query
