"""
Data models for Book Club Search
"""
from .query import (
    QueryKind,
    QueryClassification,
    Passthrough,
    IsbnLookup,
    ScopedSearch,
    TitleHint
)
from .books import SearchResultItem, ImageLinks, GoogleBooksResponse
from .responses import BookSearchResponse, QueryAnalysisResponse, ErrorResponse

__all__ = [
    # Query classification
    "QueryKind",
    "QueryClassification",
    "Passthrough",
    "IsbnLookup",
    "ScopedSearch",
    "TitleHint",
    # Books
    "SearchResultItem",
    "ImageLinks",
    "GoogleBooksResponse",
    # Request/Response
    "BookSearchResponse",
    "QueryAnalysisResponse",
    "ErrorResponse",
]
