"""
Utility modules for Book Club Search
"""
from .google_books import (
    search_books,
    GoogleBooksError,
    GoogleBooksNetworkError,
    GoogleBooksRateLimitError,
    GoogleBooksAuthError
)

__all__ = [
    "search_books",
    "GoogleBooksError",
    "GoogleBooksNetworkError",
    "GoogleBooksRateLimitError",
    "GoogleBooksAuthError",
]
