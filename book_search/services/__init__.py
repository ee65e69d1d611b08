"""
Core service modules for Book Club Search
"""
from .query_classifier import classify
from .query_builder import build_query, optimize_query
from .popularity import (
    popularity_score,
    rank_results,
    InvalidRatingError
)

__all__ = [
    "classify",
    "build_query",
    "optimize_query",
    "popularity_score",
    "rank_results",
    "InvalidRatingError",
]
