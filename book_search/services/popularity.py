"""
Popularity Ranking
Orders Google Books results by a log-dampened popularity score

Scoring formula:
    score = average_rating * ln(ratings_count + 1)

A plain rating * count product lets one 5-star rating on an obscure book beat
a widely read, well-regarded one. The log keeps breadth of readership
rewarded while rating quality still decides between books with similar
exposure.
"""
from typing import List, Optional
from book_search.models.books import SearchResultItem
import logging
import math

logger = logging.getLogger(__name__)


# Google Books ratings scale
MIN_AVERAGE_RATING = 0.0
MAX_AVERAGE_RATING = 5.0


class InvalidRatingError(ValueError):
    """Rating data outside the agreed range; reported, never clamped"""

    def __init__(self, item_id: str, field: str, value):
        self.item_id = item_id
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field} {value!r} for item {item_id}")


def validate_rating_fields(item: SearchResultItem) -> None:
    """
    Check rating signals are in range

    Raises:
        InvalidRatingError: If average_rating is outside 0-5 (or NaN) or
            ratings_count is negative
    """
    rating = item.average_rating
    if rating is not None and not (MIN_AVERAGE_RATING <= rating <= MAX_AVERAGE_RATING):
        raise InvalidRatingError(item.id, "average_rating", rating)

    count = item.ratings_count
    if count is not None and count < 0:
        raise InvalidRatingError(item.id, "ratings_count", count)


def popularity_score(item: SearchResultItem) -> float:
    """
    Calculate the popularity score for a result

    Args:
        item: Provider result

    Returns:
        Non-negative score; 0.0 for unrated items
    """
    validate_rating_fields(item)

    if not item.ratings_count or item.average_rating is None:
        return 0.0

    return item.average_rating * math.log1p(item.ratings_count)


def rank_results(items: Optional[List[SearchResultItem]]) -> List[SearchResultItem]:
    """
    Sort results by popularity score, highest first

    The sort is stable, so equally scored items (usually the unrated ones)
    keep the provider's relevance order. Items are neither copied nor
    filtered. If any item fails scoring the whole ranking fails.

    Args:
        items: Provider results in provider order

    Returns:
        Permutation of items in descending score order

    Raises:
        InvalidRatingError: If any item has out-of-range rating data
    """
    if not items:
        return []

    ranked = sorted(items, key=popularity_score, reverse=True)

    logger.debug(f"Ranked {len(ranked)} results by popularity")

    return ranked
