"""
Query Classification Module
Decides which Google Books query form a raw search string should take
"""
from typing import Optional, Tuple

from book_search.models.query import (
    QueryClassification,
    Passthrough,
    IsbnLookup,
    ScopedSearch,
    TitleHint,
)
from book_search.services.query_patterns import (
    FIELD_SCOPE_OPERATORS,
    ISBN_SEPARATORS,
    ISBN_DIGITS,
    AUTHOR_PATTERNS,
    TITLE_HINT_MIN_WORDS,
)
import logging

logger = logging.getLogger(__name__)


def has_field_scope_operator(text: str) -> bool:
    """Check whether text already contains a Google Books operator (case-insensitive)"""
    text_lower = text.lower()
    return any(op in text_lower for op in FIELD_SCOPE_OPERATORS)


def clean_isbn(text: str) -> Optional[str]:
    """
    Strip ISBN separators and check the digit count

    Args:
        text: Trimmed query text

    Returns:
        10 or 13 digit string, or None if text is not ISBN-shaped
    """
    cleaned = ISBN_SEPARATORS.sub("", text)
    if ISBN_DIGITS.fullmatch(cleaned):
        return cleaned
    return None


def split_title_by_author(text: str, pattern_name: str) -> Optional[Tuple[str, str]]:
    """
    Split "<title> by <author>" style text with a named author pattern

    Returns:
        (title, author), both trimmed, or None if the pattern does not match
    """
    match = AUTHOR_PATTERNS[pattern_name].match(text)
    if not match:
        return None
    return match.group(1).strip(), match.group(2).strip()


def split_author_label(text: str) -> Optional[Tuple[str, str]]:
    """
    Split "author: <name>" text

    The author runs up to the next comma. The title is whatever is left once
    the matched span is removed, so extra clauses after the comma stay in it.

    Returns:
        (title, author); title may be empty
    """
    match = AUTHOR_PATTERNS["author_label"].search(text)
    if not match:
        return None
    author = match.group(1).strip()
    title = (text[:match.start()] + text[match.end():]).strip()
    return title, author


# Author splitters (ordered by priority)
AUTHOR_SPLITTERS = [
    ("by", lambda text: split_title_by_author(text, "by")),
    ("author_label", split_author_label),
    ("written_by", lambda text: split_title_by_author(text, "written_by")),
]


def split_author_query(text: str) -> Optional[Tuple[str, str]]:
    """
    Find the first author indicator in text

    Returns:
        (title, author) from the first matching pattern, or None
    """
    for name, splitter in AUTHOR_SPLITTERS:
        split = splitter(text)
        if split is not None:
            logger.debug(f"Author pattern '{name}' matched: {split}")
            return split
    return None


# =============================================================================
# CLASSIFICATION RULES
# =============================================================================

def match_existing_operators(text: str) -> Optional[QueryClassification]:
    """Respect operators the user (or a previous build) already wrote"""
    if has_field_scope_operator(text):
        return Passthrough(text=text)
    return None


def match_isbn(text: str) -> Optional[QueryClassification]:
    """ISBNs skip fuzzy text matching entirely"""
    isbn = clean_isbn(text)
    if isbn:
        return IsbnLookup(isbn=isbn)
    return None


def match_author_query(text: str) -> Optional[QueryClassification]:
    """Split natural "title by author" phrasing into separate fields"""
    split = split_author_query(text)
    if split is None:
        return None

    title, author = split
    if title and author:
        return ScopedSearch(title=title, author=author)
    if author:
        return ScopedSearch(author=author)
    return None


def match_long_title(text: str) -> Optional[QueryClassification]:
    """
    Scope multi-word queries to the title field

    One or two words are usually ambiguous (a surname, a series, a genre) and
    are left unscoped.
    """
    if len(text.split()) >= TITLE_HINT_MIN_WORDS:
        return TitleHint(text=text)
    return None


# Classification rules (ordered by priority, first match wins)
CLASSIFICATION_RULES = [
    {"name": "existing_operators", "match": match_existing_operators},
    {"name": "isbn", "match": match_isbn},
    {"name": "author_query", "match": match_author_query},
    {"name": "long_title", "match": match_long_title},
]


def classify(raw: str) -> QueryClassification:
    """
    Classify a raw search string

    Never raises: a rule that fails is logged and skipped, and anything no
    rule claims is passed through trimmed.

    Args:
        raw: Untrusted query text, possibly empty

    Returns:
        Exactly one QueryClassification variant
    """
    text = (raw or "").strip()

    for rule in CLASSIFICATION_RULES:
        try:
            result = rule["match"](text)
        except Exception as e:
            logger.error(f"Classification rule '{rule['name']}' failed for {text!r}: {e}", exc_info=True)
            continue

        if result is not None:
            logger.debug(f"Query {text!r} classified as {result.kind.value} by rule '{rule['name']}'")
            return result

    logger.debug(f"Query {text!r} passed through unchanged")
    return Passthrough(text=text)
