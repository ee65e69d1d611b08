"""
Google Books operators and query patterns shared by the classifier and builder
"""
import re


# Field-scope operators understood by Google Books
TITLE_OPERATOR = "intitle:"
AUTHOR_OPERATOR = "inauthor:"
PUBLISHER_OPERATOR = "inpublisher:"
SUBJECT_OPERATOR = "subject:"
ISBN_OPERATOR = "isbn:"

FIELD_SCOPE_OPERATORS = (
    TITLE_OPERATOR,
    AUTHOR_OPERATOR,
    PUBLISHER_OPERATOR,
    SUBJECT_OPERATOR,
    ISBN_OPERATOR,
)

# ISBN: hyphens and whitespace are ignored, then 10 or 13 ASCII digits
ISBN_SEPARATORS = re.compile(r"[-\s]")
ISBN_DIGITS = re.compile(r"[0-9]{10}|[0-9]{13}")

# Author indicators, tried in this order
AUTHOR_PATTERNS = {
    # "Dune by Frank Herbert"
    "by": re.compile(r"^(.+?)\s+by\s+(.+)$", re.IGNORECASE | re.DOTALL),
    # "Dune author: Frank Herbert", "author: Herbert, Dune"
    "author_label": re.compile(r"author:\s*([^,]+)", re.IGNORECASE),
    # "Dune written by Frank Herbert"
    "written_by": re.compile(r"^(.+?)\s+written\s+by\s+(.+)$", re.IGNORECASE | re.DOTALL),
}

# Queries this long are treated as titles; shorter ones stay unscoped
TITLE_HINT_MIN_WORDS = 3
