"""
Tests for query builder and query optimization
"""
import pytest
from book_search.models.query import (
    QueryKind,
    Passthrough,
    IsbnLookup,
    ScopedSearch,
    TitleHint,
)
from book_search.services.query_builder import (
    QUERY_BUILDERS,
    build_query,
    optimize_query,
)


SAMPLE_QUERIES = [
    "",
    "   ",
    "dune",
    "foundation series",
    "a game of thrones",
    "Dune by Frank Herbert",
    "Dune written by Frank Herbert",
    "author: Herbert",
    "Dune author: Frank Herbert",
    "author: Herbert, sequel to Dune",
    "978-0-13-468599-1",
    "0134685997",
    "inauthor:Tolkien",
    "INTITLE:hobbit",
    "subject:fantasy dragons",
    "  the left hand of darkness  ",
    "by",
    "author: ,",
    "1234567890123 by someone",
]


def test_every_kind_has_builder():
    """Test the builder table covers all classification kinds"""
    assert set(QUERY_BUILDERS) == set(QueryKind)


def test_build_passthrough():
    """Test passthrough text is emitted verbatim"""
    assert build_query(Passthrough(text="dune")) == "dune"
    assert build_query(Passthrough(text="")) == ""


def test_build_isbn():
    """Test ISBN operator is joined without a space"""
    assert build_query(IsbnLookup(isbn="9780134685991")) == "isbn:9780134685991"


def test_build_scoped_search_both_fields():
    """Test title and author clauses"""
    query = build_query(ScopedSearch(title="Dune", author="Frank Herbert"))

    assert query == "intitle:Dune inauthor:Frank Herbert"


def test_build_scoped_search_single_field():
    """Test only present clauses are emitted"""
    assert build_query(ScopedSearch(author="Herbert")) == "inauthor:Herbert"
    assert build_query(ScopedSearch(title="Dune")) == "intitle:Dune"


def test_build_title_hint():
    """Test title hint scoping"""
    assert build_query(TitleHint(text="a game of thrones")) == "intitle:a game of thrones"


def test_optimize_isbn():
    """Test ISBN queries become isbn: lookups"""
    assert optimize_query("978-0-13-468599-1") == "isbn:9780134685991"
    assert optimize_query("0134685997") == "isbn:0134685997"


def test_optimize_author_split():
    """Test author phrasing is split into two clauses"""
    query = optimize_query("Dune by Frank Herbert")

    assert "intitle:Dune" in query
    assert "inauthor:Frank Herbert" in query


def test_optimize_explicit_operator():
    """Test explicit operators pass through unchanged"""
    assert optimize_query("inauthor:Tolkien") == "inauthor:Tolkien"


def test_optimize_short_and_long_queries():
    """Test word-count heuristic"""
    assert optimize_query("dune") == "dune"
    assert optimize_query("foundation series") == "foundation series"
    assert optimize_query("a game of thrones") == "intitle:a game of thrones"


def test_optimize_empty():
    """Test empty input stays empty"""
    assert optimize_query("") == ""


def test_optimize_trims():
    """Test surrounding whitespace is removed"""
    assert optimize_query("  dune  ") == "dune"


@pytest.mark.parametrize("query", SAMPLE_QUERIES)
def test_optimize_idempotent(query):
    """Test optimizing an optimized query changes nothing"""
    once = optimize_query(query)

    assert optimize_query(once) == once


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
