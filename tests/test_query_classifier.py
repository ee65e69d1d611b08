"""
Tests for query classification module
"""
import pytest
from unittest.mock import patch
from book_search.models.query import (
    QueryKind,
    Passthrough,
    IsbnLookup,
    ScopedSearch,
    TitleHint,
)
from book_search.services.query_classifier import (
    classify,
    clean_isbn,
    has_field_scope_operator,
    split_author_label,
    split_title_by_author,
    match_long_title,
)


def test_existing_operator_passthrough():
    """Test explicit operators are respected"""
    result = classify("inauthor:Tolkien")

    assert result == Passthrough(text="inauthor:Tolkien")


def test_existing_operator_case_insensitive():
    """Test operator detection ignores case"""
    result = classify("  InTitle:The Hobbit by Tolkien  ")

    assert result.kind == QueryKind.PASSTHROUGH
    assert result.text == "InTitle:The Hobbit by Tolkien"


def test_all_field_scope_operators_detected():
    """Test every supported operator is recognised"""
    for query in ["intitle:dune", "inauthor:herbert", "inpublisher:ace", "subject:fiction", "isbn:0441013597"]:
        assert has_field_scope_operator(query)

    assert not has_field_scope_operator("author: Herbert")


def test_isbn13_with_hyphens():
    """Test ISBN-13 detection strips hyphens"""
    result = classify("978-0-13-468599-1")

    assert result == IsbnLookup(isbn="9780134685991")


def test_isbn10():
    """Test ISBN-10 detection"""
    result = classify("0134685997")

    assert result == IsbnLookup(isbn="0134685997")


def test_isbn_with_spaces():
    """Test ISBN detection strips whitespace"""
    assert clean_isbn("978 0 13 468599 1") == "9780134685991"


def test_not_isbn_wrong_length():
    """Test 11 and 12 digit numbers are not ISBNs"""
    assert clean_isbn("12345678901") is None
    assert clean_isbn("123456789012") is None
    assert classify("12345678901").kind == QueryKind.PASSTHROUGH


def test_isbn10_with_check_letter_not_matched():
    """Test only decimal digits count as an ISBN"""
    assert clean_isbn("043942089X") is None


def test_by_author_split():
    """Test "title by author" phrasing"""
    result = classify("Dune by Frank Herbert")

    assert result == ScopedSearch(title="Dune", author="Frank Herbert")


def test_by_author_case_insensitive():
    """Test "BY" is matched regardless of case"""
    result = classify("The Hobbit BY J.R.R. Tolkien")

    assert result == ScopedSearch(title="The Hobbit", author="J.R.R. Tolkien")


def test_by_author_multiline_title():
    """Test a newline inside the title still splits on "by" """
    result = classify("The Left\nHand by Le Guin")

    assert result == ScopedSearch(title="The Left\nHand", author="Le Guin")


def test_by_requires_word_boundary():
    """Test "by" inside a word is not an author indicator"""
    result = classify("baby shark")

    assert result == Passthrough(text="baby shark")


def test_author_label_with_title():
    """Test "author:" label with a title before it"""
    result = classify("Dune author: Frank Herbert")

    assert result == ScopedSearch(title="Dune", author="Frank Herbert")


def test_author_label_only():
    """Test "author:" label with no title"""
    result = classify("author: Ursula K. Le Guin")

    assert result == ScopedSearch(author="Ursula K. Le Guin")
    assert result.title is None


def test_author_label_stops_at_comma():
    """Test author runs up to the comma and the rest stays in the title"""
    title, author = split_author_label("author: Herbert, sequel to Dune")

    assert author == "Herbert"
    assert title == ", sequel to Dune"


def test_written_by_pattern():
    """Test the written-by splitter on its own"""
    assert split_title_by_author("Emma written by Jane Austen", "written_by") == ("Emma", "Jane Austen")


def test_written_by_claimed_by_earlier_by_pattern():
    """Test the plain "by" pattern is tried first"""
    result = classify("Emma written by Jane Austen")

    assert result == ScopedSearch(title="Emma written", author="Jane Austen")


def test_long_query_title_hint():
    """Test 3+ word queries are scoped to title"""
    result = classify("a game of thrones")

    assert result == TitleHint(text="a game of thrones")


def test_short_query_passthrough():
    """Test 1-2 word queries are left alone"""
    assert classify("dune") == Passthrough(text="dune")
    assert classify("foundation series") == Passthrough(text="foundation series")


def test_word_count_ignores_extra_whitespace():
    """Test repeated whitespace does not inflate the word count"""
    assert match_long_title("foundation     series") is None
    assert classify("  the   left hand  ").kind == QueryKind.TITLE_HINT


def test_empty_query():
    """Test empty and blank input"""
    assert classify("") == Passthrough(text="")
    assert classify("   ") == Passthrough(text="")


def test_none_query():
    """Test None is treated as empty"""
    assert classify(None) == Passthrough(text="")


def test_failing_rule_falls_through():
    """Test a rule that raises is skipped rather than propagated"""
    with patch(
        "book_search.services.query_classifier.split_author_query",
        side_effect=RuntimeError("boom")
    ):
        result = classify("Dune by Frank Herbert")

    # Author rule skipped, long-title rule applies
    assert result == TitleHint(text="Dune by Frank Herbert")


def test_adversarial_input_never_raises():
    """Test odd input always classifies"""
    for query in ["by", " by ", "author:", "author: ,", "::::", "\x00\x01", "(" * 500, "by by by"]:
        result = classify(query)
        assert result.kind in set(QueryKind)


def test_scoped_search_requires_a_field():
    """Test ScopedSearch rejects an empty classification"""
    with pytest.raises(ValueError):
        ScopedSearch()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
