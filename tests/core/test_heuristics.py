"""
Test suite for analysis heuristics.

Covers sentiment word counting, repeated-word keyword extraction and
bulleted suggestion extraction.

System role: Verification of deterministic text heuristics
"""

import pytest

from helpdesk.core.analysis.heuristics import (
    classify_sentiment,
    extract_keywords,
    extract_suggestions,
)
from helpdesk.models.analysis import Sentiment


class TestClassifySentiment:
    """Test suite for classify_sentiment."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Thank you, great job", Sentiment.POSITIVE),
            ("This is a bad bug, a real problem", Sentiment.NEGATIVE),
            ("The sky is blue", Sentiment.NEUTRAL),
            ("", Sentiment.NEUTRAL),
        ],
    )
    def test_classify_should_label_examples(self, text: str, expected: Sentiment) -> None:
        assert classify_sentiment(text) == expected

    def test_classify_should_match_substrings_case_insensitively(self) -> None:
        """'FAILED' contains 'fail'; 'Errors' contains 'error'."""
        assert classify_sentiment("Login FAILED with Errors") == Sentiment.NEGATIVE

    def test_classify_should_be_neutral_on_equal_counts(self) -> None:
        assert classify_sentiment("Good news, but one issue remains") == Sentiment.NEUTRAL

    def test_classify_should_count_each_word_once(self) -> None:
        """Repeating one negative word does not outweigh two positive words."""
        text = "bug bug bug bug, thanks, very helpful"

        assert classify_sentiment(text) == Sentiment.POSITIVE


class TestExtractKeywords:
    """Test suite for extract_keywords."""

    def test_extract_should_keep_repeated_words(self) -> None:
        keywords = extract_keywords("test test test demo demo example")

        assert "test" in keywords
        assert "demo" in keywords
        assert "example" not in keywords
        assert len(keywords) == len(set(keywords))

    def test_extract_should_ignore_short_words(self) -> None:
        """Words of three characters or fewer never qualify."""
        assert extract_keywords("the the the app app app") == []

    def test_extract_should_lowercase(self) -> None:
        assert extract_keywords("Printer PRINTER printer") == ["printer"]

    def test_extract_should_use_first_occurrence_order(self) -> None:
        """Order follows first appearance, not frequency."""
        text = "alpha beta beta beta gamma alpha gamma"

        assert extract_keywords(text) == ["alpha", "beta", "gamma"]

    def test_extract_should_return_at_most_five(self) -> None:
        words = ["one1", "two2", "three", "four", "five", "sixth", "seven"]
        text = " ".join(words * 2)

        assert extract_keywords(text) == words[:5]


class TestExtractSuggestions:
    """Test suite for extract_suggestions."""

    def test_extract_should_collect_bullets_in_order(self) -> None:
        assert extract_suggestions("Intro\n- Do X\n• Do Y\nOutro") == ["Do X", "Do Y"]

    def test_extract_should_handle_indented_bullets(self) -> None:
        text = "Steps:\n   -   Restart the router  \n\t•Check cables"

        assert extract_suggestions(text) == ["Restart the router", "Check cables"]

    def test_extract_should_return_empty_without_bullets(self) -> None:
        assert extract_suggestions("1. numbered\n* star\nplain") == []

    def test_extract_should_keep_unicode_line_separators_inside_bullet(self) -> None:
        assert extract_suggestions("- fix a\u2028b") == ["fix a\u2028b"]

    def test_extract_should_keep_lone_carriage_return_inside_bullet(self) -> None:
        assert extract_suggestions("- fix a\rthen b\n- x") == ["fix a\rthen b", "x"]

    def test_extract_should_drop_trailing_carriage_return_of_crlf_lines(self) -> None:
        assert extract_suggestions("- a\r\n- b\r\n") == ["a", "b"]
