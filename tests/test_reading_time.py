"""Unit tests for reading-time derivation."""

import pytest

from folio.utils.content import calculate_reading_time, count_words


class TestCountWords:
    def test_splits_on_any_whitespace(self):
        assert count_words("one two\tthree\nfour   five") == 5

    def test_ignores_leading_and_trailing_whitespace(self):
        assert count_words("   padded words   ") == 2

    def test_empty(self):
        assert count_words("") == 0


class TestCalculateReadingTime:
    @pytest.mark.parametrize(
        "words, expected",
        [
            (1, "1 min read"),
            (199, "1 min read"),
            (200, "1 min read"),
            (201, "2 min read"),
            (250, "2 min read"),
            (400, "2 min read"),
            (401, "3 min read"),
        ],
    )
    def test_rounds_up_to_whole_minutes(self, words, expected):
        assert calculate_reading_time(" ".join(["word"] * words)) == expected

    def test_never_below_one_minute(self):
        assert calculate_reading_time("") == "1 min read"
        assert calculate_reading_time("   ") == "1 min read"

    def test_trailing_separator_does_not_count_as_word(self):
        assert calculate_reading_time("word " * 250) == "2 min read"
