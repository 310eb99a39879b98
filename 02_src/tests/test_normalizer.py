"""Tests for normalize()."""

import pytest

from parcelbot.dialogue.normalizer import NO, YES, normalize


class TestNormalize:
    """Tests for yes/no folding."""

    @pytest.mark.parametrize("text", ["y", "yes", "yeah", "yep", "yess", "yup", "yea"])
    def test_affirmatives(self, text):
        assert normalize(text) == YES

    @pytest.mark.parametrize("text", ["n", "no", "nah", "nope"])
    def test_negatives(self, text):
        assert normalize(text) == NO

    def test_case_and_whitespace_ignored(self):
        assert normalize("  YeAh ") == "yes"
        assert normalize("\tNOPE\n") == "no"

    def test_other_text_is_lowercased_and_trimmed(self):
        assert normalize("  Where Is My Parcel ") == "where is my parcel"

    def test_words_starting_with_yes_pass_through(self):
        assert normalize("Yesterday") == "yesterday"
        assert normalize("not really") == "not really"

    def test_empty(self):
        assert normalize("") == ""
        assert normalize("   ") == ""
