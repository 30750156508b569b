"""Tests for the literal extraction patterns."""

import pytest

from argdown_analyzer.analysis.patterns import (
    ends_with_whitespace,
    match_argument_definition,
    match_argument_mention,
    match_argument_reference,
    match_link,
    match_statement_definition,
    match_statement_mention,
    match_statement_reference,
)


class TestTitlePatterns:
    def test_statement_reference(self):
        """The title is taken from a statement reference."""
        assert match_statement_reference("[Free will]") == "Free will"

    def test_statement_definition(self):
        """The title is taken from a statement definition."""
        assert match_statement_definition("[Free will]:") == "Free will"

    def test_argument_reference(self):
        """The title is taken from an argument reference."""
        assert match_argument_reference("<Libet>") == "Libet"

    def test_argument_definition(self):
        """The title is taken from an argument definition."""
        assert match_argument_definition("<Libet>:") == "Libet"

    @pytest.mark.parametrize(
        "matcher",
        [
            match_statement_reference,
            match_statement_definition,
            match_argument_reference,
            match_argument_definition,
        ],
    )
    def test_unmatched_image_yields_none(self, matcher):
        """Images without the expected markup give None."""
        assert matcher("plain words") is None


class TestMentionPatterns:
    def test_statement_mention_with_trailing_space(self):
        """A statement mention reports its trailing space."""
        match = match_statement_mention("@[Claim] ")

        assert match.title == "Claim"
        assert match.trailing_whitespace == " "

    def test_argument_mention_without_trailing_space(self):
        """An argument mention without a trailing space reports none."""
        match = match_argument_mention("@<Libet>")

        assert match.title == "Libet"
        assert match.trailing_whitespace == ""

    def test_reference_is_not_a_mention(self):
        """A bare reference does not match the mention pattern."""
        assert match_statement_mention("[Claim]") is None
        assert match_argument_mention("<Libet>") is None


class TestLinkPattern:
    def test_link_text_and_url(self):
        """Link text and url are split from the markup."""
        match = match_link("[See here](http://x.io) ")

        assert match.text == "See here"
        assert match.url == "http://x.io"
        assert match.trailing_whitespace == " "

    def test_malformed_link(self):
        """Broken link markup gives None."""
        assert match_link("[See here]") is None


def test_ends_with_whitespace():
    """Only a trailing whitespace character counts."""
    assert ends_with_whitespace("** ")
    assert ends_with_whitespace("_\t")
    assert not ends_with_whitespace("**")
    assert not ends_with_whitespace("")
