# =============================================================================
# test_errors.py - Error Hierarchy Tests
# =============================================================================

import dataclasses

import pytest

from textsymbols.errors import (
    InvalidRangeError,
    ParseTextError,
    ParseTextErrorDetails,
    TextSymbolsError,
)


class TestParseTextErrorDetails:
    """Tests for the error detail value."""

    def test_fields(self):
        """Position and message are stored."""
        details = ParseTextErrorDetails(12, "Expected ']'.")
        assert details.error_position == 12
        assert details.error_message == "Expected ']'."

    def test_str(self):
        """String form shows position and message."""
        assert str(ParseTextErrorDetails(3, "bad")) == "position 3: bad"

    def test_immutable(self):
        """Details cannot be modified."""
        details = ParseTextErrorDetails(3, "bad")
        with pytest.raises(dataclasses.FrozenInstanceError):
            details.error_position = 4

    def test_equality(self):
        """Equal fields compare equal."""
        assert ParseTextErrorDetails(1, "x") == ParseTextErrorDetails(1, "x")


class TestParseTextError:
    """Tests for ParseTextError formatting."""

    def test_message_without_text(self):
        """Without text, only the position and message are shown."""
        error = ParseTextError(ParseTextErrorDetails(5, "Invalid character."))
        assert str(error) == "position 5: error: Invalid character."
        assert error.error_position == 5
        assert error.error_message == "Invalid character."

    def test_message_with_multiline_text(self):
        """Only the line containing the position is shown."""
        text = "first line\nsecond line\nthird"
        error = ParseTextError(ParseTextErrorDetails(18, "oops"), text)
        lines = str(error).splitlines()
        assert lines[1] == "    second line"
        assert lines[2] == " " * (4 + 7) + "^"

    def test_position_at_end_of_text(self):
        """A position at the end of the text points past the last character."""
        error = ParseTextError(ParseTextErrorDetails(3, "oops"), "abc")
        lines = str(error).splitlines()
        assert lines[1] == "    abc"
        assert lines[2] == " " * 7 + "^"

    def test_position_outside_text(self):
        """Positions outside the text skip the context lines."""
        error = ParseTextError(ParseTextErrorDetails(10, "oops"), "abc")
        assert str(error) == "position 10: error: oops"

    def test_hierarchy(self):
        """Both errors derive from TextSymbolsError."""
        assert issubclass(ParseTextError, TextSymbolsError)
        assert issubclass(InvalidRangeError, TextSymbolsError)
        assert issubclass(InvalidRangeError, ValueError)
