# =============================================================================
# test_predicates.py - Stock Predicate Tests
# =============================================================================

import pytest

from textsymbols.parser import TextSymbolsParser
from textsymbols.predicates import (
    PREDICATES,
    any_of,
    get_predicate,
    is_alphanumeric,
    is_identifier_character,
    is_letter,
    is_non_space,
)


def read_first(text: str, predicate) -> str:
    """Read one symbol from the start of text with the given predicate."""
    parser = TextSymbolsParser(text, predicate)
    parser.read_symbol()
    return parser.last_read_symbol


class TestStockPredicates:
    """Tests for the ready-made predicates."""

    def test_identifier(self):
        """Identifiers start with a letter or underscore."""
        assert read_first("_tmp1 = 2", is_identifier_character) == "_tmp1"
        assert read_first("9lives", is_identifier_character) == ""

    def test_identifier_is_ascii(self):
        """Non-ASCII letters are not identifier characters."""
        assert read_first("café", is_identifier_character) == "caf"

    def test_letters(self):
        """Letters stop at digits and punctuation."""
        assert read_first("abc123", is_letter) == "abc"
        assert read_first("café!", is_letter) == "café"

    def test_alphanumeric(self):
        """Letters and digits in any order."""
        assert read_first("9lives_x", is_alphanumeric) == "9lives"

    def test_non_space(self):
        """Everything up to whitespace."""
        assert read_first("a.b-c d", is_non_space) == "a.b-c"

    def test_any_of(self):
        """Only the listed characters are accepted."""
        is_binary = any_of("01")
        assert read_first("0110201", is_binary) == "0110"


class TestPredicateRegistry:
    """Tests for predicate lookup by name."""

    @pytest.mark.parametrize("name", ["identifier", "letters", "alphanumeric", "non-space"])
    def test_known_names(self, name):
        """Registered names resolve to their predicate."""
        assert get_predicate(name) is PREDICATES[name]

    def test_unknown_name(self):
        """Unknown names raise KeyError listing the valid ones."""
        with pytest.raises(KeyError, match="unknown predicate 'digits'"):
            get_predicate("digits")
