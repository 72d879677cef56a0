"""
Text Symbols Parser
===================

This module implements the cursor over a range of text that higher-level
parsers (expression parsers, identifier readers, SQL-ish name parsers)
build on. It does not know any grammar: it moves a cursor, skips
whitespace and reads "symbols", which are maximal runs of characters
accepted by a caller-supplied predicate.

Cursor Model
------------
The parser is confined to the range [start, end) of the text:

| Property                   | Meaning                                   |
|----------------------------|-------------------------------------------|
| parsed_text_start_position | First index the cursor may occupy         |
| parsed_text_end            | One past the last character of the range  |
| position_in_text           | Cursor, start <= position <= end          |
| current_char               | text[position], or "\\0" at the range end |
| last_read_symbol           | Result of the most recent read_symbol()   |

Reaching the end of the range or failing to match a symbol is a normal
outcome reported through the boolean result of each operation. The only
exception raised here is InvalidRangeError, from the constructor.

Example
-------
>>> from textsymbols.parser import TextSymbolsParser
>>> from textsymbols.predicates import is_letter
>>> parser = TextSymbolsParser("  foo(bar)", is_letter)
>>> parser.skip_spaces()
True
>>> parser.read_symbol()
True
>>> parser.last_read_symbol, parser.current_char
('foo', '(')

Copyright (c) 2018-2026 TextParser Contributors
"""

import logging
from typing import Optional

from textsymbols.errors import InvalidRangeError
from textsymbols.state import IsValidSymbolCharacter

logger = logging.getLogger(__name__)

# Value of current_char once the cursor reaches the end of the parsed range
END_OF_TEXT_CHAR = "\0"


# =============================================================================
# Parser Implementation
# =============================================================================

class TextSymbolsParser:
    """
    Cursor over a range of text that reads whitespace-separated symbols.

    The parser holds a reference to the text and never modifies it, so
    several parsers may share one text over the same or overlapping
    ranges. A single parser instance is not safe to drive from more than
    one thread.

    Usage:
        parser = TextSymbolsParser(text, is_identifier_character)
        while parser.skip_spaces():
            if not parser.read_symbol():
                parser.read_next_character()

    Attributes:
        text_to_parse: The whole text (read-only)
        parsed_text_start_position: Start of the parsed range
        parsed_text_end: End of the parsed range (exclusive)
        position_in_text: Current cursor position
        current_char: Character at the cursor, END_OF_TEXT_CHAR at the end
        last_read_symbol: Symbol captured by the last read_symbol() call
    """

    def __init__(
        self,
        text_to_parse: str,
        is_valid_symbol_character: IsValidSymbolCharacter,
        position_in_text: int = 0,
        number_of_characters_to_parse: Optional[int] = None,
    ):
        """
        Initialize the parser over a range of text.

        Args:
            text_to_parse: Text to parse
            is_valid_symbol_character: Default predicate used by read_symbol()
            position_in_text: Position the parser starts at (default 0)
            number_of_characters_to_parse: Length of the parsed range
                (default: everything from position_in_text to the end)

        Raises:
            InvalidRangeError: If the range does not fit inside the text
        """
        if number_of_characters_to_parse is None:
            number_of_characters_to_parse = max(len(text_to_parse) - position_in_text, 0)

        if position_in_text < 0:
            logger.debug(f"Rejected parser range: start {position_in_text} is negative")
            raise InvalidRangeError(
                f"Invalid value of 'position_in_text'. The value is {position_in_text}.",
                "position_in_text",
                position_in_text,
            )

        if number_of_characters_to_parse < 0:
            logger.debug(f"Rejected parser range: length {number_of_characters_to_parse} is negative")
            raise InvalidRangeError(
                f"Invalid value of 'number_of_characters_to_parse'. "
                f"The value is {number_of_characters_to_parse}.",
                "number_of_characters_to_parse",
                number_of_characters_to_parse,
            )

        text_end_position = position_in_text + number_of_characters_to_parse
        if text_end_position > len(text_to_parse):
            logger.debug(
                f"Rejected parser range: end {text_end_position} is past text length {len(text_to_parse)}"
            )
            raise InvalidRangeError(
                f"Invalid value of 'number_of_characters_to_parse'. "
                f"The value is {number_of_characters_to_parse} and is too large.",
                "number_of_characters_to_parse",
                number_of_characters_to_parse,
            )

        self._text_to_parse = text_to_parse
        self._is_valid_symbol_character = is_valid_symbol_character
        self._text_start_position = position_in_text
        self._text_end_position = text_end_position
        self._position_in_text = position_in_text
        self._current_char = END_OF_TEXT_CHAR
        self._last_read_symbol: Optional[str] = None

        if not self.is_end_of_text_reached:
            self._current_char = text_to_parse[position_in_text]

        logger.debug(
            f"Created parser over [{self._text_start_position}, {self._text_end_position}) "
            f"of {len(text_to_parse)} characters"
        )

    @classmethod
    def for_range(
        cls,
        text_to_parse: str,
        position_in_text: int,
        number_of_characters_to_parse: int,
        is_valid_symbol_character: IsValidSymbolCharacter,
    ) -> "TextSymbolsParser":
        """
        Create a parser confined to a sub-range of the text.

        The parser starts at position_in_text and stops at
        position_in_text + number_of_characters_to_parse.
        """
        return cls(
            text_to_parse,
            is_valid_symbol_character,
            position_in_text=position_in_text,
            number_of_characters_to_parse=number_of_characters_to_parse,
        )

    def __repr__(self) -> str:
        return (
            f"TextSymbolsParser(position={self._position_in_text}, "
            f"range=[{self._text_start_position}, {self._text_end_position}), "
            f"current_char={self._current_char!r})"
        )

    # =========================================================================
    # State Properties
    # =========================================================================

    @property
    def text_to_parse(self) -> str:
        return self._text_to_parse

    @property
    def parsed_text_start_position(self) -> int:
        return self._text_start_position

    @property
    def parsed_text_end(self) -> int:
        return self._text_end_position

    @property
    def position_in_text(self) -> int:
        return self._position_in_text

    @property
    def current_char(self) -> str:
        return self._current_char

    @property
    def last_read_symbol(self) -> Optional[str]:
        return self._last_read_symbol

    @property
    def is_end_of_text_reached(self) -> bool:
        return self._position_in_text >= self._text_end_position

    # =========================================================================
    # Cursor Movement
    # =========================================================================

    def skip_spaces(self) -> bool:
        """
        Skip whitespace and stop at the first non-space character.

        Returns:
            True if a non-space character was found, False if the end of
            the range was reached
        """
        while self._position_in_text < self._text_end_position:
            self._current_char = self._text_to_parse[self._position_in_text]

            if not self._current_char.isspace():
                return True

            self._position_in_text += 1

        self._current_char = END_OF_TEXT_CHAR
        return False

    def read_next_character(self) -> bool:
        """
        Move the cursor to the next character.

        Returns:
            False if the cursor was already at, or has now reached, the end
            of the range (current_char is END_OF_TEXT_CHAR). True otherwise.
        """
        if self.is_end_of_text_reached:
            return False

        self._position_in_text += 1

        if self.is_end_of_text_reached:
            self._current_char = END_OF_TEXT_CHAR
            return False

        self._current_char = self._text_to_parse[self._position_in_text]
        return True

    def skip_current_character_and_spaces(self) -> bool:
        """
        Move past the current character, then skip whitespace.

        Returns:
            True if a non-space character was found, False if the end of
            the range was reached
        """
        if not self.read_next_character():
            return False

        return self.skip_spaces()

    def skip_characters(self, number_of_characters_to_skip: int) -> bool:
        """
        Skip a number of characters without skipping whitespace afterwards.

        Landing exactly on the end of the range counts as success; trying
        to move past it clamps the cursor to the end and fails.

        Args:
            number_of_characters_to_skip: How many characters to move forward

        Returns:
            False if the count is negative or the move would pass the end
            of the range, True otherwise
        """
        if number_of_characters_to_skip < 0:
            return False

        self._position_in_text += number_of_characters_to_skip

        if self._position_in_text >= self._text_end_position:
            self._current_char = END_OF_TEXT_CHAR

            if self._position_in_text > self._text_end_position:
                self._position_in_text = self._text_end_position
                return False

            return True

        self._current_char = self._text_to_parse[self._position_in_text]
        return True

    def move_to_position(self, position_in_text: int) -> bool:
        """
        Move the cursor to an absolute position.

        Whitespace at the new position is not skipped; call skip_spaces()
        afterwards if needed.

        Args:
            position_in_text: Index in text_to_parse to move to

        Returns:
            True if the position is inside [start, end). Otherwise the
            cursor is clamped to the nearest range boundary and False is
            returned.
        """
        if position_in_text < self._text_start_position:
            self._position_in_text = self._text_start_position
            self._current_char = END_OF_TEXT_CHAR
            if not self.is_end_of_text_reached:
                self._current_char = self._text_to_parse[self._position_in_text]
            return False

        if position_in_text >= self._text_end_position:
            self._position_in_text = self._text_end_position
            self._current_char = END_OF_TEXT_CHAR
            return False

        self._position_in_text = position_in_text
        self._current_char = self._text_to_parse[position_in_text]
        return True

    # =========================================================================
    # Symbol Reading
    # =========================================================================

    def read_symbol(self, is_valid_symbol_character: Optional[IsValidSymbolCharacter] = None) -> bool:
        """
        Read a symbol starting at the cursor.

        Characters are consumed while the predicate accepts them. The
        result is stored in last_read_symbol, which is an empty string if
        the first character was rejected.

        Args:
            is_valid_symbol_character: Predicate to use instead of the
                default one given to the constructor (optional)

        Returns:
            True if at least one character was read, False otherwise
        """
        if is_valid_symbol_character is None:
            is_valid_symbol_character = self._is_valid_symbol_character

        symbol_chars = []
        start_position = self._position_in_text

        while self._position_in_text < self._text_end_position:
            self._current_char = self._text_to_parse[self._position_in_text]

            if not is_valid_symbol_character(
                self._current_char, self._position_in_text - start_position, self
            ):
                break

            symbol_chars.append(self._current_char)
            self._position_in_text += 1

        self._last_read_symbol = "".join(symbol_chars)

        if self._position_in_text == self._text_end_position:
            self._current_char = END_OF_TEXT_CHAR

        return len(self._last_read_symbol) > 0
