"""
Parser State Protocol
=====================

Read-only view of a text symbols parser, and the signature of the
symbol character predicates that consult it.

A predicate receives the character under the cursor, the character's
offset from the start of the symbol being read, and the parser state.
The state lets a predicate make context-sensitive decisions, for example
accepting digits only after the first character of an identifier:

    >>> def is_identifier_char(character, position_in_parsed_text, state):
    ...     if position_in_parsed_text == 0:
    ...         return character.isalpha()
    ...     return character.isalnum()

Predicates must not move the parser; the protocol exposes no mutating
operations for that reason.

Copyright (c) 2018-2026 TextParser Contributors
"""

from typing import Callable, Optional, Protocol


class TextSymbolsParserState(Protocol):
    """Read-only state of a text symbols parser."""

    @property
    def text_to_parse(self) -> str:
        """The whole text, including characters outside the parsed range."""
        ...

    @property
    def parsed_text_start_position(self) -> int:
        """Index of the first character in the parsed range."""
        ...

    @property
    def parsed_text_end(self) -> int:
        """
        Index one past the last character in the parsed range.

        For a parser started at 2 over 100 characters this is 102.
        """
        ...

    @property
    def position_in_text(self) -> int:
        ...

    @property
    def current_char(self) -> str:
        """Character at the cursor, or END_OF_TEXT_CHAR at the range end."""
        ...

    @property
    def last_read_symbol(self) -> Optional[str]:
        """Symbol captured by the most recent read, None before any read."""
        ...

    @property
    def is_end_of_text_reached(self) -> bool:
        ...


IsValidSymbolCharacter = Callable[[str, int, TextSymbolsParserState], bool]
"""Predicate ``(character, position_in_parsed_text, state) -> bool``."""
