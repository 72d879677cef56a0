"""
Brace-Enclosed Symbol Reading
=============================

Reads a symbol that may be wrapped in a pair of braces, such as a SQL
table name written either as ``Table1`` or ``[Table1]``. Only the public
TextSymbolsParser operations are used.

Given the text below with the cursor on position 1, both forms read the
symbol "Table1" and leave the cursor on the "(" character:

    " [Table1] (..."
    " Table1 (..."

Two entry points are provided:

- read_symbol_enclosed_in_braces() returns a bool and raises
  ParseTextError when required braces are missing.
- try_read_symbol_enclosed_in_braces() never raises; it returns a
  BracedSymbolResult whose outcome tells "found", "not found" and
  "malformed" apart.

Neither retries nor rolls back: on failure the cursor stays wherever the
last successful step left it. Save position_in_text beforehand and call
move_to_position() to undo a failed read.

Copyright (c) 2018-2026 TextParser Contributors
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from textsymbols.errors import ParseTextError, ParseTextErrorDetails
from textsymbols.parser import TextSymbolsParser
from textsymbols.state import IsValidSymbolCharacter

logger = logging.getLogger(__name__)


# =============================================================================
# Read Result
# =============================================================================

class ReadOutcome(Enum):
    """Outcome of a brace-enclosed symbol read."""

    OK = auto()          # Symbol read, cursor after the construct
    NOT_FOUND = auto()   # No symbol, missing closing brace, or end of text
    MALFORMED = auto()   # Opening brace required but absent


@dataclass(frozen=True)
class BracedSymbolResult:
    """
    Result of try_read_symbol_enclosed_in_braces().

    Attributes:
        outcome: What happened
        symbol: The symbol read (only set for ReadOutcome.OK)
        started_with_braces: True if the opening brace was present
        error_details: Why the read was malformed (only for MALFORMED)
    """
    outcome: ReadOutcome
    symbol: Optional[str] = None
    started_with_braces: bool = False
    error_details: Optional[ParseTextErrorDetails] = None

    def __bool__(self) -> bool:
        return self.outcome is ReadOutcome.OK


# =============================================================================
# Reading Functions
# =============================================================================

def try_read_symbol_enclosed_in_braces(
    parser: TextSymbolsParser,
    enclosing_braces_are_optional: bool,
    opening_brace: str,
    closing_brace: str,
    is_valid_symbol_character: Optional[IsValidSymbolCharacter] = None,
) -> BracedSymbolResult:
    """
    Read a symbol that may be enclosed in braces, without raising.

    Args:
        parser: Parser positioned on the symbol or its opening brace
        enclosing_braces_are_optional: If False, a missing opening brace
            gives ReadOutcome.MALFORMED
        opening_brace: Opening brace character, e.g. "["
        closing_brace: Closing brace character, e.g. "]"
        is_valid_symbol_character: Predicate for the symbol (optional,
            defaults to the parser's own predicate)

    Returns:
        BracedSymbolResult describing the outcome
    """
    started_with_braces = False

    if parser.current_char == opening_brace:
        started_with_braces = True

        if not parser.skip_current_character_and_spaces():
            logger.debug(f"End of text after '{opening_brace}' at {parser.position_in_text}")
            return BracedSymbolResult(ReadOutcome.NOT_FOUND, started_with_braces=True)

    elif not enclosing_braces_are_optional:
        details = ParseTextErrorDetails(
            parser.position_in_text,
            f"Invalid character. Expected '{opening_brace}'.",
        )
        logger.debug(f"Malformed braced symbol: {details}")
        return BracedSymbolResult(ReadOutcome.MALFORMED, error_details=details)

    if not parser.read_symbol(is_valid_symbol_character):
        logger.debug(f"No symbol at {parser.position_in_text}")
        return BracedSymbolResult(ReadOutcome.NOT_FOUND, started_with_braces=started_with_braces)

    symbol = parser.last_read_symbol

    if started_with_braces:
        if not parser.skip_spaces() or parser.current_char != closing_brace:
            logger.debug(f"Expected '{closing_brace}' after '{symbol}' at {parser.position_in_text}")
            return BracedSymbolResult(ReadOutcome.NOT_FOUND, started_with_braces=True)

        parser.skip_current_character_and_spaces()

    return BracedSymbolResult(ReadOutcome.OK, symbol=symbol, started_with_braces=started_with_braces)


def read_symbol_enclosed_in_braces(
    parser: TextSymbolsParser,
    enclosing_braces_are_optional: bool,
    opening_brace: str,
    closing_brace: str,
    is_valid_symbol_character: Optional[IsValidSymbolCharacter] = None,
) -> bool:
    """
    Read a symbol that may be enclosed in braces.

    On success the symbol is available as parser.last_read_symbol and the
    cursor is after the closing brace and any following whitespace (or
    right after the symbol when no braces were used).

    Returns:
        True if the symbol was read, False otherwise

    Raises:
        ParseTextError: If braces are required and the current character
            is not the opening brace

    Example:
        >>> parser = TextSymbolsParser(" [Table1] (x)", is_identifier_character, 1)
        >>> read_symbol_enclosed_in_braces(parser, True, "[", "]")
        True
        >>> parser.last_read_symbol, parser.current_char
        ('Table1', '(')
    """
    result = try_read_symbol_enclosed_in_braces(
        parser,
        enclosing_braces_are_optional,
        opening_brace,
        closing_brace,
        is_valid_symbol_character,
    )

    if result.outcome is ReadOutcome.MALFORMED:
        raise ParseTextError(result.error_details, parser.text_to_parse)

    return bool(result)
