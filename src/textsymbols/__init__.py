"""
textsymbols - Text Symbols Parser
=================================

This package provides a low-level cursor for hand-written parsers. It
walks a range of text character by character, skips whitespace and reads
"symbols": runs of characters accepted by a caller-supplied predicate.
It has no grammar of its own; expression parsers, identifier readers and
similar code build on it.

Main Components
---------------
- **parser**: TextSymbolsParser, the cursor and its movement operations
- **braces**: reading symbols optionally enclosed in braces ([Table1])
- **factory**: construction indirection for parsers
- **predicates**: stock symbol character predicates
- **cli**: the textscan command-line tool

Quick Start
-----------
Read an identifier after some whitespace:
    >>> from textsymbols import TextSymbolsParser, is_identifier_character
    >>> parser = TextSymbolsParser("  total = 42", is_identifier_character)
    >>> parser.skip_spaces()
    True
    >>> parser.read_symbol()
    True
    >>> parser.last_read_symbol
    'total'

Read a name that may be bracket-quoted:
    >>> from textsymbols import read_symbol_enclosed_in_braces
    >>> parser = TextSymbolsParser("[Table1] (id)", is_identifier_character)
    >>> read_symbol_enclosed_in_braces(parser, True, "[", "]")
    True
    >>> parser.last_read_symbol, parser.current_char
    ('Table1', '(')

Or use the command-line tool:
    $ textscan symbols query.sql
    $ textscan braced --required names.txt

Copyright (c) 2018-2026 TextParser Contributors
"""

__version__ = "1.0.0"
__author__ = "TextParser Contributors"

# =============================================================================
# Public API Exports
# =============================================================================

from textsymbols.errors import (
    TextSymbolsError,
    InvalidRangeError,
    ParseTextError,
    ParseTextErrorDetails,
)
from textsymbols.state import IsValidSymbolCharacter, TextSymbolsParserState
from textsymbols.parser import END_OF_TEXT_CHAR, TextSymbolsParser
from textsymbols.factory import ITextSymbolsParserFactory, TextSymbolsParserFactory
from textsymbols.braces import (
    BracedSymbolResult,
    ReadOutcome,
    read_symbol_enclosed_in_braces,
    try_read_symbol_enclosed_in_braces,
)
from textsymbols.predicates import (
    PREDICATES,
    any_of,
    get_predicate,
    is_alphanumeric,
    is_identifier_character,
    is_letter,
    is_non_space,
)
from textsymbols.config import ScanConfig

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Errors
    "TextSymbolsError",
    "InvalidRangeError",
    "ParseTextError",
    "ParseTextErrorDetails",
    # Parser
    "END_OF_TEXT_CHAR",
    "IsValidSymbolCharacter",
    "TextSymbolsParser",
    "TextSymbolsParserState",
    "ITextSymbolsParserFactory",
    "TextSymbolsParserFactory",
    # Braced reads
    "BracedSymbolResult",
    "ReadOutcome",
    "read_symbol_enclosed_in_braces",
    "try_read_symbol_enclosed_in_braces",
    # Predicates
    "PREDICATES",
    "any_of",
    "get_predicate",
    "is_alphanumeric",
    "is_identifier_character",
    "is_letter",
    "is_non_space",
    # Configuration
    "ScanConfig",
]
