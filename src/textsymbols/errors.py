"""
Text Symbols Error Hierarchy
============================

This module defines the exception hierarchy for the textsymbols package.
All exceptions inherit from TextSymbolsError, allowing callers to catch
all package errors with a single except clause if desired.

Exception Hierarchy
-------------------
TextSymbolsError (base)
├── InvalidRangeError - parser constructed with an invalid text range
└── ParseTextError - structural parse failure (e.g. a required brace is missing)

Design Philosophy
-----------------
Ordinary parse conditions (end of text, no matching symbol) are never
reported through exceptions: the parser operations return booleans for
those. Exceptions are reserved for contract violations at construction
time and for structural failures the caller opted into.

Error messages follow this format:
    position N: error: description
    text_line
        ^ (pointer to error column)

Copyright (c) 2018-2026 TextParser Contributors
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class TextSymbolsError(Exception):
    """
    Base exception for all textsymbols errors.

        try:
            read_symbol_enclosed_in_braces(parser, False, "[", "]")
        except TextSymbolsError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Error Details
# =============================================================================

@dataclass(frozen=True)
class ParseTextErrorDetails:
    """
    Position and message describing a parse failure.

    Attributes:
        error_position: Index in the parsed text where the error occurred
        error_message: Human-readable description of the error
    """
    error_position: int
    error_message: str

    def __str__(self) -> str:
        return f"position {self.error_position}: {self.error_message}"


# =============================================================================
# Exceptions
# =============================================================================

class InvalidRangeError(TextSymbolsError, ValueError):
    """
    Parser constructed with a range that does not fit inside the text.

    Raised for a negative start position, a negative length, or a range
    whose end lies past the end of the text.

    Attributes:
        argument_name: Name of the offending constructor argument
        value: The rejected value
    """

    def __init__(self, message: str, argument_name: str, value: int):
        self.argument_name = argument_name
        self.value = value
        super().__init__(message)


class ParseTextError(TextSymbolsError):
    """
    Structural failure while parsing text.

    Carries a ParseTextErrorDetails instance. When the parsed text is
    supplied, the formatted message includes the offending line with a
    caret under the error column.

    Attributes:
        details: Position and message of the failure
        text: The text being parsed (optional, used for context)
    """

    def __init__(self, details: ParseTextErrorDetails, text: Optional[str] = None):
        self.details = details
        self.text = text
        super().__init__(self._format_message())

    @property
    def error_position(self) -> int:
        return self.details.error_position

    @property
    def error_message(self) -> str:
        return self.details.error_message

    def _format_message(self) -> str:
        """
        Format the error with optional source context.

        Example output:
            position 9: error: Invalid character. Expected '['.
                select Table1
                       ^
        """
        parts = [f"position {self.details.error_position}: error: {self.details.error_message}"]

        if self.text is not None and 0 <= self.details.error_position <= len(self.text):
            line_start = self.text.rfind("\n", 0, self.details.error_position) + 1
            line_end = self.text.find("\n", self.details.error_position)
            if line_end == -1:
                line_end = len(self.text)

            parts.append(f"    {self.text[line_start:line_end]}")
            padding = " " * (4 + self.details.error_position - line_start)
            parts.append(f"{padding}^")

        return "\n".join(parts)
