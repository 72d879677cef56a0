"""
Stock Symbol Predicates
=======================

Ready-made IsValidSymbolCharacter predicates for the common cases.

| Name         | Accepts                                              |
|--------------|------------------------------------------------------|
| identifier   | ASCII letter or "_", then letters, digits or "_"     |
| letters      | Any alphabetic character                             |
| alphanumeric | Any letter or digit                                  |
| non-space    | Anything except whitespace                           |

any_of() builds a predicate from a set of characters.
"""

import string
from typing import Iterable

from textsymbols.state import IsValidSymbolCharacter, TextSymbolsParserState


# Characters that can start an identifier
IDENT_START = string.ascii_letters + "_"

# Characters that can continue an identifier
IDENT_CHARS = string.ascii_letters + string.digits + "_"


def is_identifier_character(
    character: str, position_in_parsed_text: int, state: TextSymbolsParserState
) -> bool:
    if position_in_parsed_text == 0:
        return character in IDENT_START
    return character in IDENT_CHARS


def is_letter(character: str, position_in_parsed_text: int, state: TextSymbolsParserState) -> bool:
    return character.isalpha()


def is_alphanumeric(character: str, position_in_parsed_text: int, state: TextSymbolsParserState) -> bool:
    return character.isalnum()


def is_non_space(character: str, position_in_parsed_text: int, state: TextSymbolsParserState) -> bool:
    return not character.isspace()


def any_of(characters: Iterable[str]) -> IsValidSymbolCharacter:
    """
    Build a predicate accepting only the given characters.

    Example:
        >>> is_digit = any_of("0123456789")
        >>> parser.read_symbol(is_digit)
    """
    accepted = frozenset(characters)

    def predicate(character: str, position_in_parsed_text: int, state: TextSymbolsParserState) -> bool:
        return character in accepted

    return predicate


PREDICATES: dict[str, IsValidSymbolCharacter] = {
    "identifier": is_identifier_character,
    "letters": is_letter,
    "alphanumeric": is_alphanumeric,
    "non-space": is_non_space,
}


def get_predicate(name: str) -> IsValidSymbolCharacter:
    """
    Look up a stock predicate by name.

    Raises:
        KeyError: If no predicate has that name
    """
    try:
        return PREDICATES[name]
    except KeyError:
        valid = ", ".join(sorted(PREDICATES))
        raise KeyError(f"unknown predicate '{name}' (valid: {valid})") from None
