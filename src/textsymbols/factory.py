"""
Parser Factory
==============

Construction indirection for text symbols parsers. Code that creates
parsers through an ITextSymbolsParserFactory can be handed a different
factory in tests, or one that returns a TextSymbolsParser subclass.

Copyright (c) 2018-2026 TextParser Contributors
"""

from abc import ABC, abstractmethod

from textsymbols.parser import TextSymbolsParser
from textsymbols.state import IsValidSymbolCharacter


class ITextSymbolsParserFactory(ABC):
    """Creates text symbols parsers. The default is TextSymbolsParserFactory."""

    @abstractmethod
    def create_text_symbols_parser(
        self,
        text_to_parse: str,
        is_valid_symbol_character: IsValidSymbolCharacter,
    ) -> TextSymbolsParser:
        """Create a parser over the whole text."""
        ...

    @abstractmethod
    def create_text_symbols_parser_for_range(
        self,
        text_to_parse: str,
        position_in_text: int,
        number_of_characters_to_parse: int,
        is_valid_symbol_character: IsValidSymbolCharacter,
    ) -> TextSymbolsParser:
        """
        Create a parser over text[position_in_text:position_in_text + number_of_characters_to_parse].

        Raises:
            InvalidRangeError: If the range does not fit inside the text
        """
        ...


class TextSymbolsParserFactory(ITextSymbolsParserFactory):
    """Default factory, returns TextSymbolsParser instances."""

    def create_text_symbols_parser(
        self,
        text_to_parse: str,
        is_valid_symbol_character: IsValidSymbolCharacter,
    ) -> TextSymbolsParser:
        return TextSymbolsParser(text_to_parse, is_valid_symbol_character)

    def create_text_symbols_parser_for_range(
        self,
        text_to_parse: str,
        position_in_text: int,
        number_of_characters_to_parse: int,
        is_valid_symbol_character: IsValidSymbolCharacter,
    ) -> TextSymbolsParser:
        return TextSymbolsParser.for_range(
            text_to_parse,
            position_in_text,
            number_of_characters_to_parse,
            is_valid_symbol_character,
        )
