"""
textscan - Text Symbols Scanner Command-Line Interface
======================================================

Runs the text symbols parser over a file (or stdin) and prints each
symbol with its position in the text.

Usage Examples
--------------
List identifiers in a file:
    $ textscan symbols query.sql

Use a different predicate and only scan part of the text:
    $ textscan symbols --predicate letters --start 10 --length 40 notes.txt

Read bracket-quoted names such as [Table1]:
    $ echo "[Orders] [Order_Lines]" | textscan braced

Require the braces to be present:
    $ textscan braced --braces "{}" --required template.txt

Environment variables TEXTSCAN_PREDICATE, TEXTSCAN_BRACES,
TEXTSCAN_BRACES_OPTIONAL and TEXTSCAN_VERBOSE provide defaults for the
matching options.

Exit Codes
----------
0 - Success
1 - Parse error (e.g. required brace missing)
2 - Invalid arguments or range
3 - Internal error (e.g. input that is not valid text)

Copyright (c) 2018-2026 TextParser Contributors
"""

import logging
from typing import Optional, TextIO

import click

from textsymbols import __version__
from textsymbols.braces import ReadOutcome, try_read_symbol_enclosed_in_braces
from textsymbols.cli.errors import handle_cli_exception
from textsymbols.config import ScanConfig
from textsymbols.errors import ParseTextError
from textsymbols.parser import TextSymbolsParser
from textsymbols.predicates import PREDICATES

logger = logging.getLogger(__name__)


# =============================================================================
# CLI Context and Utilities
# =============================================================================

class Context:
    """
    Shared context for CLI commands.

    Holds the configuration resolved from the environment and the
    group-level options.
    """

    def __init__(self) -> None:
        self.config = ScanConfig.from_env()

    def setup_logging(self) -> None:
        """Configure logging based on verbosity."""
        level = logging.DEBUG if self.config.verbose else logging.INFO
        logging.basicConfig(
            level=level,
            format="%(levelname)s: %(message)s" if self.config.verbose else "%(message)s",
        )


pass_context = click.make_pass_decorator(Context, ensure=True)


def validate_braces(ctx: click.Context, param: click.Parameter, value: Optional[str]) -> Optional[str]:
    """Check that --braces is exactly two characters."""
    if value is not None and len(value) != 2:
        raise click.BadParameter("must be exactly two characters, e.g. '[]'")
    return value


def create_parser(
    text: str,
    config: ScanConfig,
    start: int,
    length: Optional[int],
) -> TextSymbolsParser:
    """Create a parser over the requested range of text."""
    return TextSymbolsParser(
        text,
        config.predicate_function(),
        position_in_text=start,
        number_of_characters_to_parse=length,
    )


# =============================================================================
# Main CLI Group
# =============================================================================

@click.group()
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable verbose (debug) output",
)
@click.version_option(version=__version__, prog_name="textscan")
@pass_context
def main(ctx: Context, verbose: bool) -> None:
    """
    Scan text for symbols using the text symbols parser.

    A symbol is a run of characters accepted by a predicate. Whitespace
    between symbols is skipped; characters that start no symbol are
    stepped over.
    """
    if verbose:
        ctx.config.verbose = True
    ctx.setup_logging()


# =============================================================================
# Symbols Command
# =============================================================================

@main.command()
@click.argument("input_file", type=click.File("r"), default="-")
@click.option(
    "--predicate",
    type=click.Choice(sorted(PREDICATES)),
    default=None,
    help="Symbol character predicate (default: identifier)",
)
@click.option("--start", type=int, default=0, help="Position to start scanning at (default: 0)")
@click.option("--length", type=int, default=None, help="Number of characters to scan (default: to end)")
@pass_context
def symbols(
    ctx: Context,
    input_file: TextIO,
    predicate: Optional[str],
    start: int,
    length: Optional[int],
) -> None:
    """
    List the symbols in INPUT_FILE (default: stdin).

    Each symbol is printed as POSITION<TAB>SYMBOL.

    \b
    Examples:
        textscan symbols query.sql
        textscan symbols --predicate letters --start 10 notes.txt
    """
    if predicate is not None:
        ctx.config.predicate = predicate

    try:
        text = input_file.read()
        parser = create_parser(text, ctx.config, start, length)

        count = 0
        while parser.skip_spaces():
            position = parser.position_in_text
            if parser.read_symbol():
                click.echo(f"{position}\t{parser.last_read_symbol}")
                count += 1
            else:
                parser.read_next_character()

        logger.debug(f"Found {count} symbols")

    except Exception as e:
        handle_cli_exception(e, ctx.config.verbose)


# =============================================================================
# Braced Command
# =============================================================================

@main.command()
@click.argument("input_file", type=click.File("r"), default="-")
@click.option(
    "--predicate",
    type=click.Choice(sorted(PREDICATES)),
    default=None,
    help="Symbol character predicate (default: identifier)",
)
@click.option(
    "--braces",
    type=str,
    default=None,
    callback=validate_braces,
    help="Opening and closing brace characters (default: '[]')",
)
@click.option(
    "--required",
    is_flag=True,
    help="Every symbol must be enclosed in braces",
)
@click.option("--start", type=int, default=0, help="Position to start scanning at (default: 0)")
@click.option("--length", type=int, default=None, help="Number of characters to scan (default: to end)")
@pass_context
def braced(
    ctx: Context,
    input_file: TextIO,
    predicate: Optional[str],
    braces: Optional[str],
    required: bool,
    start: int,
    length: Optional[int],
) -> None:
    """
    List the brace-enclosed symbols in INPUT_FILE (default: stdin).

    Each symbol is printed as POSITION<TAB>SYMBOL, where POSITION is the
    position of the opening brace (or of the symbol when it is bare).
    With --required, a symbol without an opening brace is a parse error.

    \b
    Examples:
        textscan braced names.txt
        textscan braced --braces "{}" --required template.txt
    """
    config = ctx.config
    if predicate is not None:
        config.predicate = predicate
    if braces is not None:
        config.opening_brace, config.closing_brace = braces[0], braces[1]
    if required:
        config.braces_optional = False

    try:
        text = input_file.read()
        parser = create_parser(text, config, start, length)

        while parser.skip_spaces():
            position = parser.position_in_text
            result = try_read_symbol_enclosed_in_braces(
                parser,
                config.braces_optional,
                config.opening_brace,
                config.closing_brace,
            )

            if result.outcome is ReadOutcome.MALFORMED:
                raise ParseTextError(result.error_details, text)

            if result:
                click.echo(f"{position}\t{result.symbol}")
            elif parser.position_in_text == position:
                parser.read_next_character()

    except Exception as e:
        handle_cli_exception(e, config.verbose)


if __name__ == "__main__":
    main()
