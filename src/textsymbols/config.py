"""
Scanning Configuration
======================

Defaults for the textscan command-line tool. Configuration can come from:
- Default values (defined here)
- Environment variables
- Command-line options (applied by the CLI on top of the above)
"""

from dataclasses import dataclass
import os

from textsymbols.predicates import PREDICATES, get_predicate
from textsymbols.state import IsValidSymbolCharacter


_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass
class ScanConfig:
    """
    Configuration for a scanning run.

    Attributes:
        predicate: Name of the stock predicate (default: "identifier")
        opening_brace: Opening brace for braced reads (default: "[")
        closing_brace: Closing brace for braced reads (default: "]")
        braces_optional: Accept bare symbols in braced reads (default: True)
        verbose: Enable debug logging (default: False)
    """

    predicate: str = "identifier"
    opening_brace: str = "["
    closing_brace: str = "]"
    braces_optional: bool = True
    verbose: bool = False

    @classmethod
    def from_env(cls) -> "ScanConfig":
        """
        Create ScanConfig from environment variables.

        Environment variables (all optional):
            TEXTSCAN_PREDICATE: Stock predicate name (e.g. "letters")
            TEXTSCAN_BRACES: Opening and closing brace (e.g. "{}")
            TEXTSCAN_BRACES_OPTIONAL: 1/0, true/false, yes/no, on/off
            TEXTSCAN_VERBOSE: 1/0, true/false, yes/no, on/off

        Returns:
            ScanConfig with values from environment variables
        """
        config = cls()

        if predicate := os.environ.get("TEXTSCAN_PREDICATE"):
            if predicate in PREDICATES:
                config.predicate = predicate

        if braces := os.environ.get("TEXTSCAN_BRACES"):
            if len(braces) == 2:
                config.opening_brace, config.closing_brace = braces[0], braces[1]

        if (optional := _parse_flag(os.environ.get("TEXTSCAN_BRACES_OPTIONAL"))) is not None:
            config.braces_optional = optional

        if (verbose := _parse_flag(os.environ.get("TEXTSCAN_VERBOSE"))) is not None:
            config.verbose = verbose

        return config

    def predicate_function(self) -> IsValidSymbolCharacter:
        """Resolve the configured predicate name."""
        return get_predicate(self.predicate)


def _parse_flag(value: str | None) -> bool | None:
    if value is None:
        return None
    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return None
