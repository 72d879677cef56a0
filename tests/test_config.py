# =============================================================================
# test_config.py - Scanning Configuration Tests
# =============================================================================

import pytest

from textsymbols.config import ScanConfig
from textsymbols.predicates import is_identifier_character, is_letter


@pytest.fixture
def clean_env(monkeypatch):
    """Remove all TEXTSCAN_* variables from the environment."""
    for name in ("TEXTSCAN_PREDICATE", "TEXTSCAN_BRACES", "TEXTSCAN_BRACES_OPTIONAL", "TEXTSCAN_VERBOSE"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestScanConfig:
    """Tests for ScanConfig defaults and environment overrides."""

    def test_defaults(self, clean_env):
        """Defaults apply when no variables are set."""
        config = ScanConfig.from_env()
        assert config == ScanConfig()
        assert config.predicate == "identifier"
        assert (config.opening_brace, config.closing_brace) == ("[", "]")
        assert config.braces_optional is True
        assert config.verbose is False

    def test_env_overrides(self, clean_env):
        """Every variable overrides its field."""
        clean_env.setenv("TEXTSCAN_PREDICATE", "letters")
        clean_env.setenv("TEXTSCAN_BRACES", "{}")
        clean_env.setenv("TEXTSCAN_BRACES_OPTIONAL", "false")
        clean_env.setenv("TEXTSCAN_VERBOSE", "1")

        config = ScanConfig.from_env()
        assert config.predicate == "letters"
        assert (config.opening_brace, config.closing_brace) == ("{", "}")
        assert config.braces_optional is False
        assert config.verbose is True

    @pytest.mark.parametrize("name,value", [
        ("TEXTSCAN_PREDICATE", "digits"),
        ("TEXTSCAN_BRACES", "[[]"),
        ("TEXTSCAN_BRACES_OPTIONAL", "maybe"),
        ("TEXTSCAN_VERBOSE", "loud"),
    ])
    def test_invalid_values_ignored(self, clean_env, name, value):
        """Invalid values leave the default in place."""
        clean_env.setenv(name, value)
        assert ScanConfig.from_env() == ScanConfig()

    def test_predicate_function(self):
        """The predicate name resolves to a function."""
        assert ScanConfig().predicate_function() is is_identifier_character
        assert ScanConfig(predicate="letters").predicate_function() is is_letter

    def test_predicate_function_unknown(self):
        """Unknown names set directly raise KeyError on lookup."""
        with pytest.raises(KeyError):
            ScanConfig(predicate="digits").predicate_function()
