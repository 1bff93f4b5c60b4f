"""
Unit tests for configuration management utilities.

This module tests the environment-driven defaults in the config module:
enabled rules, strictness, and the logging config override.

Test Categories:
    - Happy path: Valid environment variables and successful retrieval
    - Edge cases: Empty strings, whitespace, stray commas
    - Error handling: Malformed booleans, unknown rule identifiers

Python Learning Notes:
    - monkeypatch.setenv temporarily sets environment variables
    - pytest.raises verifies expected exceptions
"""

from pathlib import Path

import pytest

from casecite.utils.config import CitationConfig, get_enabled_rules


class TestGetEnabledRules:
    """Test reading CASECITE_ENABLED_RULES."""

    def test_unset(self):
        assert get_enabled_rules() == []

    def test_comma_separated(self, monkeypatch):
        monkeypatch.setenv("CASECITE_ENABLED_RULES", "10.2.1.d,10.7")
        assert get_enabled_rules() == ["10.2.1.d", "10.7"]

    def test_whitespace_and_empty_items(self, monkeypatch):
        monkeypatch.setenv("CASECITE_ENABLED_RULES", " 10.2.1.c , ,10.7, ")
        assert get_enabled_rules() == ["10.2.1.c", "10.7"]


class TestCitationConfig:
    """Test CitationConfig defaults and rule flag building."""

    def test_defaults(self):
        config = CitationConfig()

        assert config.enabled_rules == []
        assert config.strict_rules is True
        assert config.log_config_path is None

    def test_reads_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CASECITE_ENABLED_RULES", "10.7")
        monkeypatch.setenv("CASECITE_STRICT_RULES", "false")
        monkeypatch.setenv("CASECITE_LOG_CONFIG", str(tmp_path / "log.yaml"))

        config = CitationConfig()

        assert config.enabled_rules == ["10.7"]
        assert config.strict_rules is False
        assert config.log_config_path == Path(tmp_path / "log.yaml")

    def test_environment_read_per_instance(self, monkeypatch):
        first = CitationConfig()
        monkeypatch.setenv("CASECITE_ENABLED_RULES", "10.7")
        second = CitationConfig()

        assert first.enabled_rules == []
        assert second.enabled_rules == ["10.7"]

    def test_constructor_overrides_environment(self, monkeypatch):
        monkeypatch.setenv("CASECITE_ENABLED_RULES", "10.7")
        config = CitationConfig(enabled_rules=["10.2.1.d"])
        assert config.enabled_rules == ["10.2.1.d"]

    @pytest.mark.parametrize(
        "value,expected",
        [("true", True), ("FALSE", False), ("1", True), ("0", False), ("yes", True),
         ("off", False), ("", True)],
    )
    def test_strict_rules_values(self, monkeypatch, value, expected):
        monkeypatch.setenv("CASECITE_STRICT_RULES", value)
        assert CitationConfig().strict_rules is expected

    def test_malformed_boolean_raises(self, monkeypatch):
        monkeypatch.setenv("CASECITE_STRICT_RULES", "sometimes")
        with pytest.raises(ValueError, match="CASECITE_STRICT_RULES must be a boolean"):
            CitationConfig()

    def test_rule_flags(self):
        flags = CitationConfig(enabled_rules=["10.2.1.c", "10.7"]).rule_flags()

        assert flags["10.2.1.c"] is True
        assert flags["10.7"] is True
        assert flags["10.2.1.d"] is False

    def test_rule_flags_unknown_strict(self):
        with pytest.raises(ValueError, match="Unknown rule identifier"):
            CitationConfig(enabled_rules=["10.99"]).rule_flags()

    def test_rule_flags_unknown_lenient(self):
        config = CitationConfig(enabled_rules=["10.99", "10.7"], strict_rules=False)
        flags = config.rule_flags()

        assert "10.99" not in flags
        assert flags["10.7"] is True
