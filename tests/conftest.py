"""
Shared test fixtures and configuration for casecite tests.

This module provides reusable citation strings, parsed components, and rule
flag mappings so individual test files don't repeat them. It also isolates
every test from CASECITE_* environment variables set on the developer's
machine.

Key Fixtures:
    - Sample citation strings covering each recognized component
    - Prebuilt CitationComponents objects
    - Rule flag mappings (none enabled, all enabled)
    - Temporary logging YAML files

Python Learning Notes:
    - conftest.py is automatically discovered by pytest
    - Fixtures defined here are available to all tests without import
    - yield in fixtures allows teardown code after the test
"""

from pathlib import Path
from typing import Dict

import pytest

import casecite.utils
from casecite.rules import build_rule_flags
from casecite.schema import CitationComponents

CASECITE_ENV_VARS = (
    "CASECITE_ENABLED_RULES",
    "CASECITE_STRICT_RULES",
    "CASECITE_LOG_CONFIG",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """
    Remove casecite environment variables for the duration of each test.

    Python Learning Notes:
        - autouse=True makes fixture run for all tests automatically
        - monkeypatch restores the original environment after the test
    """
    for name in CASECITE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def reset_logging_state(monkeypatch):
    """Let setup_logging() run again inside a test."""
    monkeypatch.setattr(casecite.utils, "_logging_configured", False)


@pytest.fixture
def brown_citation() -> str:
    return "Brown v. Board of Education, 347 U.S. 483 (1954)"


@pytest.fixture
def roe_citation() -> str:
    return "Roe v. Wade, 410 U.S. 113, 164 (1973)"


@pytest.fixture
def circuit_citation_with_history() -> str:
    """A circuit court citation with a court name and two history annotations."""
    return (
        "The Acme Corporation v. Smith, 12 F.3d 34, 36 (2d Cir. 1994), "
        "aff'd, 514 U.S. 1 (1995), cert. denied, 515 U.S. 2 (1995)"
    )


@pytest.fixture
def full_components() -> CitationComponents:
    """
    Components with every field populated.

    Returns:
        CitationComponents: A circuit court case with pinpoint and history
    """
    return CitationComponents(
        party_one="The Acme Corporation",
        party_two="Smith Company",
        volume="12",
        reporter="F.3d",
        page="34",
        court="2d Cir.",
        year="1994",
        pinpoint="36",
        subsequent_history=["aff'd, 514 U.S. 1"],
    )


@pytest.fixture
def no_rules() -> Dict[str, bool]:
    return build_rule_flags()


@pytest.fixture
def all_rules() -> Dict[str, bool]:
    return {rule_id: True for rule_id in build_rule_flags()}


@pytest.fixture
def temp_logging_config(tmp_path) -> Path:
    """
    Write a minimal logging YAML file into a temporary directory.

    Yields:
        Path: Path to the YAML file (removed with tmp_path)
    """
    config_path = tmp_path / "logging_config.yaml"
    config_path.write_text(
        "version: 1\n"
        "disable_existing_loggers: false\n"
        "handlers:\n"
        "  discard:\n"
        "    class: logging.NullHandler\n"
        "loggers:\n"
        "  casecite.test_marker:\n"
        "    level: ERROR\n"
        "    handlers: [discard]\n"
        "    propagate: false\n",
        encoding="utf-8",
    )
    yield config_path
