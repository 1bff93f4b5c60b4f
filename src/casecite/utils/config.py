"""
Configuration management for casecite.

This module reads default settings from environment variables. The core
parser and formatter take everything as explicit arguments; configuration
only supplies defaults for callers such as the command-line interface.

Environment Variables:
    CASECITE_ENABLED_RULES: Comma-separated rule identifiers enabled by
        default (e.g., "10.2.1.c,10.2.1.d,10.7")
    CASECITE_STRICT_RULES: Reject unknown rule identifiers ("true"/"false",
        default: true)
    CASECITE_LOG_CONFIG: Path to a logging YAML file overriding the bundled one

A .env file in the working directory is loaded by the CLI at start-up, so
the same variables can be kept there:
    ```
    CASECITE_ENABLED_RULES=10.2.1.d,10.7
    ```

Python Learning Notes:
    - os.getenv() safely reads environment variables without raising errors
    - field(default_factory=...) reads the environment each time an instance
      is created, not once at import
    - ValueError is raised for malformed values to fail fast
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from ..rules import build_rule_flags

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def get_enabled_rules() -> List[str]:
    """
    Get the default enabled rule identifiers from the environment.

    Returns:
        List[str]: Identifiers from CASECITE_ENABLED_RULES in the order given,
            with whitespace trimmed and empty items dropped. Empty if the
            variable is unset.
    """
    raw = os.getenv("CASECITE_ENABLED_RULES", "")
    return [item.strip() for item in raw.split(",") if item.strip()]


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default

    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False

    raise ValueError(
        f"{name} must be a boolean (true/false), got '{value}'. "
        "Please fix it in your environment or .env file."
    )


def _env_path(name: str) -> Optional[Path]:
    value = os.getenv(name)
    return Path(value) if value else None


@dataclass
class CitationConfig:
    """
    Default settings for formatting citations.

    Attributes:
        enabled_rules: Rule identifiers switched on by default.
        strict_rules: Whether unknown rule identifiers raise ValueError.
        log_config_path: Logging YAML override, or None for the bundled file.

    Example:
        >>> config = CitationConfig(enabled_rules=["10.7"])
        >>> config.rule_flags()["10.7"]
        True
    """

    enabled_rules: List[str] = field(default_factory=get_enabled_rules)
    strict_rules: bool = field(
        default_factory=lambda: _env_bool("CASECITE_STRICT_RULES", True)
    )
    log_config_path: Optional[Path] = field(
        default_factory=lambda: _env_path("CASECITE_LOG_CONFIG")
    )

    def rule_flags(self) -> Dict[str, bool]:
        """
        Build the full rule flag mapping for the configured defaults.

        Raises:
            ValueError: If strict_rules is set and an enabled identifier is
                not in the rule catalog.
        """
        return build_rule_flags(self.enabled_rules, strict=self.strict_rules)
