"""Utility modules for casecite.

This package contains the shared plumbing around the citation parser and
formatter:

- config.py: Environment-driven defaults (enabled rules, logging config path)
- __init__.py: Centralized logging setup and logger access

Integration Points:
    - The CLI calls setup_logging() once at start-up and builds its default
      rule flags from CitationConfig
    - Core modules only call logging.getLogger(__name__) and never configure
      handlers themselves

Python Learning Notes:
    - This __init__.py file serves as a package initializer and public API
    - The __all__ list at the bottom controls what gets imported with "from utils import *"
    - logging.config.dictConfig() applies a whole configuration from a dict
"""

import logging
import logging.config
from pathlib import Path
from typing import Optional

import yaml

from .config import CitationConfig, get_enabled_rules

# Global flag to track if logging has been configured
_logging_configured = False

DEFAULT_LOG_CONFIG = Path(__file__).parent.parent / "logging_config.yaml"


def setup_logging(config_path: Optional[Path] = None) -> None:
    """Set up logging configuration from a YAML file.

    This function configures the logging system once per process. It should
    be called at application start-up, before loggers emit anything; later
    calls are no-ops.

    Without config_path, the logging_config.yaml bundled with the package
    is used. The CLI passes CitationConfig.log_config_path, which comes
    from the CASECITE_LOG_CONFIG environment variable.

    Args:
        config_path (Optional[Path]): Path to the logging configuration YAML file.

    Raises:
        FileNotFoundError: If the logging configuration file is not found.
        yaml.YAMLError: If the YAML configuration file is malformed.

    Example Usage:
        ```python
        from casecite.utils import setup_logging

        setup_logging()  # Uses default config
        # Now all modules can use: logger = logging.getLogger(__name__)
        ```
    """
    global _logging_configured

    if _logging_configured:
        return

    config_path = Path(config_path) if config_path else DEFAULT_LOG_CONFIG
    if not config_path.exists():
        raise FileNotFoundError(f"Logging config file not found: {config_path}")

    # Load and apply YAML configuration
    with open(config_path, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f)

    logging.config.dictConfig(config)
    _logging_configured = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance using the centralized logging configuration.

    If setup_logging() hasn't been called yet, it is called with default
    settings first.

    Args:
        name (Optional[str]): Logger name to use. If None, defaults to the utils
            module's __name__. For module-specific logging, pass __name__ explicitly.

    Returns:
        logging.Logger: A configured logger instance.
    """
    if not _logging_configured:
        setup_logging()

    return logging.getLogger(name or __name__)


__all__ = [
    "CitationConfig",
    "get_enabled_rules",
    "setup_logging",
    "get_logger",
]
