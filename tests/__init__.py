"""
Test suite for casecite.

This package contains the unit tests for the casecite citation parser and
formatter, organized by module to mirror the source code structure.

Test Organization:
    - test_parser.py, test_formatter.py: the two core operations
    - test_reporters.py, test_rules.py, test_schema.py: reference data and models
    - test_utils/: configuration and logging setup
    - test_cli/: command-line interface

Python Learning Notes:
    - __init__.py makes this directory a Python package
    - Tests are discovered automatically by pytest
    - Test files should start with test_ prefix
"""
