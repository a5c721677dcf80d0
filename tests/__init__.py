"""
Test suite

Contains:
- tests/builders/      : Mock builders with defaults for domain models
- tests/unit/          : Unit tests for individual modules
"""
