"""
Test suite for workweek

Contains:
- tests/unit/          : Unit tests for individual modules and the CLI
"""
