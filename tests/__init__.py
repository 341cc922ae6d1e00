"""
Test suite for defi-ids

Contains:
- tests/unit/          : Unit tests for individual modules
"""
