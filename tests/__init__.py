"""
Test suite for bit utilities

Contains:
- tests/unit/          : Unit tests for individual modules
"""
