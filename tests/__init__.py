"""
Test suite for mapops

Contains:
- tests/unit/          : Unit tests, one module per operation family
"""
