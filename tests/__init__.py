"""
Test suite for valmath

Contains:
- tests/unit/          : Unit tests for individual modules
"""
