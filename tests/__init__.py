"""
Test suite for measura

Contains:
- tests/unit/          : Unit tests for individual modules
"""
