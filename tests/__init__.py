"""
Test suite for multisend

Contains:
- tests/unit/          : Unit and property tests for individual modules
"""
