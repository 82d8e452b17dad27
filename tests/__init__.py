"""
Test suite for the dense linear algebra library

Contains:
- tests/unit/          : Unit tests for individual modules and invariants
"""
