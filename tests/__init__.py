"""
Test suite for complex-arith

Contains:
- tests/unit/          : Unit tests for individual modules
"""
