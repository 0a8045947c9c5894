"""
Core domain models and float32 mathematical primitives.

This module contains the foundational building blocks: the ComplexValue
value type and the numerical helpers it is computed with.
"""
