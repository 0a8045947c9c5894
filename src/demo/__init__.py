"""Demo — консольная демонстрация арифметики ComplexValue и vector ops."""

from .main import main

__all__ = ["main"]
