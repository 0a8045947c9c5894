"""
Domain models and value objects.

Contains the ComplexValue value type and its derived coordinate forms.
"""

from src.core.domain.complex_value import ComplexValue
from src.core.math.coordinates import CartesianForm, PolarForm

__all__ = [
    # Complex value model
    "ComplexValue",
    # Coordinate forms
    "CartesianForm",
    "PolarForm",
]
