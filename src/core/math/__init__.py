"""
Core math modules

Численные примитивы float32 для арифметики комплексных чисел.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT32,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # float32 coercion
    float32_errstate,
    round_to_float32,
    to_float32,
    # NaN/Inf checks
    is_valid_float,
    # Epsilon comparisons
    is_close,
    # Validation
    validate_tolerance,
)

# Coordinates
from src.core.math.coordinates import (
    CartesianForm,
    PolarForm,
    cartesian_modulus,
    cartesian_to_polar,
    polar_to_cartesian,
)

# Formatting
from src.core.math.formatting import (
    format_float_debug,
    format_float_display,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT32",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — float32 coercion
    "float32_errstate",
    "round_to_float32",
    "to_float32",
    # Numerical Safeguards — NaN/Inf checks
    "is_valid_float",
    # Numerical Safeguards — Epsilon comparisons
    "is_close",
    # Numerical Safeguards — Validation
    "validate_tolerance",
    # Coordinates — Types
    "CartesianForm",
    "PolarForm",
    # Coordinates — Functions
    "cartesian_modulus",
    "cartesian_to_polar",
    "polar_to_cartesian",
    # Formatting
    "format_float_debug",
    "format_float_display",
]
