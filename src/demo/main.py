"""Demo entry point — печать примеров вычислений.

Запуск:
    python -m src.demo [--log-level DEBUG] [--debug-format]
    complex-demo [--log-level DEBUG] [--debug-format]
"""

import argparse
import logging
import math
from typing import Final, List, Optional, Sequence

from src.core.domain import ComplexValue
from src.core.math.formatting import format_float_display
from src.vector_ops import (
    elementwise_add,
    elementwise_inverse,
    elementwise_scalar_multiply,
    matrix_add,
    matrix_inverse,
    matrix_scalar_multiply,
)

logger = logging.getLogger("demo")

LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_LOG_LEVEL: Final[str] = "WARNING"

# Примеры значений
SAMPLE_A: Final[tuple[float, float]] = (2.0, 3.0)
SAMPLE_B: Final[tuple[float, float]] = (4.0, 6.0)
SAMPLE_X_VEC: Final[tuple[tuple[float, float], ...]] = ((1.0, 1.0), (-2.0, -2.0), (3.0, 4.0))
SAMPLE_Y_VEC: Final[tuple[tuple[float, float], ...]] = ((1.0, 1.0), (-5.0, 4.0), (2.0, 7.0))


def _vector(pairs: Sequence[tuple[float, float]]) -> List[ComplexValue]:
    return [ComplexValue.from_cartesian(re, im) for re, im in pairs]


def _render_vector(values: Sequence[ComplexValue], debug: bool) -> str:
    if debug:
        return "[" + ", ".join(v.to_debug_string() for v in values) + "]"
    return "[" + ", ".join(str(v) for v in values) + "]"


def _render_matrix(rows: Sequence[Sequence[ComplexValue]], debug: bool) -> str:
    return "[" + ", ".join(_render_vector(row, debug) for row in rows) + "]"


def run_demo(debug_format: bool = False) -> List[str]:
    """
    Выполнение всех операций на примерах.

    Returns:
        Список строк вывода (по одной на операцию)
    """
    a = ComplexValue.from_cartesian(*SAMPLE_A)
    b = ComplexValue.from_cartesian(*SAMPLE_B)
    unit = ComplexValue.from_polar(1.0, math.pi / 2)
    xs = _vector(SAMPLE_X_VEC)
    ys = _vector(SAMPLE_Y_VEC)

    def show(value: ComplexValue) -> str:
        if debug_format:
            return f"{value} {value.to_debug_string()}"
        return str(value)

    modulus, angle = a.to_polar()
    lines = [
        f"a = {show(a)}",
        f"b = {show(b)}",
        f"a + b = {show(a.add(b))}",
        f"a - b = {show(a.subtract(b))}",
        f"a * b = {show(a.multiply(b))}",
        f"a / b = {show(a.divide(b))}",
        f"conj(a) = {show(a.conjugate())}",
        f"|a| = {format_float_display(a.modulus())}",
        (
            f"polar(a) = (modulus={format_float_display(modulus)}, "
            f"angle={format_float_display(angle)})"
        ),
        f"from_polar(1, pi/2) = {show(unit)}",
        f"xs + ys = {_render_vector(elementwise_add(xs, ys), debug_format)}",
        f"-xs = {_render_vector(elementwise_inverse(xs), debug_format)}",
        f"a * xs = {_render_vector(elementwise_scalar_multiply(a, xs), debug_format)}",
        f"[xs, ys] + [ys, xs] = {_render_matrix(matrix_add([xs, ys], [ys, xs]), debug_format)}",
        f"-[xs, ys] = {_render_matrix(matrix_inverse([xs, ys]), debug_format)}",
        f"b * [xs] = {_render_matrix(matrix_scalar_multiply(b, [xs]), debug_format)}",
    ]
    logger.info("Demo produced %d results", len(lines))
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Complex arithmetic demo")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=DEFAULT_LOG_LEVEL,
        help="Logging level (default: %(default)s)",
    )
    parser.add_argument(
        "--debug-format",
        action="store_true",
        help="Also print structural debug renderings",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level))
    logger.debug("Starting demo with debug_format=%s", args.debug_format)

    for line in run_demo(debug_format=args.debug_format):
        print(line)
    return 0
