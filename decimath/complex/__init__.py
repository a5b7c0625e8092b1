"""
Complex algebra над любым вещественным типом с контрактом RealOps.

Complex[Decimal] использует трансцендентные функции decimath.core.math,
Complex[float] — модуль math.
"""

from decimath.complex.number import Complex
from decimath.complex.parsing import format_complex, parse_complex, split_complex_literal
from decimath.complex import functions

__all__ = [
    # Type
    "Complex",
    # Parsing
    "format_complex",
    "parse_complex",
    "split_complex_literal",
    # Functions module
    "functions",
]
