"""
Constants — π и производные на произвольной точности

π вычисляется по формуле Мэчина:
    π = 16·atan(1/5) − 4·atan(1/239)
с рядом atan(1/n) = Σ (−1)^k / ((2k+1)·n^(2k+1)).

Значения кэшируются по точности (lru_cache), вычисляются на prec + guard
разрядах с ROUND_HALF_EVEN и округляются до контекста вызывающего кода.
"""

from decimal import ROUND_HALF_EVEN, Context, Decimal, localcontext
from functools import lru_cache
from typing import Final

from decimath.core.math.numerical_safeguards import TWO, caller_context

# Защитные разряды при вычислении π
PI_GUARD_DIGITS: Final[int] = 10


def _arctan_recip(n: int) -> Decimal:
    """atan(1/n) на текущей точности (n > 1)"""
    n_squared = n * n
    power = Decimal(1) / n
    total = power
    k = 1
    sign = -1
    while True:
        power /= n_squared
        previous = total
        total += sign * power / (2 * k + 1)
        if total == previous:
            return total
        k += 1
        sign = -sign


@lru_cache(maxsize=64)
def pi_digits(prec: int) -> Decimal:
    """
    π с prec значащими разрядами (ROUND_HALF_EVEN).

    Args:
        prec: Число значащих разрядов

    Returns:
        π, округлённое до prec разрядов
    """
    with localcontext(Context(prec=prec + PI_GUARD_DIGITS, rounding=ROUND_HALF_EVEN)):
        value = 16 * _arctan_recip(5) - 4 * _arctan_recip(239)
    return Context(prec=prec, rounding=ROUND_HALF_EVEN).plus(value)


def pi(context: Context | None = None) -> Decimal:
    """
    π на точности контекста.

    Examples:
        >>> pi(Context(prec=10))
        Decimal('3.141592654')
    """
    ctx = caller_context(context)
    return ctx.plus(pi_digits(ctx.prec + 2))


def two_pi(context: Context | None = None) -> Decimal:
    """2π на точности контекста"""
    ctx = caller_context(context)
    return ctx.multiply(pi(ctx), TWO)


def half_pi(context: Context | None = None) -> Decimal:
    """
    π/2 на точности контекста.

    Совпадает с pi(context) / 2, вычисленным в том же контексте, поэтому
    служит точной границей квадранта для радиан.
    """
    ctx = caller_context(context)
    return ctx.divide(pi(ctx), TWO)
