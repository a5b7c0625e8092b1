"""
Hyperbolic — Гиперболические и обратные гиперболические функции

Функции: expm1, ln1p, sinh, cosh, tanh, asinh, acosh, atanh.

Все функции построены на exp/ln движка Decimal с поправками, устраняющими
потерю точности вблизи нуля:
    expm1(x) = (eˣ − 1) · x / ln(eˣ)
    ln1p(x)  = ln(1 + x) · x / ((1 + x) − 1)

ФОРМУЛЫ:
    sinh(x) = u(u + 2) / (2(u + 1)),  u = expm1(x),   |x| < 0.5
    sinh(x) = (eˣ − e⁻ˣ) / 2                         иначе
    cosh(x) = (eˣ + e⁻ˣ) / 2
    tanh(x) = expm1(2x) / (expm1(2x) + 2),  ±1 при |x| > max(100, 1.2·prec)
    asinh(x) = ln1p(x·(x / (√(x² + 1) + 1) + 1))
    acosh(x) = ln(x + √(x² − 1))
    atanh(x) = ln1p(2x / (1 − x)) / 2

Доменные нарушения дают NaN или знаковую бесконечность, а не исключения.
"""

import math
from decimal import Context, Decimal
from typing import Final

from decimath.core.math.numerical_safeguards import (
    INFINITY,
    NAN,
    NEG_INFINITY,
    ONE,
    TWO,
    caller_context,
    copy_sign,
    infinity,
    precision_scope,
    round_to_context,
    to_decimal,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Ниже этого |x| sinh вычисляется через expm1
SINH_SERIES_SWITCH: Final[Decimal] = Decimal("0.5")

# Минимальный порог насыщения tanh (фактический: max(100, 1.2·prec))
TANH_SATURATION: Final[int] = 100

# Множитель точности для порога насыщения tanh
TANH_SATURATION_FACTOR: Final[float] = 1.2


def tanh_saturation(prec: int) -> int:
    """
    Порог |x|, начиная с которого tanh(x) == ±1 на точности prec.

    1 − tanh(x) ≈ 2e^(−2x) < 10^(−prec) при x > 1.15·prec.

    Examples:
        >>> tanh_saturation(28)
        100
        >>> tanh_saturation(200)
        240
    """
    return max(TANH_SATURATION, math.ceil(TANH_SATURATION_FACTOR * prec))


# =============================================================================
# ЯДРА (текущая точность)
# =============================================================================


def _expm1(x: Decimal) -> Decimal:
    """eˣ − 1 на текущей точности"""
    if x.is_nan():
        return NAN
    if x.is_infinite():
        return -ONE if x.is_signed() else INFINITY

    u = x.exp()
    if u.is_infinite():
        return INFINITY
    v = u - ONE
    if v.is_zero():
        return x
    if v == -ONE:
        return v
    return v * x / u.ln()


def _ln1p(x: Decimal) -> Decimal:
    """ln(1 + x) на текущей точности"""
    if x.is_nan():
        return NAN
    if x.is_zero() or x == INFINITY:
        return x
    if x < -ONE or x == NEG_INFINITY:
        return NAN
    if x == -ONE:
        return NEG_INFINITY

    u = x + ONE
    v = u - ONE
    if v.is_zero():
        return x
    return u.ln() * (x / v)


# =============================================================================
# ПУБЛИЧНЫЙ API
# =============================================================================


def expm1(x, *, context: Context | None = None) -> Decimal:
    """
    eˣ − 1 без потери точности при малых x.

    Examples:
        >>> expm1(0)
        Decimal('0')
    """
    caller = caller_context(context)
    value = to_decimal(x)
    with precision_scope(caller):
        result = _expm1(value)
    return round_to_context(result, caller)


def ln1p(x, *, context: Context | None = None) -> Decimal:
    """
    ln(1 + x) без потери точности при малых x.

    Returns:
        ln(1 + x); −Infinity при x == −1; NaN при x < −1
    """
    caller = caller_context(context)
    value = to_decimal(x)
    with precision_scope(caller):
        result = _ln1p(value)
    return round_to_context(result, caller)


def sinh(x, *, context: Context | None = None) -> Decimal:
    """
    Гиперболический синус.

    Returns:
        sinh(x); ±Infinity при ±Infinity и при выходе eˣ за диапазон контекста
    """
    caller = caller_context(context)
    value = to_decimal(x)
    if value.is_nan():
        return NAN
    if value.is_infinite() or value.is_zero():
        return value

    with precision_scope(caller):
        if abs(value) < SINH_SERIES_SWITCH:
            u = _expm1(value)
            result = u * (u + TWO) / (TWO * (u + ONE))
        else:
            u = value.exp()
            result = (u - ONE / u) / TWO

    return round_to_context(result, caller)


def cosh(x, *, context: Context | None = None) -> Decimal:
    """
    Гиперболический косинус.

    Returns:
        cosh(x); +Infinity при ±Infinity и при выходе e^|x| за диапазон контекста
    """
    caller = caller_context(context)
    value = to_decimal(x)
    if value.is_nan():
        return NAN
    if value.is_infinite():
        return INFINITY

    with precision_scope(caller):
        u = value.exp()
        result = (u + ONE / u) / TWO

    return round_to_context(result, caller)


def tanh(x, *, context: Context | None = None) -> Decimal:
    """
    Гиперболический тангенс.

    Returns:
        tanh(x); ±1 при |x| выше порога насыщения (включая ±Infinity)
    """
    caller = caller_context(context)
    value = to_decimal(x)
    if value.is_nan():
        return NAN
    if value.is_zero():
        return value
    if abs(value) > tanh_saturation(caller.prec):
        return copy_sign(ONE, value)

    with precision_scope(caller):
        b = _expm1(value + value)
        result = b / (b + TWO)

    return round_to_context(result, caller)


def asinh(x, *, context: Context | None = None) -> Decimal:
    """
    Обратный гиперболический синус.

    Вычисляется на |x| и восстанавливает знак, чтобы asinh(−x) == −asinh(x).
    """
    caller = caller_context(context)
    value = to_decimal(x)
    if value.is_nan():
        return NAN
    if value.is_infinite() or value.is_zero():
        return value

    with precision_scope(caller):
        a = abs(value)
        root = (a * a + ONE).sqrt()
        result = copy_sign(_ln1p(a * (a / (root + ONE) + ONE)), value)

    return round_to_context(result, caller)


def acosh(x, *, context: Context | None = None) -> Decimal:
    """
    Обратный гиперболический косинус.

    Returns:
        acosh(x) ≥ 0; NaN при x < 1
    """
    caller = caller_context(context)
    value = to_decimal(x)
    if value.is_nan() or value < ONE:
        return NAN
    if value == ONE:
        return Decimal(0)
    if value.is_infinite():
        return INFINITY

    with precision_scope(caller):
        result = (value + (value * value - ONE).sqrt()).ln()

    return round_to_context(result, caller)


def atanh(x, *, context: Context | None = None) -> Decimal:
    """
    Обратный гиперболический тангенс.

    Returns:
        atanh(x); ±Infinity при x == ±1; NaN при |x| > 1
    """
    caller = caller_context(context)
    value = to_decimal(x)
    if value.is_nan():
        return NAN
    magnitude = abs(value)
    if magnitude == ONE:
        return infinity(negative=value.is_signed())
    if magnitude > ONE:
        return NAN
    if value.is_zero():
        return value

    with precision_scope(caller):
        result = _ln1p(TWO * value / (ONE - value)) / TWO

    return round_to_context(result, caller)
