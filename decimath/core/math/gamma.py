"""
Gamma — Гамма-функция, факториал и комбинаторика

Γ(t) вычисляется приближением Спаужа (Spouge):

    Γ(z) = √(2π) · (z + a − 1)^(z − ½) · e^(−(z + a − 1)) · (1 + Σ c_k / (z + k − 1))

    c_k = (−1)^(k−1) · (a − k)^(k − ½) · e^(a − k) / ((k − 1)! · √(2π)),  k = 1..a−1

    a = ceil(1.25 · prec / log10(2π))

Для t < 0.5 используется формула отражения:
    Γ(t) = π / (sin(πt) · Γ(1 − t))

Целые t ≥ 1 до FACTORIAL_DIRECT_LIMIT вычисляются точным произведением (t − 1)!.

Комбинаторика:
    factorial(n)      = Γ(n + 1)
    permutation(x, y) = x! / (x − y)!
    combination(x, y) = permutation(x, y) / y!

Недопустимые аргументы логируются и дают NaN/Infinity (не исключения).
"""

import logging
import math
from decimal import Context, Decimal, getcontext, localcontext
from typing import Final

from decimath.core.domain.settings import MathSettings, get_settings
from decimath.core.domain.units import AngleUnit
from decimath.core.math.constants import pi, two_pi
from decimath.core.math.numerical_safeguards import (
    HALF,
    INFINITY,
    NAN,
    ONE,
    SeriesConvergenceError,
    caller_context,
    is_integral,
    quiet_range,
    round_to_context,
    to_decimal,
)
from decimath.core.math.trigonometric import sin

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# |t| выше этого значения → Infinity
GAMMA_MAX_ARGUMENT: Final[Decimal] = Decimal("1e8")

# Целые аргументы до этого значения считаются точным произведением
FACTORIAL_DIRECT_LIMIT: Final[int] = 10_000

# Множитель рабочей точности гамма-функции
GAMMA_PRECISION_FACTOR: Final[float] = 1.5

# Множитель числа членов Спаужа
SPOUGE_TERMS_FACTOR: Final[float] = 1.25


def spouge_parameter(prec: int) -> int:
    """
    Параметр a приближения Спаужа для точности prec.

    Относительная ошибка приближения < (2π)^(−a), что даёт
    1.25·prec верных разрядов.

    Examples:
        >>> spouge_parameter(28)
        44
    """
    return math.ceil(SPOUGE_TERMS_FACTOR * prec / math.log10(2 * math.pi))


# =============================================================================
# ЯДРО
# =============================================================================


def _spouge(z: Decimal, a: int, settings: MathSettings) -> Decimal:
    """
    Γ(z) для z ≥ 0.5 на текущей точности.

    Raises:
        SeriesConvergenceError: Если a − 1 членов превышает max_iterations
    """
    terms = a - 1
    if terms > settings.max_iterations:
        logger.warning("gamma: %d Spouge terms exceed max_iterations=%d", terms, settings.max_iterations)
        raise SeriesConvergenceError("spouge gamma", settings.max_iterations, getcontext().prec)

    root_two_pi = two_pi().sqrt()
    one_over_e = ONE / ONE.exp()
    running_exp = Decimal(a).exp()
    running_factorial = ONE

    total = ONE
    for k in range(1, terms + 1):
        if k > 1:
            running_factorial *= k - 1
        running_exp *= one_over_e

        coefficient = running_exp * Decimal(a - k) ** (k - HALF) / (running_factorial * root_two_pi)
        term = coefficient / (z + (k - 1))
        total = total + term if k % 2 == 1 else total - term

    # (z+a−1)^(z−½)·e^(−(z+a−1)) одной экспонентой, без Infinity · 0
    shifted = z + (a - 1)
    return root_two_pi * ((z - HALF) * shifted.ln() - shifted).exp() * total


def _gamma(t: Decimal, caller: Context) -> Decimal:
    """Γ(t) для конечного t на рабочей точности (уже установленной)"""
    settings = get_settings()
    a = spouge_parameter(caller.prec)

    if t < HALF:
        sine = sin(pi() * t, AngleUnit.RADIANS, context=getcontext())
        if sine.is_zero():
            logger.warning(
                "gamma: sin(pi*t) is zero for t=%s, argument is too close to a "
                "non-positive integer at %d digits",
                t,
                caller.prec,
            )
            return INFINITY
        logger.debug("gamma: reflection for t=%s", t)
        return pi() / (sine * _spouge(ONE - t, a, settings))

    if is_integral(t) and t <= FACTORIAL_DIRECT_LIMIT:
        return Decimal(math.factorial(int(t) - 1))

    return _spouge(t, a, settings)


# =============================================================================
# ПУБЛИЧНЫЙ API
# =============================================================================


def gamma(x, *, context: Context | None = None) -> Decimal:
    """
    Гамма-функция Γ(x).

    Args:
        x: Аргумент
        context: Контекст вызывающего кода

    Returns:
        Γ(x); Infinity при |x| > 1e8, +Infinity и выходе за диапазон контекста;
        ±0, если в отражении Γ(1 − x) == Infinity; NaN для неположительных
        целых, NaN и −Infinity

    Raises:
        SeriesConvergenceError: Если точность требует больше членов, чем
            max_iterations

    Examples:
        >>> gamma(5)
        Decimal('24')
    """
    caller = caller_context(context)
    t = to_decimal(x)

    if t.is_nan():
        return NAN
    if t.is_infinite():
        return NAN if t.is_signed() else INFINITY
    if abs(t) > GAMMA_MAX_ARGUMENT:
        logger.warning("gamma: argument %s is too large", t)
        return INFINITY
    if is_integral(t) and t <= 0:
        logger.warning("gamma: invalid non-positive integer argument %s", t)
        return NAN

    work_prec = math.ceil(GAMMA_PRECISION_FACTOR * caller.prec) + spouge_parameter(caller.prec)
    with localcontext(caller) as work:
        work.prec = work_prec
        quiet_range(work)
        result = _gamma(t, caller)

    return round_to_context(result, caller)


def factorial(x, *, context: Context | None = None) -> Decimal:
    """
    x! = Γ(x + 1) (определён и для нецелых x).

    Examples:
        >>> factorial(5)
        Decimal('120')
    """
    value = to_decimal(x)
    return gamma(value + ONE if value.is_finite() else value, context=context)


def _ratio(numerator: Decimal, denominator: Decimal, caller: Context) -> Decimal:
    """numerator / denominator со специальными значениями вместо исключений"""
    if numerator.is_nan() or denominator.is_nan():
        return NAN
    if numerator.is_infinite() and denominator.is_infinite():
        return NAN
    if denominator.is_zero():
        return NAN if numerator.is_zero() else INFINITY
    with localcontext(caller) as work:
        work.prec += 2
        result = numerator / denominator
    return round_to_context(result, caller)


def permutation(x, y, *, context: Context | None = None) -> Decimal:
    """
    Число размещений P(x, y) = x! / (x − y)!

    Examples:
        >>> permutation(5, 2)
        Decimal('20')
    """
    caller = caller_context(context)
    x_value = to_decimal(x)
    y_value = to_decimal(y)
    if x_value.is_nan() or y_value.is_nan():
        return NAN

    with localcontext(caller) as work:
        work.prec += 2
        numerator = factorial(x_value, context=work)
        denominator = factorial(x_value - y_value, context=work)
    return _ratio(numerator, denominator, caller)


def combination(x, y, *, context: Context | None = None) -> Decimal:
    """
    Число сочетаний C(x, y) = P(x, y) / y!

    Examples:
        >>> combination(5, 2)
        Decimal('10')
    """
    caller = caller_context(context)
    x_value = to_decimal(x)
    y_value = to_decimal(y)
    if x_value.is_nan() or y_value.is_nan():
        return NAN

    with localcontext(caller) as work:
        work.prec += 2
        numerator = permutation(x_value, y_value, context=work)
        denominator = factorial(y_value, context=work)
    return _ratio(numerator, denominator, caller)
