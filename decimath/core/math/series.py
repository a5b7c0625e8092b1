"""
Series — Суммирование рядов Тейлора с адаптивной точностью

Используется тригонометрией:
- sin_cos_series: совместный ряд sin/cos для x в [0, 2π)
- atan_series: ряд арктангенса с range reduction (инверсия + половинные углы)

Оба ряда суммируются на текущей точности + series_guard_digits и
округляются обратно при выходе. Критерий остановки: очередной член не
меняет частичную сумму на текущей точности.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый цикл ограничен MathSettings.max_iterations
2. Исчерпание предела → SeriesConvergenceError (частичная сумма не возвращается)
3. Результат всегда содержит оба значения sin и cos

ФОРМУЛЫ:
    sin(x) = x · (1 − x²/3! + x⁴/5! − …)
    cos(x) = 1 − x²/2! + x⁴/4! − …
    tan(x/2) = tan(x) / (1 + √(1 + tan²(x)))
    atan(a) = a · (1 − a²/3 + a⁴/5 − a⁶/7 + …),   a ≤ 0.1
    atan(x) = π/2 − atan(1/x),   x > 1
"""

import logging
from dataclasses import dataclass
from decimal import Decimal, localcontext
from typing import Final

from decimath.core.domain.settings import MathSettings, get_settings
from decimath.core.math.constants import half_pi
from decimath.core.math.numerical_safeguards import ONE, SeriesConvergenceError

logger = logging.getLogger(__name__)

# Граница, до которой аргумент арктангенса уменьшается половинными углами
ATAN_REDUCTION_LIMIT: Final[Decimal] = Decimal("0.1")


def _convergence_error(series: str, iterations: int, precision: int) -> SeriesConvergenceError:
    logger.warning(
        "%s series exhausted %d iterations at %d digits", series, iterations, precision
    )
    return SeriesConvergenceError(series, iterations, precision)


@dataclass(frozen=True)
class SinCos:
    """Совместный результат ряда sin/cos"""

    sin: Decimal
    cos: Decimal


# =============================================================================
# SIN / COS
# =============================================================================


def sin_cos_series(x: Decimal, settings: MathSettings | None = None) -> SinCos:
    """
    Совместное вычисление sin(x) и cos(x) рядом Тейлора.

    Текущий член t делится на два очередных целых на каждом шаге: после
    первого деления он равен x^(2n)/(2n)! и входит в cos, после второго —
    x^(2n)/(2n+1)! и входит в sin (до умножения на x). Каждая сумма перестаёт
    обновляться независимо, как только шаг её не меняет.

    Args:
        x: Угол в радианах, приведённый к [0, 2π)
        settings: Настройки (default: процессные)

    Returns:
        SinCos(sin, cos) на текущей точности

    Raises:
        SeriesConvergenceError: Если суммы не стабилизировались за max_iterations
    """
    settings = settings or get_settings()

    with localcontext() as ctx:
        ctx.prec += settings.series_guard_digits

        x_squared = x * x
        divisor = ONE
        term = ONE
        sin_sum = ONE
        cos_sum = ONE
        sin_done = False
        cos_done = False

        step = 0
        while not (sin_done and cos_done):
            step += 1
            if step > settings.max_iterations:
                raise _convergence_error("sin/cos", settings.max_iterations, ctx.prec)

            subtract = step % 2 == 1

            divisor += ONE
            term *= x_squared / divisor
            if not cos_done:
                previous = cos_sum
                cos_sum = cos_sum - term if subtract else cos_sum + term
                cos_done = cos_sum == previous

            divisor += ONE
            term /= divisor
            if not sin_done:
                previous = sin_sum
                sin_sum = sin_sum - term if subtract else sin_sum + term
                sin_done = sin_sum == previous

        sin_value = sin_sum * x

    return SinCos(sin=+sin_value, cos=+cos_sum)


# =============================================================================
# ARCTANGENT
# =============================================================================


def atan_series(x: Decimal, settings: MathSettings | None = None) -> Decimal:
    """
    Главное значение atan(x) в (−π/2, π/2) для конечного x.

    Range reduction:
    1. a = |x|; при a > 1 используется atan(x) = π/2 − atan(1/x)
    2. a ← a / (1 + √(1 + a²)) пока a > 0.1 (не более 3 шагов для a ≤ 1);
       каждый шаг уменьшает угол вдвое и отменяется удвоением результата

    Args:
        x: Конечное значение
        settings: Настройки (default: процессные)

    Returns:
        atan(x) в радианах на текущей точности

    Raises:
        SeriesConvergenceError: Если ряд не стабилизировался за max_iterations
    """
    settings = settings or get_settings()

    with localcontext() as ctx:
        ctx.prec += settings.series_guard_digits

        negative = x.is_signed()
        a = abs(x)

        invert = a > ONE
        if invert:
            a = ONE / a

        halvings = 0
        while a > ATAN_REDUCTION_LIMIT:
            if halvings >= settings.max_iterations:
                raise _convergence_error("atan reduction", halvings, ctx.prec)
            halvings += 1
            a /= ONE + (ONE + a * a).sqrt()

        # Пары членов: +a^(4k)/(4k+1) − a^(4k+2)/(4k+3)
        a_squared = a * a
        power = a_squared
        total = ONE - power / 3
        divisor = 5
        for _ in range(settings.max_iterations):
            previous = total

            power *= a_squared
            total += power / divisor
            divisor += 2

            power *= a_squared
            total -= power / divisor
            divisor += 2

            if total == previous:
                break
        else:
            raise _convergence_error("atan", settings.max_iterations, ctx.prec)

        result = total * a
        for _ in range(halvings):
            result += result

        if invert:
            result = half_pi() - result
        if negative:
            result = -result

    return +result
