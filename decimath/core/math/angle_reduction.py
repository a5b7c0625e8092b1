"""
Angle Reduction — Приведение угла к радианам в [0, 2π)

Модуль отвечает за единственную границу, на которой учитывается единица угла:
- Конверсия DEGREES / GRADIANS / RADIANS → радианы
- Range reduction по модулю полного круга
- Быстрый путь для точных кратных прямого угла (90°, 100 град, π/2):
  возвращается табличное значение квадранта без вычисления ряда, поэтому
  sin(90°) == 1 и cos(π/2) == 0 точно, без ошибки усечения ряда
- Обратная конверсия радиан в единицу вызывающего кода

ФОРМУЛЫ:
    fm = x mod circle,  fm += circle если fm < 0
    radians = fm · 2π / circle,   circle ∈ {2π, 360, 400}
"""

from dataclasses import dataclass
from decimal import Context, Decimal, localcontext
from typing import Final

from decimath.core.domain.units import QUADRANTS_PER_CIRCLE, AngleUnit, exact_circle_size
from decimath.core.math.constants import half_pi, two_pi
from decimath.core.math.numerical_safeguards import NAN, ONE, ZERO, caller_context

# =============================================================================
# ТАБЛИЦЫ КВАДРАНТОВ
# =============================================================================

# Значения на 0, 1, 2, 3 прямых углах
SIN_QUADRANT_VALUES: Final[tuple[Decimal, ...]] = (ZERO, ONE, ZERO, -ONE)
COS_QUADRANT_VALUES: Final[tuple[Decimal, ...]] = (ONE, ZERO, -ONE, ZERO)
TAN_QUADRANT_VALUES: Final[tuple[Decimal, ...]] = (ZERO, NAN, ZERO, NAN)


@dataclass(frozen=True)
class ReducedAngle:
    """
    Результат приведения угла.

    radians: угол в радианах в [0, 2π) на текущей точности
    exact: табличное значение квадранта, если угол — точное кратное прямого
           угла (иначе None)
    quadrant: номер квадранта 0..3 для точных кратных (иначе None)
    """

    radians: Decimal
    exact: Decimal | None
    quadrant: int | None = None


# =============================================================================
# ПРЯМЫЕ УГЛЫ
# =============================================================================


def right_angle(unit: AngleUnit, context: Context | None = None) -> Decimal:
    """
    Прямой угол в единице unit.

    Для радиан — π/2 на точности context (тот же результат, что и pi() / 2
    в этом контексте).
    """
    circle = exact_circle_size(unit)
    if circle is None:
        return half_pi(context)
    return circle / QUADRANTS_PER_CIRCLE


def right_angle_quadrant(x: Decimal, right: Decimal) -> int | None:
    """
    Номер квадранта (0..3), если x — точное кратное right.

    Остаток вычисляется точно: точность поднимается так, чтобы целая часть
    частного x / right поместилась без DivisionImpossible.

    Args:
        x: Конечное значение угла
        right: Прямой угол в той же единице

    Returns:
        k mod 4 при x == k·right, иначе None
    """
    if x.is_zero():
        return 0

    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, x.adjusted() - right.adjusted() + 3)
        quotient, remainder = divmod(x, right)

    if not remainder.is_zero():
        return None
    return int(quotient) % QUADRANTS_PER_CIRCLE


# =============================================================================
# REDUCTION
# =============================================================================


def to_reduced_radians(x: Decimal, unit: AngleUnit) -> Decimal:
    """
    Конверсия конечного угла в радианы в [0, 2π) на текущей точности.

    Точность редукции увеличивается на число разрядов целой части x, чтобы
    большие аргументы приводились без потери значащих разрядов.
    """
    circle = exact_circle_size(unit)

    with localcontext() as ctx:
        ctx.prec += max(0, x.adjusted()) + 2
        full = two_pi(ctx)
        modulus = full if circle is None else circle

        fm = x % modulus
        if fm < 0:
            fm += modulus

        radians = fm if circle is None else fm * full / circle

    return +radians


def reduce_angle(
    x: Decimal,
    unit: AngleUnit,
    quadrant_values: tuple[Decimal, ...],
    context: Context | None = None,
) -> ReducedAngle:
    """
    Приведение угла с быстрым путём для кратных прямого угла.

    Проверка кратности выполняется относительно прямого угла на точности
    вызывающего кода (context), сама редукция — на текущей (рабочей) точности.

    Args:
        x: Конечное значение угла
        unit: Единица угла
        quadrant_values: Значения функции на 0, 1, 2, 3 прямых углах
        context: Контекст вызывающего кода

    Returns:
        ReducedAngle(radians, exact)

    Examples:
        >>> reduce_angle(Decimal(90), AngleUnit.DEGREES, SIN_QUADRANT_VALUES).exact
        Decimal('1')
    """
    quadrant = right_angle_quadrant(x, right_angle(unit, caller_context(context)))
    if quadrant is not None:
        radians = quadrant * half_pi()
        return ReducedAngle(radians=radians, exact=quadrant_values[quadrant], quadrant=quadrant)

    return ReducedAngle(radians=to_reduced_radians(x, unit), exact=None)


def convert_from_radians(value: Decimal, unit: AngleUnit) -> Decimal:
    """
    Обратная конверсия: радианы → единица unit на текущей точности.

    value · circle / 2π для DEGREES / GRADIANS; радианы без изменений.
    """
    circle = exact_circle_size(unit)
    if circle is None:
        return value
    return value * circle / two_pi()
