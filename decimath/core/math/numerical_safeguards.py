"""
Numerical Safeguards — Precision Scope & Decimal Primitives

Модуль обеспечивает численную устойчивость всех трансцендентных функций:
- PrecisionScope: временное повышение рабочей точности с гарантированным
  восстановлением (thread-local копия decimal.Context)
- Конверсия входных значений в Decimal (int, float, str, Decimal)
- Предикаты специальных значений (NaN, Infinity, целые)
- ULP-сравнения относительно активной точности
- hypot без промежуточной потери точности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Контекст вызывающего кода никогда не изменяется (точность до и после
   вызова идентична на всех путях выхода, включая NaN и исключения)
2. Доменные нарушения и выход за диапазон дают NaN/Infinity/0, а не
   исключения (рабочий контекст не ловит Overflow и DivisionByZero)
3. Исчерпание предела итераций — SeriesConvergenceError, а не молчаливый
   возврат частичной суммы
4. Все операции детерминированы и воспроизводимы
"""

import math
from collections.abc import Iterator
from contextlib import contextmanager
from decimal import Context, Decimal, DivisionByZero, Overflow, getcontext, localcontext
from typing import Final

from decimath.core.domain.settings import MathSettings, get_settings

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO: Final[Decimal] = Decimal(0)
ONE: Final[Decimal] = Decimal(1)
TWO: Final[Decimal] = Decimal(2)
HALF: Final[Decimal] = Decimal("0.5")

NAN: Final[Decimal] = Decimal("NaN")
INFINITY: Final[Decimal] = Decimal("Infinity")
NEG_INFINITY: Final[Decimal] = Decimal("-Infinity")

# Допуск приближённого сравнения в единицах последнего разряда
ULP_TOLERANCE_DEFAULT: Final[int] = 2

# Сигналы выхода за диапазон: в рабочем контексте дают ±Infinity или 0
RANGE_SIGNALS: Final[tuple[type[ArithmeticError], ...]] = (Overflow, DivisionByZero)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class SeriesConvergenceError(ArithmeticError):
    """
    Ряд не сошёлся за отведённое число итераций.

    Возникает, когда критерий остановки (сумма не меняется на текущей
    точности) не выполнен за MathSettings.max_iterations шагов. Обычно
    означает, что запрошенная точность слишком велика для предела итераций.
    """

    def __init__(self, series: str, iterations: int, precision: int):
        self.series = series
        self.iterations = iterations
        self.precision = precision
        super().__init__(
            f"{series} series did not converge within {iterations} iterations "
            f"at {precision} digits. Increase max_iterations or lower the precision."
        )


# =============================================================================
# PRECISION SCOPE
# =============================================================================


def caller_context(context: Context | None = None) -> Context:
    """
    Контекст вызывающего кода.

    Args:
        context: Явный контекст или None (текущий thread-local контекст)

    Returns:
        Контекст, относительно которого округляется результат
    """
    return context if context is not None else getcontext()


def working_digits(prec: int, settings: MathSettings | None = None) -> int:
    """
    Рабочая точность для целевой точности prec.

    max(ceil(prec * precision_factor), prec + min_guard_digits)

    Examples:
        >>> working_digits(28)
        42
        >>> working_digits(4)
        9
    """
    settings = settings or get_settings()
    elevated = math.ceil(prec * settings.precision_factor)
    return max(elevated, prec + settings.min_guard_digits)


@contextmanager
def precision_scope(
    context: Context | None = None,
    digits: int | None = None,
) -> Iterator[Context]:
    """
    Повышение рабочей точности на время вычисления.

    Копия контекста вызывающего кода становится текущим thread-local
    контекстом; по выходе (любым путём) восстанавливается прежний.
    Сам объект контекста вызывающего кода не изменяется.
    Ловушки Overflow и DivisionByZero в рабочем контексте сняты:
    переполнение даёт ±Infinity, деление конечного на 0 даёт ±Infinity.

    Args:
        context: Контекст вызывающего кода (default: текущий)
        digits: Явная рабочая точность (default: working_digits(prec))

    Yields:
        Рабочий контекст
    """
    caller = caller_context(context)
    with localcontext(caller) as work:
        work.prec = digits if digits is not None else working_digits(caller.prec)
        quiet_range(work)
        yield work


def quiet_range(context: Context) -> Context:
    """Снимает ловушки RANGE_SIGNALS с context (на месте) и возвращает его"""
    for signal in RANGE_SIGNALS:
        context.traps[signal] = False
    return context


def round_to_context(value: Decimal, context: Context | None = None) -> Decimal:
    """
    Округление результата рабочей точности до точности вызывающего кода.

    Нули возвращаются как есть: Context.plus(-0) даёт +0, а знак нуля
    является частью результата (atan2(-0, x) == -0).
    """
    if value.is_zero():
        return value
    return caller_context(context).plus(value)


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def to_decimal(value) -> Decimal:
    """
    Конверсия входного значения в Decimal без округления.

    Поддерживаются: Decimal, int (знаковый/беззнаковый), float (точное
    двоичное значение), str (десятичный литерал).

    Args:
        value: Исходное значение

    Returns:
        Decimal

    Raises:
        TypeError: Если тип не поддерживается (включая bool)
        decimal.InvalidOperation: Если строка не является десятичным литералом
            (при включённом trap InvalidOperation)
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError("bool is not a real number value")
    if isinstance(value, (int, float)):
        return Decimal(value)
    if isinstance(value, str):
        return Decimal(value.strip())
    raise TypeError(f"Unsupported numeric type: {type(value).__name__}")


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


def is_special(value: Decimal) -> bool:
    """NaN или Infinity"""
    return not value.is_finite()


def is_integral(value: Decimal) -> bool:
    """
    Является ли значение конечным целым.

    Examples:
        >>> is_integral(Decimal("5.000"))
        True
        >>> is_integral(Decimal("5.5"))
        False
        >>> is_integral(Decimal("Infinity"))
        False
    """
    return value.is_finite() and value == value.to_integral_value()


def copy_sign(magnitude: Decimal, sign_source: Decimal) -> Decimal:
    """Значение magnitude со знаком sign_source (учитывая -0)"""
    return magnitude.copy_sign(sign_source)


def infinity(negative: bool = False) -> Decimal:
    """Знаковая бесконечность"""
    return NEG_INFINITY if negative else INFINITY


# =============================================================================
# ULP-СРАВНЕНИЯ
# =============================================================================


def ulp(context: Context | None = None) -> Decimal:
    """
    Единица последнего разряда для значения порядка 1 на точности контекста.

    Examples:
        >>> ulp(Context(prec=28))
        Decimal('1E-27')
    """
    prec = caller_context(context).prec
    return ONE.scaleb(1 - prec)


def is_close_ulp(
    a: Decimal,
    b: Decimal,
    ulps: int = ULP_TOLERANCE_DEFAULT,
    context: Context | None = None,
) -> bool:
    """
    Приближённое равенство: относительная разность в пределах ulps единиц
    последнего разряда активной точности.

    Алгоритм:
        a == b, либо |(b - a) / b| <= ulps * ulp

    Args:
        a: Первое значение
        b: Опорное значение
        ulps: Допуск в ULP (default: 2)
        context: Контекст, задающий точность (default: текущий)

    Returns:
        True если значения совпадают в пределах допуска
    """
    if a.is_nan() or b.is_nan():
        return False
    if a == b:
        return True
    if is_special(a) or is_special(b) or b.is_zero():
        return False

    with localcontext(caller_context(context)) as ctx:
        relative = abs((b - a) / b)
        return relative <= ulps * ulp(ctx)


# =============================================================================
# ПРИМИТИВЫ
# =============================================================================


def hypot(x: Decimal, y: Decimal) -> Decimal:
    """
    sqrt(x² + y²) на текущей точности с защитными разрядами.

    Infinity доминирует над NaN (как в IEEE 754 hypot).
    """
    if x.is_infinite() or y.is_infinite():
        return INFINITY
    if x.is_nan() or y.is_nan():
        return NAN
    if x.is_zero():
        return abs(y) + ZERO
    if y.is_zero():
        return abs(x) + ZERO

    with localcontext() as ctx:
        ctx.prec += 3
        result = (x * x + y * y).sqrt()
    return +result
