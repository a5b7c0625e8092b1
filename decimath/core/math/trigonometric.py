"""
Trigonometric — Тригонометрические и обратные тригонометрические функции

Функции: sin, cos, tan, sin_cos, asin, acos, atan, atan2.

Каждая функция:
- принимает Decimal / int / float / str (или Angle для прямых функций)
- работает в PrecisionScope (рабочая точность ≈ 1.5× целевой)
- возвращает результат, округлённый до контекста вызывающего кода
- выражает угол в единице вызывающего кода (unit или процессная по умолчанию)

Специальные значения вместо исключений:
- sin/cos/tan(NaN или ±Infinity) → NaN
- asin/acos(|x| > 1) → NaN
- atan(±Infinity) → ±π/2
- atan2: полная таблица случаев для нулей со знаком и бесконечностей

ФОРМУЛЫ:
    asin(x) = 2·atan(x / (1 + √(1 − x²)))
    acos(x) = 2·atan((1 − x) / √(1 − x²))
    atan2(y, x) = atan(y/x) + (±π если x < 0)
"""

from decimal import Context, Decimal

from decimath.core.domain.angle import Angle, resolve_unit
from decimath.core.domain.units import AngleUnit
from decimath.core.math.angle_reduction import (
    COS_QUADRANT_VALUES,
    SIN_QUADRANT_VALUES,
    TAN_QUADRANT_VALUES,
    convert_from_radians,
    reduce_angle,
)
from decimath.core.math.constants import half_pi, pi
from decimath.core.math.numerical_safeguards import (
    NAN,
    ONE,
    ZERO,
    caller_context,
    copy_sign,
    is_special,
    precision_scope,
    round_to_context,
    to_decimal,
)
from decimath.core.math.series import SinCos, atan_series, sin_cos_series

# 3/4: множитель для atan2(±Infinity, −Infinity) = ±3π/4
_THREE_QUARTERS = Decimal("0.75")


def _angle_input(x, unit: AngleUnit | str | None) -> tuple[Decimal, AngleUnit]:
    """Значение и единица прямой тригонометрической функции"""
    if isinstance(x, Angle):
        return x.value, x.unit
    return to_decimal(x), resolve_unit(unit)


# =============================================================================
# ПРЯМЫЕ ФУНКЦИИ
# =============================================================================


def sin(x, unit: AngleUnit | str | None = None, *, context: Context | None = None) -> Decimal:
    """
    Синус угла.

    Args:
        x: Угол (число или Angle)
        unit: Единица угла (игнорируется для Angle)
        context: Контекст вызывающего кода (default: текущий)

    Returns:
        sin(x); точные 0, 1, −1 на кратных прямого угла; NaN для NaN/Infinity

    Examples:
        >>> sin(90, "degrees")
        Decimal('1')
    """
    caller = caller_context(context)
    value, unit = _angle_input(x, unit)
    if is_special(value):
        return NAN

    with precision_scope(caller):
        reduced = reduce_angle(value, unit, SIN_QUADRANT_VALUES, caller)
        if reduced.exact is not None:
            result = reduced.exact
        else:
            result = sin_cos_series(reduced.radians).sin

    return round_to_context(result, caller)


def cos(x, unit: AngleUnit | str | None = None, *, context: Context | None = None) -> Decimal:
    """
    Косинус угла.

    Returns:
        cos(x); точные 0, 1, −1 на кратных прямого угла; NaN для NaN/Infinity
    """
    caller = caller_context(context)
    value, unit = _angle_input(x, unit)
    if is_special(value):
        return NAN

    with precision_scope(caller):
        reduced = reduce_angle(value, unit, COS_QUADRANT_VALUES, caller)
        if reduced.exact is not None:
            result = reduced.exact
        else:
            result = sin_cos_series(reduced.radians).cos

    return round_to_context(result, caller)


def sin_cos(x, unit: AngleUnit | str | None = None, *, context: Context | None = None) -> SinCos:
    """
    Синус и косинус за одно суммирование ряда.

    Returns:
        SinCos(sin, cos)
    """
    caller = caller_context(context)
    value, unit = _angle_input(x, unit)
    if is_special(value):
        return SinCos(sin=NAN, cos=NAN)

    with precision_scope(caller):
        reduced = reduce_angle(value, unit, SIN_QUADRANT_VALUES, caller)
        if reduced.exact is not None:
            result = SinCos(sin=reduced.exact, cos=COS_QUADRANT_VALUES[reduced.quadrant])
        else:
            result = sin_cos_series(reduced.radians)

    return SinCos(
        sin=round_to_context(result.sin, caller),
        cos=round_to_context(result.cos, caller),
    )


def tan(x, unit: AngleUnit | str | None = None, *, context: Context | None = None) -> Decimal:
    """
    Тангенс угла.

    Returns:
        tan(x); точный 0 на кратных развёрнутого угла; NaN на нечётных прямых
        углах (полюс) и для NaN/Infinity
    """
    caller = caller_context(context)
    value, unit = _angle_input(x, unit)
    if is_special(value):
        return NAN

    with precision_scope(caller):
        reduced = reduce_angle(value, unit, TAN_QUADRANT_VALUES, caller)
        if reduced.exact is not None:
            result = reduced.exact
        else:
            series = sin_cos_series(reduced.radians)
            result = NAN if series.cos.is_zero() else series.sin / series.cos

    return round_to_context(result, caller)


# =============================================================================
# ОБРАТНЫЕ ФУНКЦИИ
# =============================================================================


def asin(x, unit: AngleUnit | str | None = None, *, context: Context | None = None) -> Decimal:
    """
    Арксинус в [−π/2, π/2] (в единице unit).

    Returns:
        asin(x); NaN при |x| > 1 или NaN
    """
    caller = caller_context(context)
    value = to_decimal(x)
    unit = resolve_unit(unit)
    if value.is_nan() or abs(value) > ONE:
        return NAN

    with precision_scope(caller):
        half_angle = value / (ONE + (ONE - value * value).sqrt())
        result = convert_from_radians(2 * atan_series(half_angle), unit)

    return round_to_context(result, caller)


def acos(x, unit: AngleUnit | str | None = None, *, context: Context | None = None) -> Decimal:
    """
    Арккосинус в [0, π] (в единице unit).

    Returns:
        acos(x); точный 0 при x == 1; NaN при |x| > 1 или NaN
    """
    caller = caller_context(context)
    value = to_decimal(x)
    unit = resolve_unit(unit)
    if value.is_nan() or abs(value) > ONE:
        return NAN
    if value == ONE:
        return ZERO

    with precision_scope(caller):
        if value == -ONE:
            radians = pi()
        else:
            radians = 2 * atan_series((ONE - value) / (ONE - value * value).sqrt())
        result = convert_from_radians(radians, unit)

    return round_to_context(result, caller)


def atan(x, unit: AngleUnit | str | None = None, *, context: Context | None = None) -> Decimal:
    """
    Арктангенс в (−π/2, π/2) (в единице unit).

    Returns:
        atan(x); ±π/2 для ±Infinity; NaN для NaN

    Examples:
        >>> atan("Infinity", "degrees")
        Decimal('90')
    """
    caller = caller_context(context)
    value = to_decimal(x)
    unit = resolve_unit(unit)
    if value.is_nan():
        return NAN
    if value.is_zero():
        return value

    with precision_scope(caller):
        if value.is_infinite():
            radians = copy_sign(half_pi(), value)
        else:
            radians = atan_series(value)
        result = convert_from_radians(radians, unit)

    return round_to_context(result, caller)


def atan2(y, x, unit: AngleUnit | str | None = None, *, context: Context | None = None) -> Decimal:
    """
    Угол точки (x, y) в (−π, π] (в единице unit).

    Args:
        y: Ордината
        x: Абсцисса
        unit: Единица результата
        context: Контекст вызывающего кода

    Returns:
        atan2(y, x); NaN если любой аргумент NaN

    Examples:
        >>> atan2(0, -1) == pi()
        True
    """
    caller = caller_context(context)
    y_value = to_decimal(y)
    x_value = to_decimal(x)
    unit = resolve_unit(unit)
    if y_value.is_nan() or x_value.is_nan():
        return NAN

    with precision_scope(caller):
        result = convert_from_radians(atan2_radians(y_value, x_value), unit)

    return round_to_context(result, caller)


def atan2_radians(y: Decimal, x: Decimal) -> Decimal:
    """
    atan2 в радианах на текущей точности для не-NaN аргументов.

    Таблица специальных случаев:
        y = ±0:        x < 0 или x = −0 → ±π, иначе y (знак нуля сохраняется)
        x = ±0:        ±π/2 (знак y)
        x = +Infinity: y = ±Infinity → ±π/4, иначе ±0
        x = −Infinity: y = ±Infinity → ±3π/4, иначе ±π
        y = ±Infinity: ±π/2
    """
    x_negative = x.is_signed()

    if y.is_zero():
        if x_negative:
            return copy_sign(pi(), y)
        return y

    if x.is_zero():
        return copy_sign(half_pi(), y)

    if x.is_infinite():
        if y.is_infinite():
            base = pi() * _THREE_QUARTERS if x_negative else pi() / 4
        else:
            base = pi() if x_negative else ZERO
        return copy_sign(base, y)

    if y.is_infinite():
        return copy_sign(half_pi(), y)

    result = atan_series(y / x)
    if x_negative:
        result += copy_sign(pi(), y)
    if result.is_zero():
        result = copy_sign(result, y)
    return result
