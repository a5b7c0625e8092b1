"""
AngleUnits — Единицы измерения углов

Единственный допустимый способ описания единиц угла:
- RADIANS  (полный круг = 2π)
- DEGREES  (полный круг = 360)
- GRADIANS (полный круг = 400)

Единица влияет только на конверсию на границе AngleReducer, но никогда на
хранение значения. Конверсии с участием π выполняются в
decimath.core.math.angle_reduction, так как π зависит от точности.
"""

from decimal import Decimal
from enum import Enum
from typing import Final


# =============================================================================
# ENUMS
# =============================================================================


class AngleUnit(str, Enum):
    """Единица измерения угла"""

    RADIANS = "radians"
    DEGREES = "degrees"
    GRADIANS = "gradians"


# =============================================================================
# РАЗМЕРЫ КРУГА
# =============================================================================

# Полный круг в градусах
DEGREES_PER_CIRCLE: Final[Decimal] = Decimal(360)

# Полный круг в градах
GRADIANS_PER_CIRCLE: Final[Decimal] = Decimal(400)

# Количество прямых углов в круге (квадранты)
QUADRANTS_PER_CIRCLE: Final[int] = 4


def exact_circle_size(unit: AngleUnit) -> Decimal | None:
    """
    Размер полного круга для единиц с точным (целым) размером.

    Args:
        unit: Единица угла

    Returns:
        360 для DEGREES, 400 для GRADIANS, None для RADIANS
        (2π не представим точно и вычисляется на нужной точности)
    """
    if unit is AngleUnit.DEGREES:
        return DEGREES_PER_CIRCLE
    if unit is AngleUnit.GRADIANS:
        return GRADIANS_PER_CIRCLE
    return None


def parse_angle_unit(value: "AngleUnit | str") -> AngleUnit:
    """
    Конверсия строки в AngleUnit (регистронезависимо).

    Args:
        value: AngleUnit или его строковое имя/значение ("deg", "degrees", "DEGREES")

    Returns:
        AngleUnit

    Raises:
        ValueError: Если единица неизвестна
    """
    if isinstance(value, AngleUnit):
        return value

    key = value.strip().lower()
    aliases = {
        "rad": AngleUnit.RADIANS,
        "deg": AngleUnit.DEGREES,
        "grad": AngleUnit.GRADIANS,
        "gon": AngleUnit.GRADIANS,
    }
    if key in aliases:
        return aliases[key]

    try:
        return AngleUnit(key)
    except ValueError:
        raise ValueError(f"Unknown angle unit: {value!r}") from None
