"""
Angle — Значение угла с единицей измерения

Immutable Pydantic модель: RealValue (Decimal) + AngleUnit.
NaN и Infinity допустимы (пропагируют в NaN на выходе тригонометрии).
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from decimath.core.domain.settings import get_default_angle_unit
from decimath.core.domain.units import AngleUnit, parse_angle_unit


class Angle(BaseModel):
    """
    Угол: значение + единица измерения.

    Если единица не указана, используется процессная единица по умолчанию
    на момент создания.
    """

    value: Decimal = Field(..., allow_inf_nan=True, description="Значение угла")
    unit: AngleUnit = Field(
        default_factory=get_default_angle_unit, description="Единица измерения"
    )

    model_config = {"frozen": True}

    @classmethod
    def of(cls, value, unit: AngleUnit | str | None = None) -> "Angle":
        """Создание угла из числа/строки с опциональной единицей"""
        if unit is None:
            return cls(value=value)
        return cls(value=value, unit=parse_angle_unit(unit))


def resolve_unit(unit: AngleUnit | str | None) -> AngleUnit:
    """
    Определение действующей единицы угла.

    Args:
        unit: Явная единица или None

    Returns:
        Явная единица, либо процессная единица по умолчанию
    """
    if unit is None:
        return get_default_angle_unit()
    return parse_angle_unit(unit)
