"""
MathSettings — Процессные настройки вычислений

Единственное разделяемое изменяемое состояние библиотеки. Точность (digit count)
сюда НЕ входит: она передаётся явно через decimal.Context (параметр context=)
или берётся из thread-local decimal.getcontext().

Содержит:
- default_angle_unit: единица угла по умолчанию
- precision_factor / min_guard_digits: повышение рабочей точности
- series_guard_digits: дополнительные разряды для рядов Тейлора
- max_iterations: предел итераций всех рядов (предохранитель сходимости)
"""

import logging

from pydantic import BaseModel, Field

from decimath.core.domain.units import AngleUnit, parse_angle_unit

logger = logging.getLogger(__name__)


# =============================================================================
# MODEL
# =============================================================================


class MathSettings(BaseModel):
    """
    Настройки вычислений.

    Immutable: изменение выполняется только заменой экземпляра через configure().
    """

    default_angle_unit: AngleUnit = Field(
        AngleUnit.RADIANS, description="Единица угла, если она не указана явно"
    )
    precision_factor: float = Field(
        1.5, ge=1.0, le=4.0, description="Множитель рабочей точности относительно целевой"
    )
    min_guard_digits: int = Field(
        5, ge=0, description="Минимальное число дополнительных разрядов рабочей точности"
    )
    series_guard_digits: int = Field(
        5, ge=0, description="Дополнительные разряды внутри суммирования рядов"
    )
    max_iterations: int = Field(
        1000, gt=0, description="Предел итераций рядов (после него — SeriesConvergenceError)"
    )

    model_config = {"frozen": True}


# =============================================================================
# ДОСТУП
# =============================================================================

_settings = MathSettings()


def get_settings() -> MathSettings:
    """Текущие настройки процесса"""
    return _settings


def configure(**changes) -> MathSettings:
    """
    Замена настроек процесса с валидацией.

    Args:
        **changes: Поля MathSettings для изменения

    Returns:
        Новые действующие настройки

    Raises:
        pydantic.ValidationError: Если значения невалидны

    Examples:
        >>> configure(default_angle_unit="degrees").default_angle_unit
        <AngleUnit.DEGREES: 'degrees'>
    """
    global _settings

    if "default_angle_unit" in changes:
        changes["default_angle_unit"] = parse_angle_unit(changes["default_angle_unit"])

    updated = MathSettings(**{**_settings.model_dump(), **changes})
    logger.debug("Math settings changed: %s", changes)
    _settings = updated
    return updated


def reset_settings() -> MathSettings:
    """Возврат настроек по умолчанию"""
    global _settings
    _settings = MathSettings()
    return _settings


def get_default_angle_unit() -> AngleUnit:
    """Единица угла по умолчанию"""
    return _settings.default_angle_unit


def set_default_angle_unit(unit: AngleUnit | str) -> None:
    """Установка единицы угла по умолчанию (процессная настройка)"""
    configure(default_angle_unit=unit)
