"""
Domain models and value objects.

Contains angle units, the Angle value object and process-wide settings.
"""

from decimath.core.domain.angle import Angle, resolve_unit
from decimath.core.domain.settings import (
    MathSettings,
    configure,
    get_default_angle_unit,
    get_settings,
    reset_settings,
    set_default_angle_unit,
)
from decimath.core.domain.units import (
    DEGREES_PER_CIRCLE,
    GRADIANS_PER_CIRCLE,
    QUADRANTS_PER_CIRCLE,
    AngleUnit,
    exact_circle_size,
    parse_angle_unit,
)

__all__ = [
    # Units module
    "AngleUnit",
    "DEGREES_PER_CIRCLE",
    "GRADIANS_PER_CIRCLE",
    "QUADRANTS_PER_CIRCLE",
    "exact_circle_size",
    "parse_angle_unit",
    # Angle model
    "Angle",
    "resolve_unit",
    # Settings
    "MathSettings",
    "configure",
    "get_settings",
    "reset_settings",
    "get_default_angle_unit",
    "set_default_angle_unit",
]
