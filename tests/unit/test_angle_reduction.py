"""
Тесты для модуля Angle Reduction

Проверяет:
1. Быстрый путь для кратных прямого угла во всех единицах
2. Квадрант для отрицательных и больших кратных
3. Приведение к [0, 2π) и обратную конверсию
4. Константы π
"""

import dataclasses
from decimal import Context, Decimal, localcontext

import pytest

from decimath.core.domain.units import AngleUnit
from decimath.core.math.angle_reduction import (
    COS_QUADRANT_VALUES,
    SIN_QUADRANT_VALUES,
    TAN_QUADRANT_VALUES,
    convert_from_radians,
    reduce_angle,
    right_angle,
    right_angle_quadrant,
    to_reduced_radians,
)
from decimath.core.math.constants import half_pi, pi, pi_digits, two_pi
from decimath.core.math.numerical_safeguards import ONE

TOLERANCE = Decimal("1e-25")


# =============================================================================
# ТЕСТЫ КОНСТАНТ
# =============================================================================


class TestPiConstants:
    """Тесты для π и производных"""

    def test_pi_known_digits(self) -> None:
        """π на 10 и 40 разрядах"""
        assert pi(Context(prec=10)) == Decimal("3.141592654")
        assert pi(Context(prec=40)) == Decimal("3.141592653589793238462643383279502884197")

    def test_pi_digits_cached(self) -> None:
        """pi_digits кэшируется по точности"""
        assert pi_digits(30) is pi_digits(30)

    def test_half_pi_matches_division(self) -> None:
        """half_pi совпадает с pi / 2 в том же контексте"""
        ctx = Context(prec=28)
        assert half_pi(ctx) == ctx.divide(pi(ctx), 2)
        assert two_pi(ctx) == ctx.multiply(pi(ctx), 2)


# =============================================================================
# ТЕСТЫ ПРЯМЫХ УГЛОВ
# =============================================================================


class TestRightAngle:
    """Тесты для right_angle и right_angle_quadrant"""

    def test_right_angle_sizes(self) -> None:
        """90°, 100 град, π/2"""
        assert right_angle(AngleUnit.DEGREES) == 90
        assert right_angle(AngleUnit.GRADIANS) == 100
        assert right_angle(AngleUnit.RADIANS) == half_pi()

    def test_quadrants(self) -> None:
        """Номер квадранта по модулю 4"""
        right = Decimal(90)
        assert right_angle_quadrant(Decimal(0), right) == 0
        assert right_angle_quadrant(Decimal(90), right) == 1
        assert right_angle_quadrant(Decimal(180), right) == 2
        assert right_angle_quadrant(Decimal(270), right) == 3
        assert right_angle_quadrant(Decimal(360), right) == 0
        assert right_angle_quadrant(Decimal(-90), right) == 3

    def test_not_multiple(self) -> None:
        """Некратные углы → None"""
        assert right_angle_quadrant(Decimal(45), Decimal(90)) is None
        assert right_angle_quadrant(Decimal("90.0001"), Decimal(90)) is None

    def test_huge_multiple(self) -> None:
        """Большие значения не теряют целую часть частного"""
        assert right_angle_quadrant(Decimal("9E+30"), Decimal(90)) == 0
        assert right_angle_quadrant(Decimal("1E+30"), Decimal(90)) is None


# =============================================================================
# ТЕСТЫ REDUCTION
# =============================================================================


class TestReduceAngle:
    """Тесты для reduce_angle"""

    def test_exact_degrees(self) -> None:
        """sin(90°) и cos(450°) — табличные значения"""
        reduced = reduce_angle(Decimal(90), AngleUnit.DEGREES, SIN_QUADRANT_VALUES)
        assert reduced.exact == 1
        assert reduced.quadrant == 1

        reduced = reduce_angle(Decimal(450), AngleUnit.DEGREES, COS_QUADRANT_VALUES)
        assert reduced.exact == 0

    def test_exact_negative(self) -> None:
        """sin(−90°) == −1"""
        reduced = reduce_angle(Decimal(-90), AngleUnit.DEGREES, SIN_QUADRANT_VALUES)
        assert reduced.exact == -1
        assert reduced.quadrant == 3

    def test_exact_gradians(self) -> None:
        """200 град — развёрнутый угол"""
        assert reduce_angle(Decimal(200), AngleUnit.GRADIANS, SIN_QUADRANT_VALUES).exact == 0
        assert reduce_angle(Decimal(200), AngleUnit.GRADIANS, COS_QUADRANT_VALUES).exact == -1

    def test_exact_radians(self) -> None:
        """π/2 в радианах на текущей точности"""
        reduced = reduce_angle(half_pi(), AngleUnit.RADIANS, SIN_QUADRANT_VALUES)
        assert reduced.exact == 1

    def test_tangent_pole(self) -> None:
        """Полюс тангенса отмечается NaN"""
        assert reduce_angle(Decimal(90), AngleUnit.DEGREES, TAN_QUADRANT_VALUES).exact.is_nan()

    def test_non_exact(self) -> None:
        """45° приводится к π/4 без табличного значения"""
        reduced = reduce_angle(Decimal(45), AngleUnit.DEGREES, SIN_QUADRANT_VALUES)
        assert reduced.exact is None
        assert reduced.quadrant is None
        assert abs(reduced.radians - pi() / 4) < TOLERANCE

    def test_result_immutable(self) -> None:
        """ReducedAngle неизменяем"""
        reduced = reduce_angle(Decimal(45), AngleUnit.DEGREES, SIN_QUADRANT_VALUES)
        with pytest.raises(dataclasses.FrozenInstanceError):
            reduced.exact = ONE


class TestToReducedRadians:
    """Тесты для to_reduced_radians и convert_from_radians"""

    def test_negative_degrees(self) -> None:
        """−30° → 330° = 11π/6"""
        radians = to_reduced_radians(Decimal(-30), AngleUnit.DEGREES)
        assert abs(radians - pi() * 11 / 6) < TOLERANCE

    def test_radians_in_range(self) -> None:
        """Результат в [0, 2π)"""
        for value in (Decimal(-7), Decimal(7), Decimal(1000)):
            radians = to_reduced_radians(value, AngleUnit.RADIANS)
            assert Decimal(0) <= radians < two_pi()

    def test_radians_periodic(self) -> None:
        """x + 2π приводится к x"""
        with localcontext(Context(prec=40)):
            x = Decimal("0.5") + two_pi()
            radians = to_reduced_radians(x, AngleUnit.RADIANS)
            assert abs(radians - Decimal("0.5")) < Decimal("1e-37")

    def test_convert_from_radians(self) -> None:
        """π радиан → 180° и 200 град"""
        assert abs(convert_from_radians(pi(), AngleUnit.DEGREES) - 180) < TOLERANCE
        assert abs(convert_from_radians(pi(), AngleUnit.GRADIANS) - 200) < TOLERANCE
        assert convert_from_radians(Decimal("0.5"), AngleUnit.RADIANS) == Decimal("0.5")
