"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Рабочую точность и PrecisionScope (восстановление на всех путях выхода)
2. Округление результата до контекста вызывающего кода (включая -0)
3. Конверсию входных значений в Decimal
4. Предикаты специальных значений
5. ULP-сравнения
6. hypot
"""

from decimal import Context, Decimal, DivisionByZero, Overflow, getcontext

import pytest

from decimath.core.domain.settings import MathSettings
from decimath.core.math.numerical_safeguards import (
    INFINITY,
    NAN,
    ONE,
    SeriesConvergenceError,
    caller_context,
    copy_sign,
    hypot,
    infinity,
    is_close_ulp,
    is_integral,
    is_special,
    precision_scope,
    round_to_context,
    to_decimal,
    ulp,
    working_digits,
)

# =============================================================================
# ТЕСТЫ РАБОЧЕЙ ТОЧНОСТИ
# =============================================================================


class TestWorkingDigits:
    """Тесты для working_digits"""

    def test_default_factor(self) -> None:
        """Рабочая точность ≈ 1.5× целевой"""
        assert working_digits(28) == 42
        assert working_digits(100) == 150

    def test_minimum_guard_digits(self) -> None:
        """Для малых точностей действует минимум prec + 5"""
        assert working_digits(4) == 9
        assert working_digits(1) == 6

    def test_custom_settings(self) -> None:
        """Множитель и минимум берутся из настроек"""
        settings = MathSettings(precision_factor=2.0, min_guard_digits=10)
        assert working_digits(28, settings) == 56
        assert working_digits(5, settings) == 15


class TestPrecisionScope:
    """Тесты для precision_scope"""

    def test_elevates_working_precision(self) -> None:
        """Внутри scope текущий контекст имеет рабочую точность"""
        ctx = Context(prec=20)
        with precision_scope(ctx) as work:
            assert work.prec == 30
            assert getcontext().prec == 30

    def test_caller_context_not_mutated(self) -> None:
        """Объект контекста вызывающего кода не изменяется"""
        ctx = Context(prec=20)
        with precision_scope(ctx):
            pass
        assert ctx.prec == 20

    def test_thread_context_restored(self) -> None:
        """Текущий контекст восстанавливается после выхода"""
        before = getcontext().prec
        with precision_scope():
            assert getcontext().prec == working_digits(before)
        assert getcontext().prec == before

    def test_restored_on_exception(self) -> None:
        """Контекст восстанавливается при исключении"""
        before = getcontext().prec
        with pytest.raises(RuntimeError):
            with precision_scope():
                raise RuntimeError("boom")
        assert getcontext().prec == before

    def test_range_traps_released(self) -> None:
        """Внутри scope переполнение → Infinity, деление на 0 → ±Infinity"""
        ctx = Context(prec=20)
        with precision_scope(ctx) as work:
            assert not work.traps[Overflow]
            assert not work.traps[DivisionByZero]
            assert Decimal(10**7).exp() == INFINITY
            assert Decimal(-1) / Decimal(0) == -INFINITY
        assert ctx.traps[Overflow]
        assert ctx.traps[DivisionByZero]
        assert getcontext().traps[Overflow]

    def test_explicit_digits(self) -> None:
        """Явная рабочая точность"""
        with precision_scope(Context(prec=10), digits=77) as work:
            assert work.prec == 77

    def test_caller_context_default(self) -> None:
        """Без явного контекста используется текущий"""
        assert caller_context() is getcontext()
        ctx = Context(prec=7)
        assert caller_context(ctx) is ctx


class TestRoundToContext:
    """Тесты для round_to_context"""

    def test_rounds_to_caller_precision(self) -> None:
        """Результат округляется до точности вызывающего кода"""
        assert round_to_context(Decimal("3.14159265"), Context(prec=3)) == Decimal("3.14")

    def test_negative_zero_preserved(self) -> None:
        """Знак нуля сохраняется"""
        result = round_to_context(Decimal("-0"), Context(prec=5))
        assert result.is_zero()
        assert result.is_signed()

    def test_nan_passes_through(self) -> None:
        """NaN остаётся NaN"""
        assert round_to_context(NAN, Context(prec=5)).is_nan()


# =============================================================================
# ТЕСТЫ КОНВЕРСИИ
# =============================================================================


class TestToDecimal:
    """Тесты для to_decimal"""

    def test_decimal_unchanged(self) -> None:
        """Decimal возвращается как есть"""
        value = Decimal("1.25")
        assert to_decimal(value) is value

    def test_int(self) -> None:
        """Целые (включая большие) конвертируются точно"""
        assert to_decimal(42) == Decimal(42)
        assert to_decimal(2**70) == Decimal(2**70)
        assert to_decimal(-7) == Decimal(-7)

    def test_float_exact_binary_value(self) -> None:
        """float конвертируется в точное двоичное значение"""
        assert to_decimal(0.5) == Decimal("0.5")
        assert to_decimal(0.1) == Decimal(0.1)

    def test_string(self) -> None:
        """Строковый десятичный литерал (пробелы по краям допустимы)"""
        assert to_decimal(" 1.25 ") == Decimal("1.25")
        assert to_decimal("Infinity") == INFINITY
        assert to_decimal("NaN").is_nan()

    def test_bool_rejected(self) -> None:
        """bool не является числом"""
        with pytest.raises(TypeError, match="bool"):
            to_decimal(True)

    def test_unsupported_type_rejected(self) -> None:
        """Неподдерживаемые типы вызывают TypeError"""
        with pytest.raises(TypeError, match="Unsupported numeric type"):
            to_decimal([1, 2])


# =============================================================================
# ТЕСТЫ ПРЕДИКАТОВ
# =============================================================================


class TestPredicates:
    """Тесты для предикатов специальных значений"""

    def test_is_special(self) -> None:
        """NaN и Infinity — специальные значения"""
        assert is_special(NAN)
        assert is_special(INFINITY)
        assert is_special(-INFINITY)
        assert not is_special(Decimal(0))
        assert not is_special(Decimal("1E+999"))

    def test_is_integral(self) -> None:
        """Целые значения независимо от экспоненты"""
        assert is_integral(Decimal("5.000"))
        assert is_integral(Decimal("1E+5"))
        assert is_integral(Decimal("-3"))
        assert not is_integral(Decimal("5.5"))
        assert not is_integral(INFINITY)
        assert not is_integral(NAN)

    def test_copy_sign_with_negative_zero(self) -> None:
        """Знак -0 переносится"""
        assert copy_sign(ONE, Decimal("-0")) == -1
        assert copy_sign(Decimal(-2), Decimal("0")) == 2

    def test_infinity(self) -> None:
        """Знаковая бесконечность"""
        assert infinity() == INFINITY
        assert infinity(negative=True) == -INFINITY


# =============================================================================
# ТЕСТЫ ULP-СРАВНЕНИЙ
# =============================================================================


class TestUlp:
    """Тесты для ulp и is_close_ulp"""

    def test_ulp_follows_precision(self) -> None:
        """ULP для значения порядка 1"""
        assert ulp(Context(prec=28)) == Decimal("1E-27")
        assert ulp(Context(prec=10)) == Decimal("1E-9")

    def test_within_two_ulps(self) -> None:
        """Разность в 1 ULP — равенство"""
        ctx = Context(prec=28)
        assert is_close_ulp(Decimal("1.000000000000000000000000001"), ONE, context=ctx)

    def test_outside_tolerance(self) -> None:
        """Разность в 10 ULP — неравенство"""
        ctx = Context(prec=28)
        assert not is_close_ulp(Decimal("1.00000000000000000000000001"), ONE, context=ctx)

    def test_custom_ulps(self) -> None:
        """Допуск в ULP настраивается"""
        ctx = Context(prec=28)
        assert is_close_ulp(Decimal("1.00000000000000000000000001"), ONE, ulps=10, context=ctx)

    def test_special_values(self) -> None:
        """NaN никогда не равен; бесконечности равны только себе"""
        assert not is_close_ulp(NAN, NAN)
        assert is_close_ulp(INFINITY, INFINITY)
        assert not is_close_ulp(INFINITY, ONE)
        assert not is_close_ulp(ONE, Decimal(0))


# =============================================================================
# ТЕСТЫ HYPOT
# =============================================================================


class TestHypot:
    """Тесты для hypot"""

    def test_pythagorean_triple(self) -> None:
        """hypot(3, 4) == 5 точно"""
        assert hypot(Decimal(3), Decimal(4)) == 5

    def test_zero_component(self) -> None:
        """Нулевая компонента → модуль другой"""
        assert hypot(Decimal(0), Decimal(-5)) == 5
        assert hypot(Decimal("-2.5"), Decimal(0)) == Decimal("2.5")

    def test_infinity_dominates_nan(self) -> None:
        """Infinity доминирует над NaN"""
        assert hypot(INFINITY, NAN) == INFINITY
        assert hypot(NAN, -INFINITY) == INFINITY

    def test_nan_propagates(self) -> None:
        """NaN без бесконечности → NaN"""
        assert hypot(NAN, ONE).is_nan()


class TestSeriesConvergenceError:
    """Тесты для SeriesConvergenceError"""

    def test_is_arithmetic_error(self) -> None:
        """Ошибка сходимости — ArithmeticError с контекстом"""
        error = SeriesConvergenceError("sin/cos", 1000, 42)
        assert isinstance(error, ArithmeticError)
        assert error.series == "sin/cos"
        assert error.iterations == 1000
        assert error.precision == 42
        assert "did not converge" in str(error)
