"""
Тесты для трансцендентных функций комплексного аргумента

Проверяет:
1. Complex[float] против cmath (главные значения, ветви)
2. Complex[Decimal]: точные значения и тождества
3. Правила степени: 0^0, 0^n, целые и комплексные показатели
4. Главные корни (sqrt, cbrt) и ветвь acos(−1) = π
"""

import cmath
from decimal import Context, Decimal

import pytest

from decimath.complex import Complex, functions
from decimath.core.math.constants import pi
from decimath.core.math.real_ops import DecimalOps

REL = 1e-12


def as_builtin(z: Complex) -> complex:
    return complex(float(z.real), float(z.imag))


# =============================================================================
# COMPLEX[FLOAT] ПРОТИВ CMATH
# =============================================================================


class TestAgainstCmath:
    """Complex[float] совпадает с cmath в главных ветвях"""

    @pytest.mark.parametrize(
        "name",
        [
            "exp",
            "sqrt",
            "sin",
            "cos",
            "tan",
            "sinh",
            "cosh",
            "tanh",
            "asin",
            "acos",
            "atan",
            "asinh",
            "atanh",
        ],
    )
    @pytest.mark.parametrize("value", [complex(0.5, 0.3), complex(-0.4, 0.7), complex(0.2, -1.1)])
    def test_function(self, name: str, value: complex) -> None:
        z = Complex(value.real, value.imag)
        result = getattr(functions, name)(z)
        expected = getattr(cmath, name)(value)
        assert as_builtin(result) == pytest.approx(expected, rel=REL, abs=REL)

    @pytest.mark.parametrize("value", [complex(2.0, 1.0), complex(1.5, -0.5)])
    def test_acosh(self, value: complex) -> None:
        """acosh при Re z > 0"""
        result = functions.acosh(Complex(value.real, value.imag))
        assert as_builtin(result) == pytest.approx(cmath.acosh(value), rel=REL, abs=REL)

    @pytest.mark.parametrize("value", [complex(2.0, 1.0), complex(-3.0, 0.5), complex(0.1, -4.0)])
    def test_logarithms(self, value: complex) -> None:
        z = Complex(value.real, value.imag)
        assert as_builtin(functions.ln(z)) == pytest.approx(cmath.log(value), rel=REL, abs=REL)
        assert as_builtin(functions.log10(z)) == pytest.approx(cmath.log10(value), rel=REL, abs=REL)

    def test_complex_power(self) -> None:
        """(1 + i)^(0.5 + 0.25i)"""
        result = functions.pow(Complex(1.0, 1.0), Complex(0.5, 0.25))
        expected = complex(1, 1) ** complex(0.5, 0.25)
        assert as_builtin(result) == pytest.approx(expected, rel=REL, abs=REL)

    def test_sqrt_negative_real(self) -> None:
        """√(−4) = 2i"""
        assert as_builtin(functions.sqrt(Complex(-4.0, 0.0))) == pytest.approx(2j)

    def test_cbrt_negative_real(self) -> None:
        """Главный кубический корень −8 равен 1 + i√3"""
        result = functions.cbrt(Complex(-8.0, 0.0))
        assert as_builtin(result) == pytest.approx(complex(-8) ** (1 / 3), rel=REL)


# =============================================================================
# COMPLEX[DECIMAL]
# =============================================================================


class TestDecimalFunctions:
    """Complex[Decimal]: точные значения и тождества"""

    def test_exp_zero(self) -> None:
        assert functions.exp(Complex(0)) == Complex(1, 0)

    def test_euler_identity(self) -> None:
        """e^(iπ) ≈ −1"""
        z = functions.exp(Complex(0, pi()))
        assert z.real == -1
        assert abs(z.imag) < Decimal("1e-26")
        assert z.is_close(-1)

    def test_ln_negative_one(self) -> None:
        """ln(−1) = iπ"""
        assert functions.ln(Complex(-1)) == Complex(0, pi())

    def test_log10(self) -> None:
        assert functions.log10(Complex(100)).is_close(2)

    def test_real_argument_accepted(self) -> None:
        """Функции принимают вещественные значения"""
        assert functions.exp(0) == 1
        assert functions.sqrt(Decimal(-4)) == Complex(0, 2)

    def test_sqrt_sign_of_imaginary(self) -> None:
        """√(−3 − 4i) = 1 − 2i"""
        assert functions.sqrt(Complex(-3, -4)) == Complex(1, -2)
        assert functions.sqrt(Complex(-3, 4)) == Complex(1, 2)

    def test_cbrt(self) -> None:
        """∛8 = 2, ∛0 = 0"""
        assert functions.cbrt(Complex(8)) == Complex(2)
        assert functions.cbrt(Complex(0)) == Complex(0)

    def test_sin_matches_real(self) -> None:
        """sin(x + 0i) совпадает с вещественным синусом"""
        from decimath.core.math.trigonometric import sin

        assert functions.sin(Complex(Decimal("0.5"))).is_close(sin(Decimal("0.5")))

    def test_acos_branch(self) -> None:
        """acos(−1) == π, acos(1) == 0"""
        assert functions.acos(Complex(-1)).is_close(pi())
        assert functions.acos(Complex(1)) == 0

    def test_asin_of_sin(self) -> None:
        """asin(sin(z)) ≈ z для z в главной полосе"""
        z = Complex(Decimal("0.3"), Decimal("0.2"))
        result = functions.asin(functions.sin(z))
        assert abs(result.real - z.real) < Decimal("1e-25")
        assert abs(result.imag - z.imag) < Decimal("1e-25")

    def test_atan2(self) -> None:
        """atan2(z, w) = atan(z / w)"""
        z, w = Complex(1, 2), Complex(3, -1)
        assert functions.atan2(z, w) == functions.atan(z / w)

    def test_exp_overflow(self) -> None:
        """e^(1e7 + i): компоненты переполняются в Infinity без исключения"""
        z = functions.exp(Complex(Decimal("1e7"), 1))
        assert z.real == Decimal("Infinity")
        assert z.imag == Decimal("Infinity")

    def test_precision_from_ops(self) -> None:
        """Точность задаётся контекстом RealOps"""
        ctx = Context(prec=50)
        z = Complex(2, ops=DecimalOps(ctx))
        assert functions.sqrt(z).real == ctx.sqrt(Decimal(2))


class TestPower:
    """Правила степени"""

    def test_zero_to_zero(self) -> None:
        """0^0 == 1"""
        assert functions.pow(0, 0) == Complex(1, 0)

    def test_zero_base(self) -> None:
        """0^2 == 0, 0^−1 == Infinity, 0^i → NaN"""
        assert functions.pow(0, 2) == Complex(0, 0)
        assert functions.pow(0, -1).real == Decimal("Infinity")
        assert functions.pow(Complex(0), Complex(0, 1)).real.is_nan()
        assert functions.pow(Complex(0), Complex(2, 1)) == 0

    def test_nan_propagates(self) -> None:
        assert functions.pow(Complex(Decimal("NaN")), 2).real.is_nan()

    def test_integer_exponent(self) -> None:
        """Целые показатели через ipow"""
        assert functions.ipow(Complex(1, 2), 2) == Complex(-3, 4)
        assert functions.ipow(Complex(0, 1), 4) == 1
        assert functions.ipow(Complex(1, 1), -2) == Complex(0, Decimal("-0.5"))
        assert functions.pow(Complex(1, 2), Decimal(3)) == Complex(1, 2) ** 3

    def test_fractional_exponent(self) -> None:
        """2^0.5 ≈ √2"""
        result = functions.pow(Complex(2), Decimal("0.5"))
        assert result.is_close(Decimal(2).sqrt())

    def test_pow_assign(self) -> None:
        z = Complex(1, 2)
        z = functions.pow_assign(z, 2)
        assert z == Complex(-3, 4)

    def test_mixed_kinds_rejected(self) -> None:
        with pytest.raises(TypeError):
            functions.pow(Complex(2), Complex(0.5))
