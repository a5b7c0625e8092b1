"""
Complex Functions — Трансцендентные функции комплексного аргумента

Все функции обобщены по вещественному типу через RealOps аргумента и
принимают Complex или вещественное значение (int / Decimal / float).

ЭКСПОНЕНЦИАЛЬНАЯ ФОРМА:
    exp(z) = e^re · (cos im + i·sin im)
    ln(z)  = ln|z| + i·arg z
    pow(b, p) = exp(ln(b) · p),  целые вещественные p — через ipow

ТРИГОНОМЕТРИЯ (тождество Эйлера):
    cos(z) = (e^(iz) + e^(−iz)) / 2
    sin(z) = −i(e^(iz) − e^(−iz)) / 2
    tan(z) = sin(z) / cos(z)

ОБРАТНЫЕ ФУНКЦИИ:
    atan(z)  = i(ln(1 − iz) − ln(1 + iz)) / 2
    asin(z)  = −i·ln(iz + √(1 − z²))
    acos(z)  = −i·ln(z + i√(1 − z²))
    asinh(z) = ln(z + √(z² + 1))
    acosh(z) = ln(z + √(z² − 1))
    atanh(z) = ln((1 + z) / (1 − z)) / 2
"""

from typing import Any

from decimath.complex.number import Complex


def _as_complex(value: Any, like: Complex | None = None) -> Complex:
    """Complex из значения; вещественный тип берётся из like, если задан"""
    if isinstance(value, Complex):
        return value
    return Complex(value, ops=like.ops if like is not None else None)


def _const(z: Complex, value: int) -> Complex:
    """Целая константа того же вещественного типа, что и z"""
    return Complex(value, ops=z.ops)


def _nan(z: Complex) -> Complex:
    ops = z.ops
    return Complex(ops.nan(), ops.nan(), ops=ops)


# =============================================================================
# EXP / LOG / POW
# =============================================================================


def exp(z: Any) -> Complex:
    """
    e^z.

    Examples:
        >>> exp(Complex(0))
        Complex(Decimal('1'), Decimal('0'))
    """
    z = _as_complex(z)
    ops = z.ops
    magnitude = ops.exp(z.real)
    return Complex(
        ops.mul(magnitude, ops.cos(z.imag)),
        ops.mul(magnitude, ops.sin(z.imag)),
        ops=ops,
    )


def ln(z: Any) -> Complex:
    """Главное значение натурального логарифма: ln|z| + i·arg z"""
    z = _as_complex(z)
    return Complex(z.ops.ln(z.abs), z.arg, ops=z.ops)


def log10(z: Any) -> Complex:
    """Десятичный логарифм ln(z) / ln(10)"""
    z = _as_complex(z)
    ops = z.ops
    return ln(z) / ops.ln(ops.from_int(10))


def ipow(z: Any, n: Any) -> Complex:
    """
    z^n для целого вещественного n возведением в квадрат и умножением.

    Для вещественного z используется вещественная степень движка.
    Отрицательная степень обращается после возведения.

    Args:
        z: Основание
        n: Целый показатель (int или целое значение вещественного типа)

    Returns:
        z^n

    Examples:
        >>> ipow(Complex(1, 2), 2)
        Complex(Decimal('-3'), Decimal('4'))
    """
    z = _as_complex(z)
    ops = z.ops
    exponent = int(n)

    if ops.is_zero(z.imag):
        return Complex(ops.pow(z.real, ops.from_int(exponent)), ops=ops)

    result = _const(z, 1)
    base = z
    remaining = abs(exponent)
    while True:
        if remaining & 1:
            result = result * base
        remaining >>= 1
        if remaining == 0:
            break
        base = base * base

    if exponent < 0:
        return _const(z, 1) / result
    return result


def pow(b: Any, p: Any) -> Complex:
    """
    Комплексная степень b^p (главное значение).

    Правила:
    - p == 0 → 1 (в том числе 0^0 = 1)
    - b == 0: 0 при re(p) > 0; Infinity при вещественном p < 0; иначе NaN
    - вещественный целый p → ipow
    - иначе exp(ln(b) · p)

    Examples:
        >>> pow(0, 0)
        Complex(Decimal('1'), Decimal('0'))
        >>> pow(0, 2)
        Complex(Decimal('0'), Decimal('0'))
    """
    b = _as_complex(b)
    p = _as_complex(p, like=b)
    ops = b.ops
    if p.ops.kind is not ops.kind:
        raise TypeError(
            f"Cannot raise Complex[{ops.kind.__name__}] to Complex[{p.ops.kind.__name__}]"
        )

    if any(ops.is_nan(v) for v in (*b.as_tuple(), *p.as_tuple())):
        return _nan(b)

    if not p:
        return _const(b, 1)

    if not b:
        if ops.is_zero(p.imag):
            if ops.is_negative(p.real):
                return Complex(ops.infinity(), ops=ops)
            return _const(b, 0)
        if ops.compare(p.real, ops.zero()) > 0:
            return _const(b, 0)
        return _nan(b)

    if ops.is_zero(p.imag) and ops.is_integer(p.real):
        return ipow(b, p.real)

    return exp(ln(b) * p)


def pow_assign(z: Any, p: Any) -> Complex:
    """
    Именованная форма z **= p.

    Complex неизменяем, поэтому новое значение возвращается:
        z = pow_assign(z, p)
    """
    return pow(z, p)


# =============================================================================
# ROOTS
# =============================================================================


def sqrt(z: Any) -> Complex:
    """
    Главный квадратный корень.

    re = √((re + |z|) / 2),  im = ±√((−re + |z|) / 2) (знак im(z))
    """
    z = _as_complex(z)
    ops = z.ops
    two = ops.from_int(2)
    d = z.abs
    re = ops.sqrt(ops.div(ops.add(z.real, d), two))
    im = ops.sqrt(ops.div(ops.sub(d, z.real), two))
    if ops.is_negative(z.imag):
        im = ops.neg(im)
    return Complex(re, im, ops=ops)


def cbrt(z: Any) -> Complex:
    """
    Главный кубический корень |z|^(1/3) · e^(i·arg/3).

    Для отрицательного вещественного z результат не вещественный:
    cbrt(−8) = 1 + i√3.
    """
    z = _as_complex(z)
    ops = z.ops
    if not z:
        return z
    return Complex.from_polar(ops.cbrt(z.abs), ops.div(z.arg, ops.from_int(3)), ops=ops)


# =============================================================================
# TRIGONOMETRIC
# =============================================================================


def cos(z: Any) -> Complex:
    z = _as_complex(z)
    return (exp(z.i) + exp(-z.i)) / 2


def sin(z: Any) -> Complex:
    z = _as_complex(z)
    return -(exp(z.i) - exp(-z.i)).i / 2


def tan(z: Any) -> Complex:
    z = _as_complex(z)
    ezi, e_zi = exp(z.i), exp(-z.i)
    return (ezi - e_zi) / (ezi + e_zi).i


def atan(z: Any) -> Complex:
    z = _as_complex(z)
    return (ln(1 - z.i) - ln(1 + z.i)).i / 2


def atan2(z: Any, w: Any) -> Complex:
    """atan(z / w)"""
    z = _as_complex(z)
    return atan(z / w)


def asin(z: Any) -> Complex:
    z = _as_complex(z)
    return -ln(z.i + sqrt(1 - z * z)).i


def acos(z: Any) -> Complex:
    """
    Главное значение арккосинуса, re ∈ [0, π].

    acos(−1) == π (ветвь ln(−1) = iπ).
    """
    z = _as_complex(z)
    return -ln(z + sqrt(1 - z * z).i).i


# =============================================================================
# HYPERBOLIC
# =============================================================================


def sinh(z: Any) -> Complex:
    z = _as_complex(z)
    return (exp(z) - exp(-z)) / 2


def cosh(z: Any) -> Complex:
    z = _as_complex(z)
    return (exp(z) + exp(-z)) / 2


def tanh(z: Any) -> Complex:
    z = _as_complex(z)
    ez, e_z = exp(z), exp(-z)
    return (ez - e_z) / (ez + e_z)


def asinh(z: Any) -> Complex:
    z = _as_complex(z)
    return ln(z + sqrt(z * z + 1))


def acosh(z: Any) -> Complex:
    z = _as_complex(z)
    return ln(z + sqrt(z * z - 1))


def atanh(z: Any) -> Complex:
    z = _as_complex(z)
    return ln((1 + z) / (1 - z)) / 2
