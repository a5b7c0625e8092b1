"""
Complex Parsing — Строковый литерал комплексного числа и обратное форматирование

ГРАММАТИКА (после удаления пробелов и приведения к нижнему регистру):
    literal   := [sign] real [imag] | [sign] imag | ""
    imag      := sign [digits] "i"
    sign      := "+" | "-"

Мнимая часть начинается с первого знака "+"/"-", который не следует за
маркером экспоненты "e" (поэтому "1e-5-2i" делится на 1e-5 и -2i).
Одиночные "i", "+i", "-i" дают коэффициент 1, 1, -1. Пустая строка — 0.

Форматирование — синтаксическая обратная операция:
- нулевая вещественная часть опускается (если есть мнимая)
- нулевая мнимая часть опускается
- коэффициент ±1 сворачивается в "+i" / "-i"

Examples:
    >>> format_complex(parse_complex("3 - 4I"))
    '3-4i'
"""

from decimal import Decimal
from typing import Final

from decimath.complex.number import Complex
from decimath.core.math.real_ops import RealOps, real_ops_for

# Маркер мнимой единицы
IMAGINARY_MARKER: Final[str] = "i"

# Маркер экспоненты в научной записи
EXPONENT_MARKER: Final[str] = "e"

SIGNS: Final[str] = "+-"


def _imaginary_start(text: str) -> int | None:
    """Индекс первого знака, не являющегося знаком экспоненты"""
    for index, char in enumerate(text):
        if char in SIGNS and (index == 0 or text[index - 1] != EXPONENT_MARKER):
            return index
    return None


def split_complex_literal(text: str) -> tuple[str, str | None]:
    """
    Разбиение литерала на вещественную часть и коэффициент мнимой.

    Args:
        text: Исходная строка

    Returns:
        (real_text, imag_text): real_text может быть пустым; imag_text — None,
        если мнимой части нет

    Raises:
        ValueError: Если мнимая часть не оканчивается на "i"

    Examples:
        >>> split_complex_literal("1e-5-2i")
        ('1e-5', '-2')
        >>> split_complex_literal("-i")
        ('', '-1')
    """
    s = text.replace(" ", "").lower()
    if not s:
        return "", None

    sign = ""
    if s[0] in SIGNS:
        sign, s = s[0], s[1:]

    split = _imaginary_start(s)
    if split is not None:
        real_text, imag_text = sign + s[:split], s[split:]
    elif s.endswith(IMAGINARY_MARKER):
        real_text, imag_text = "", sign + s
    else:
        return sign + s, None

    if not imag_text.endswith(IMAGINARY_MARKER):
        raise ValueError(f"Invalid complex literal: {text!r} (imaginary part must end with 'i')")

    coefficient = imag_text[: -len(IMAGINARY_MARKER)]
    if coefficient in ("", "+", "-"):
        coefficient += "1"
    return real_text, coefficient


def parse_complex(text: str, *, ops: RealOps | None = None) -> Complex:
    """
    Комплексное число из строкового литерала.

    Args:
        text: Литерал ("3-4i", "2.5", "-i", "1e-5+2i", "")
        ops: Вещественный тип компонент (default: Decimal)

    Returns:
        Complex

    Raises:
        ValueError: Некорректный литерал
    """
    ops = ops or real_ops_for(Decimal)
    real_text, imag_text = split_complex_literal(text)

    try:
        re = ops.from_str(real_text) if real_text else ops.zero()
        im = ops.from_str(imag_text) if imag_text is not None else ops.zero()
    except ValueError as exc:
        raise ValueError(f"Invalid complex literal: {text!r}") from exc

    return Complex(re, im, ops=ops)


def format_complex(z: Complex) -> str:
    """
    Строковая форма комплексного числа (обратная parse_complex).

    Examples:
        >>> format_complex(Complex(3, -4))
        '3-4i'
        >>> format_complex(Complex(0, -1))
        '-i'
        >>> format_complex(Complex(0, 0))
        '0'
    """
    ops = z.ops
    re, im = z.real, z.imag

    if ops.is_zero(im):
        imag = ""
    else:
        unit = not ops.is_nan(im) and ops.abs(im) == ops.one()
        if ops.is_negative(im):
            imag = "-i" if unit else f"{im}i"
        else:
            imag = "+i" if unit else f"+{im}i"

    if ops.is_zero(re) and imag:
        return imag.removeprefix("+")
    return f"{re}{imag}"
