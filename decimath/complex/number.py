"""
Complex Number — Неизменяемое комплексное число над любым RealOps типом

Complex[T] хранит пару (re, im) одного вещественного типа T и выполняет
всю арифметику через RealOps этого типа:
- Decimal (по умолчанию для int / str / Decimal компонент)
- float
- любой тип, зарегистрированный через register_real_ops

ИНВАРИАНТЫ:
1. Значение неизменяемо (операции возвращают новые объекты)
2. Обе компоненты имеют один тип (смешение Decimal и float → TypeError)
3. abs = hypot(re, im), arg = atan2(im, re) ∈ (−π, π]
4. conj меняет знак только im; z.i == Complex(−im, re)
5. Равенство покомпонентное; Complex(x, 0) == x для вещественного x

ФОРМУЛЫ ДЕЛЕНИЯ (без промежуточного переполнения):
    |c| ≥ |d|:  r = d/c, den = c + d·r,  (a + b·r)/den + i(b − a·r)/den
    |c| < |d|:  r = c/d, den = c·r + d,  (a·r + b)/den + i(b·r − a)/den
"""

from decimal import Decimal
from typing import Any

from decimath.core.math.real_ops import RealOps, real_ops_for


def _scalar_ops(value: Any) -> RealOps | None:
    """RealOps для компоненты, задающей тип (None для int / str / None)"""
    if value is None:
        return None
    if isinstance(value, bool):
        raise TypeError("bool is not a real number value")
    if isinstance(value, (int, str)):
        return None
    return real_ops_for(value)


def _coerce(value: Any, ops: RealOps):
    """Приведение компоненты к типу ops.kind"""
    if isinstance(value, bool):
        raise TypeError("bool is not a real number value")
    if isinstance(value, int):
        return ops.from_int(value)
    if isinstance(value, str):
        return ops.from_str(value.strip())
    if isinstance(value, ops.kind):
        return value
    raise TypeError(
        f"Cannot mix {type(value).__name__} with {ops.kind.__name__} components"
    )


class Complex:
    """
    Комплексное число re + im·i.

    Args:
        re: Вещественная часть, Complex или строковый литерал ("3-4i")
        im: Мнимая часть (default: 0 того же типа)
        ops: Явная реализация RealOps (например, DecimalOps с контекстом)

    Raises:
        TypeError: Смешение типов компонент или неподдерживаемый тип
        ValueError: Некорректный строковый литерал

    Examples:
        >>> Complex(3, 4).abs
        Decimal('5')
        >>> Complex("3-4i") == Complex(3, -4)
        True
    """

    __slots__ = ("_re", "_im", "_ops")

    def __init__(self, re: Any = 0, im: Any = None, *, ops: RealOps | None = None):
        if im is None and isinstance(re, Complex):
            self._init(re._re, re._im, ops or re._ops)
            return
        if im is None and isinstance(re, str):
            from decimath.complex.parsing import parse_complex

            parsed = parse_complex(re, ops=ops)
            self._init(parsed._re, parsed._im, parsed._ops)
            return

        if ops is None:
            found = [o for o in (_scalar_ops(re), _scalar_ops(im)) if o is not None]
            if len({o.kind for o in found}) > 1:
                raise TypeError(
                    f"Cannot mix {type(re).__name__} and {type(im).__name__} components"
                )
            ops = found[0] if found else real_ops_for(Decimal)

        re_value = _coerce(re, ops)
        im_value = ops.zero() if im is None else _coerce(im, ops)
        self._init(re_value, im_value, ops)

    def _init(self, re, im, ops: RealOps) -> None:
        object.__setattr__(self, "_re", re)
        object.__setattr__(self, "_im", im)
        object.__setattr__(self, "_ops", ops)

    @classmethod
    def _new(cls, re, im, ops: RealOps) -> "Complex":
        """Конструирование из уже приведённых компонент"""
        obj = object.__new__(cls)
        obj._init(re, im, ops)
        return obj

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Complex is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Complex is immutable")

    @classmethod
    def from_polar(cls, abs: Any, arg: Any, *, ops: RealOps | None = None) -> "Complex":
        """
        Комплексное число по модулю и аргументу (радианы).

        Examples:
            >>> Complex.from_polar(2, 0)
            Complex(Decimal('2'), Decimal('0'))
        """
        # Приведение обеих величин к общему вещественному типу
        pair = cls(abs, arg, ops=ops)
        ops = pair._ops
        r, theta = pair._re, pair._im
        return cls._new(ops.mul(r, ops.cos(theta)), ops.mul(r, ops.sin(theta)), ops)

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def real(self):
        return self._re

    @property
    def imag(self):
        return self._im

    @property
    def ops(self) -> RealOps:
        """Реализация RealOps компонент"""
        return self._ops

    @property
    def abs(self):
        """Модуль hypot(re, im)"""
        return self._ops.hypot(self._re, self._im)

    @property
    def arg(self):
        """Аргумент atan2(im, re) в (−π, π]"""
        return self._ops.atan2(self._im, self._re)

    @property
    def norm(self):
        """Норма (совпадает с модулем: hypot(re, im))"""
        return self._ops.hypot(self._re, self._im)

    @property
    def conj(self) -> "Complex":
        return Complex._new(self._re, self._ops.neg(self._im), self._ops)

    @property
    def proj(self) -> "Complex":
        """Проекция на сферу Римана: бесконечности → (+Infinity, ±0)"""
        ops = self._ops
        if ops.is_finite(self._re) and ops.is_finite(self._im):
            return self
        zero = ops.zero()
        return Complex._new(
            ops.infinity(),
            ops.neg(zero) if ops.is_negative(self._im) else zero,
            ops,
        )

    @property
    def i(self) -> "Complex":
        """z · i"""
        return Complex._new(self._ops.neg(self._im), self._re, self._ops)

    def as_tuple(self) -> tuple[Any, Any]:
        return self._re, self._im

    def with_abs(self, r: Any) -> "Complex":
        """То же направление с модулем r (аргумент 0 для нулевого z)"""
        ops = self._ops
        r = _coerce(r, ops)
        magnitude = self.abs
        if ops.is_zero(magnitude):
            return Complex._new(r, ops.zero(), ops)
        factor = ops.div(r, magnitude)
        return Complex._new(ops.mul(self._re, factor), ops.mul(self._im, factor), ops)

    def with_arg(self, theta: Any) -> "Complex":
        """Тот же модуль с аргументом theta (радианы)"""
        return Complex.from_polar(self.abs, _coerce(theta, self._ops), ops=self._ops)

    # =========================================================================
    # APPROXIMATE EQUALITY
    # =========================================================================

    def is_close(self, other: Any) -> bool:
        """
        Приближённое равенство (=~).

        Точное равенство либо относительная разность модулей в пределах
        двух единиц последнего разряда активной точности.
        """
        rhs = self._lift(other)
        if rhs is NotImplemented:
            raise TypeError(f"Cannot compare Complex with {type(other).__name__}")
        if self == rhs:
            return True

        ops = self._ops
        lhs_abs, rhs_abs = self.abs, rhs.abs
        if ops.is_nan(lhs_abs) or ops.is_nan(rhs_abs):
            return False
        if lhs_abs == rhs_abs:
            return True
        if ops.is_special(lhs_abs) or ops.is_special(rhs_abs) or ops.is_zero(rhs_abs):
            return False

        relative = ops.abs(ops.div(ops.sub(rhs_abs, lhs_abs), rhs_abs))
        tolerance = ops.mul(ops.from_int(2), ops.epsilon())
        return ops.compare(relative, tolerance) <= 0

    def not_close(self, other: Any) -> bool:
        """Отрицание is_close (!~)"""
        return not self.is_close(other)

    # =========================================================================
    # ARITHMETIC
    # =========================================================================

    def _lift(self, other: Any) -> "Complex":
        """Второй операнд как Complex того же типа (или NotImplemented)"""
        if isinstance(other, Complex):
            if other._ops.kind is not self._ops.kind:
                raise TypeError(
                    f"Cannot mix Complex[{self._ops.kind.__name__}] with "
                    f"Complex[{other._ops.kind.__name__}]"
                )
            return other
        if isinstance(other, bool) or isinstance(other, str):
            return NotImplemented
        if isinstance(other, int) or isinstance(other, self._ops.kind):
            return Complex._new(_coerce(other, self._ops), self._ops.zero(), self._ops)
        return NotImplemented

    def __add__(self, other: Any) -> "Complex":
        rhs = self._lift(other)
        if rhs is NotImplemented:
            return NotImplemented
        ops = self._ops
        return Complex._new(ops.add(self._re, rhs._re), ops.add(self._im, rhs._im), ops)

    def __radd__(self, other: Any) -> "Complex":
        return self.__add__(other)

    def __sub__(self, other: Any) -> "Complex":
        rhs = self._lift(other)
        if rhs is NotImplemented:
            return NotImplemented
        ops = self._ops
        return Complex._new(ops.sub(self._re, rhs._re), ops.sub(self._im, rhs._im), ops)

    def __rsub__(self, other: Any) -> "Complex":
        lhs = self._lift(other)
        if lhs is NotImplemented:
            return NotImplemented
        return lhs.__sub__(self)

    def __mul__(self, other: Any) -> "Complex":
        rhs = self._lift(other)
        if rhs is NotImplemented:
            return NotImplemented
        ops = self._ops
        a, b, c, d = self._re, self._im, rhs._re, rhs._im
        return Complex._new(
            ops.sub(ops.mul(a, c), ops.mul(b, d)),
            ops.add(ops.mul(a, d), ops.mul(b, c)),
            ops,
        )

    def __rmul__(self, other: Any) -> "Complex":
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> "Complex":
        rhs = self._lift(other)
        if rhs is NotImplemented:
            return NotImplemented

        ops = self._ops
        a, b, c, d = self._re, self._im, rhs._re, rhs._im
        if any(ops.is_nan(v) for v in (a, b, c, d)):
            return Complex._new(ops.nan(), ops.nan(), ops)

        if ops.compare(ops.abs(c), ops.abs(d)) >= 0:
            r = ops.div(d, c)
            den = ops.add(c, ops.mul(d, r))
            return Complex._new(
                ops.div(ops.add(a, ops.mul(b, r)), den),
                ops.div(ops.sub(b, ops.mul(a, r)), den),
                ops,
            )

        r = ops.div(c, d)
        den = ops.add(ops.mul(c, r), d)
        return Complex._new(
            ops.div(ops.add(ops.mul(a, r), b), den),
            ops.div(ops.sub(ops.mul(b, r), a), den),
            ops,
        )

    def __rtruediv__(self, other: Any) -> "Complex":
        lhs = self._lift(other)
        if lhs is NotImplemented:
            return NotImplemented
        return lhs.__truediv__(self)

    def __pow__(self, other: Any) -> "Complex":
        from decimath.complex.functions import pow as complex_pow

        if self._lift(other) is NotImplemented:
            return NotImplemented
        return complex_pow(self, other)

    def __rpow__(self, other: Any) -> "Complex":
        from decimath.complex.functions import pow as complex_pow

        lhs = self._lift(other)
        if lhs is NotImplemented:
            return NotImplemented
        return complex_pow(lhs, self)

    def __neg__(self) -> "Complex":
        ops = self._ops
        return Complex._new(ops.neg(self._re), ops.neg(self._im), ops)

    def __pos__(self) -> "Complex":
        return self

    def __abs__(self):
        return self.abs

    def __bool__(self) -> bool:
        return not (self._ops.is_zero(self._re) and self._ops.is_zero(self._im))

    # =========================================================================
    # EQUALITY & REPRESENTATION
    # =========================================================================

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Complex):
            return self._re == other._re and self._im == other._im
        if isinstance(other, bool) or isinstance(other, str):
            return NotImplemented
        if isinstance(other, (int, self._ops.kind)):
            return self._re == other and self._ops.is_zero(self._im)
        return NotImplemented

    def __hash__(self) -> int:
        if self._ops.is_zero(self._im):
            return hash(self._re)
        return hash((self._re, self._im))

    def __str__(self) -> str:
        from decimath.complex.parsing import format_complex

        return format_complex(self)

    def __repr__(self) -> str:
        return f"Complex({self._re!r}, {self._im!r})"
