"""
Real Ops — Контракт вещественного типа для комплексной алгебры

RealOps перечисляет ровно те операции, которые нужны Complex[T]:
- Арифметика: add, sub, mul, div, neg, abs, sqrt, cbrt, pow, exp, ln, log10, hypot
- Тригонометрия: sin, cos, atan2 (радианы)
- Сравнение: compare → -1 / 0 / 1
- Предикаты: is_zero, is_negative, is_integer, is_nan, is_infinite,
  is_special, is_finite
- Конструирование: from_int, from_unsigned, from_str, convert
- Константы: zero, one, nan, infinity, epsilon

Реализации:
- DecimalOps: decimal.Decimal + трансцендентные функции этой библиотеки;
  опционально привязан к явному Context (точность передаётся явно)
- FloatOps: float + модуль math

Доменные нарушения (0/0, √(−1), ln(−1)) дают NaN/Infinity, а не исключения.

Реестр real_ops_for(value) находит реализацию по MRO типа значения.
"""

import math
import sys
from abc import ABC, abstractmethod
from decimal import Context, Decimal, InvalidOperation, localcontext
from typing import Any, ClassVar

from decimath.core.domain.units import AngleUnit
from decimath.core.math import trigonometric
from decimath.core.math.numerical_safeguards import (
    INFINITY,
    NAN,
    NEG_INFINITY,
    ONE,
    ZERO,
    caller_context,
    is_integral,
    precision_scope,
    quiet_range,
    round_to_context,
    to_decimal,
    ulp,
)
from decimath.core.math.numerical_safeguards import hypot as decimal_hypot

# =============================================================================
# КОНТРАКТ
# =============================================================================


class RealOps(ABC):
    """
    Операции вещественного типа T, на которых построена Complex[T].

    Экземпляр не хранит значений: это набор операций над значениями kind.
    """

    kind: ClassVar[type]

    # --- Арифметика ---

    @abstractmethod
    def add(self, a, b): ...

    @abstractmethod
    def sub(self, a, b): ...

    @abstractmethod
    def mul(self, a, b): ...

    @abstractmethod
    def div(self, a, b):
        """a / b; деление на ноль → ±Infinity, 0/0 → NaN"""

    def neg(self, a):
        return -a

    def abs(self, a):
        return abs(a)

    @abstractmethod
    def sqrt(self, a):
        """√a; NaN для a < 0"""

    @abstractmethod
    def cbrt(self, a):
        """Вещественный кубический корень (знак сохраняется)"""

    @abstractmethod
    def pow(self, a, b):
        """a^b; 0^0 = 1; NaN для отрицательного a и нецелого b"""

    @abstractmethod
    def exp(self, a): ...

    @abstractmethod
    def ln(self, a):
        """ln a; −Infinity для 0, NaN для a < 0"""

    @abstractmethod
    def log10(self, a): ...

    @abstractmethod
    def hypot(self, a, b): ...

    # --- Тригонометрия (радианы) ---

    @abstractmethod
    def sin(self, a): ...

    @abstractmethod
    def cos(self, a): ...

    @abstractmethod
    def atan2(self, y, x): ...

    # --- Сравнение и предикаты ---

    @abstractmethod
    def compare(self, a, b) -> int:
        """
        Сравнение a и b.

        Returns:
            -1, 0 или 1

        Raises:
            ValueError: Если a или b — NaN (неупорядочены)
        """

    @abstractmethod
    def is_zero(self, a) -> bool: ...

    @abstractmethod
    def is_negative(self, a) -> bool:
        """Установлен ли знаковый бит (True и для −0)"""

    @abstractmethod
    def is_integer(self, a) -> bool: ...

    @abstractmethod
    def is_nan(self, a) -> bool: ...

    @abstractmethod
    def is_infinite(self, a) -> bool: ...

    def is_special(self, a) -> bool:
        """NaN или Infinity"""
        return self.is_nan(a) or self.is_infinite(a)

    def is_finite(self, a) -> bool:
        return not self.is_special(a)

    # --- Конструирование ---

    @abstractmethod
    def from_int(self, value: int): ...

    def from_unsigned(self, value: int):
        """
        Из беззнакового целого.

        Raises:
            ValueError: Если value < 0
        """
        if value < 0:
            raise ValueError(f"Unsigned value expected, got {value}")
        return self.from_int(value)

    @abstractmethod
    def from_str(self, text: str):
        """
        Из десятичного литерала.

        Raises:
            ValueError: Если text не является литералом числа
        """

    @abstractmethod
    def convert(self, value: Any):
        """Из значения другого поддерживаемого числового типа"""

    # --- Константы ---

    @abstractmethod
    def zero(self): ...

    @abstractmethod
    def one(self): ...

    @abstractmethod
    def nan(self): ...

    @abstractmethod
    def infinity(self, negative: bool = False): ...

    @abstractmethod
    def epsilon(self):
        """Единица последнего разряда для значения порядка 1"""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


# =============================================================================
# DECIMAL
# =============================================================================


class DecimalOps(RealOps):
    """
    RealOps для decimal.Decimal.

    Args:
        context: Явный контекст (точность и округление). None — текущий
            thread-local контекст на момент каждой операции.
    """

    kind: ClassVar[type] = Decimal

    def __init__(self, context: Context | None = None):
        self.context = context

    def _quiet(self) -> Context:
        """Копия контекста без ловушек InvalidOperation, DivisionByZero и Overflow"""
        ctx = quiet_range(caller_context(self.context).copy())
        ctx.traps[InvalidOperation] = False
        return ctx

    def add(self, a: Decimal, b: Decimal) -> Decimal:
        return self._quiet().add(a, b)

    def sub(self, a: Decimal, b: Decimal) -> Decimal:
        return self._quiet().subtract(a, b)

    def mul(self, a: Decimal, b: Decimal) -> Decimal:
        return self._quiet().multiply(a, b)

    def div(self, a: Decimal, b: Decimal) -> Decimal:
        return self._quiet().divide(a, b)

    def neg(self, a: Decimal) -> Decimal:
        return a.copy_negate()

    def abs(self, a: Decimal) -> Decimal:
        return a.copy_abs()

    def sqrt(self, a: Decimal) -> Decimal:
        return self._quiet().sqrt(a)

    def cbrt(self, a: Decimal) -> Decimal:
        if not a.is_finite() or a.is_zero():
            return a

        ctx = caller_context(self.context)
        with precision_scope(ctx):
            magnitude = abs(a)
            root = (magnitude.ln() / 3).exp()
            # Шаг Ньютона: r ← r − (r³ − a) / (3r²)
            root -= (root * root * root - magnitude) / (3 * root * root)
        return round_to_context(root.copy_sign(a), ctx)

    def pow(self, a: Decimal, b: Decimal) -> Decimal:
        if b.is_zero():
            return ONE
        return self._quiet().power(a, b)

    def exp(self, a: Decimal) -> Decimal:
        return self._quiet().exp(a)

    def ln(self, a: Decimal) -> Decimal:
        return self._quiet().ln(a)

    def log10(self, a: Decimal) -> Decimal:
        return self._quiet().log10(a)

    def hypot(self, a: Decimal, b: Decimal) -> Decimal:
        with localcontext(caller_context(self.context)):
            return decimal_hypot(a, b)

    def sin(self, a: Decimal) -> Decimal:
        return trigonometric.sin(a, AngleUnit.RADIANS, context=self._quiet())

    def cos(self, a: Decimal) -> Decimal:
        return trigonometric.cos(a, AngleUnit.RADIANS, context=self._quiet())

    def atan2(self, y: Decimal, x: Decimal) -> Decimal:
        return trigonometric.atan2(y, x, AngleUnit.RADIANS, context=self._quiet())

    def compare(self, a: Decimal, b: Decimal) -> int:
        if a.is_nan() or b.is_nan():
            raise ValueError("NaN is unordered")
        return (a > b) - (a < b)

    def is_zero(self, a: Decimal) -> bool:
        return a.is_zero()

    def is_negative(self, a: Decimal) -> bool:
        return a.is_signed()

    def is_integer(self, a: Decimal) -> bool:
        return is_integral(a)

    def is_nan(self, a: Decimal) -> bool:
        return a.is_nan()

    def is_infinite(self, a: Decimal) -> bool:
        return a.is_infinite()

    def from_int(self, value: int) -> Decimal:
        return Decimal(value)

    def from_str(self, text: str) -> Decimal:
        with localcontext() as ctx:
            ctx.traps[InvalidOperation] = True
            try:
                return Decimal(text)
            except InvalidOperation as exc:
                raise ValueError(f"Invalid decimal literal: {text!r}") from exc

    def convert(self, value: Any) -> Decimal:
        return to_decimal(value)

    def zero(self) -> Decimal:
        return ZERO

    def one(self) -> Decimal:
        return ONE

    def nan(self) -> Decimal:
        return NAN

    def infinity(self, negative: bool = False) -> Decimal:
        return NEG_INFINITY if negative else INFINITY

    def epsilon(self) -> Decimal:
        return ulp(caller_context(self.context))

    def __repr__(self) -> str:
        return f"DecimalOps(context={self.context!r})"


# =============================================================================
# FLOAT
# =============================================================================


class FloatOps(RealOps):
    """RealOps для float (IEEE 754 binary64) поверх модуля math"""

    kind: ClassVar[type] = float

    def add(self, a: float, b: float) -> float:
        return a + b

    def sub(self, a: float, b: float) -> float:
        return a - b

    def mul(self, a: float, b: float) -> float:
        return a * b

    def div(self, a: float, b: float) -> float:
        if b == 0.0:
            if a == 0.0 or math.isnan(a):
                return math.nan
            return math.copysign(math.inf, a) * math.copysign(1.0, b)
        return a / b

    def sqrt(self, a: float) -> float:
        if a < 0.0:
            return math.nan
        return math.sqrt(a)

    def cbrt(self, a: float) -> float:
        return math.cbrt(a)

    def pow(self, a: float, b: float) -> float:
        try:
            return math.pow(a, b)
        except ValueError:
            return math.inf if a == 0.0 else math.nan
        except OverflowError:
            return math.inf

    def exp(self, a: float) -> float:
        try:
            return math.exp(a)
        except OverflowError:
            return math.inf

    def ln(self, a: float) -> float:
        if a == 0.0:
            return -math.inf
        if a < 0.0:
            return math.nan
        return math.log(a)

    def log10(self, a: float) -> float:
        if a == 0.0:
            return -math.inf
        if a < 0.0:
            return math.nan
        return math.log10(a)

    def hypot(self, a: float, b: float) -> float:
        return math.hypot(a, b)

    def sin(self, a: float) -> float:
        return math.sin(a) if math.isfinite(a) else math.nan

    def cos(self, a: float) -> float:
        return math.cos(a) if math.isfinite(a) else math.nan

    def atan2(self, y: float, x: float) -> float:
        return math.atan2(y, x)

    def compare(self, a: float, b: float) -> int:
        if math.isnan(a) or math.isnan(b):
            raise ValueError("NaN is unordered")
        return (a > b) - (a < b)

    def is_zero(self, a: float) -> bool:
        return a == 0.0

    def is_negative(self, a: float) -> bool:
        return math.copysign(1.0, a) < 0.0

    def is_integer(self, a: float) -> bool:
        return math.isfinite(a) and a.is_integer()

    def is_nan(self, a: float) -> bool:
        return math.isnan(a)

    def is_infinite(self, a: float) -> bool:
        return math.isinf(a)

    def from_int(self, value: int) -> float:
        return float(value)

    def from_str(self, text: str) -> float:
        return float(text)

    def convert(self, value: Any) -> float:
        if isinstance(value, bool):
            raise TypeError("bool is not a real number value")
        return float(value)

    def zero(self) -> float:
        return 0.0

    def one(self) -> float:
        return 1.0

    def nan(self) -> float:
        return math.nan

    def infinity(self, negative: bool = False) -> float:
        return -math.inf if negative else math.inf

    def epsilon(self) -> float:
        return sys.float_info.epsilon


# =============================================================================
# РЕЕСТР
# =============================================================================

_REGISTRY: dict[type, RealOps] = {}


def register_real_ops(kind: type, ops: RealOps) -> None:
    """
    Регистрация реализации RealOps для типа kind (и его подклассов).

    Args:
        kind: Вещественный тип
        ops: Реализация контракта
    """
    _REGISTRY[kind] = ops


def real_ops_for(value: Any) -> RealOps:
    """
    Реализация RealOps для значения (или типа) по его MRO.

    Raises:
        TypeError: Если тип не зарегистрирован

    Examples:
        >>> real_ops_for(Decimal(1))
        DecimalOps(context=None)
        >>> real_ops_for(float)
        FloatOps()
    """
    kind = value if isinstance(value, type) else type(value)
    for base in kind.__mro__:
        ops = _REGISTRY.get(base)
        if ops is not None:
            return ops
    raise TypeError(f"No real number operations registered for {kind.__name__}")


register_real_ops(Decimal, DecimalOps())
register_real_ops(float, FloatOps())
