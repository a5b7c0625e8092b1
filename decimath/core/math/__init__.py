"""
Core math modules для decimath

Трансцендентные и специальные функции над decimal.Decimal с адаптивной
точностью и гарантией восстановления контекста.
"""

# Numerical Safeguards
from decimath.core.math.numerical_safeguards import (
    # Constants
    HALF,
    INFINITY,
    NAN,
    NEG_INFINITY,
    ONE,
    RANGE_SIGNALS,
    TWO,
    ULP_TOLERANCE_DEFAULT,
    ZERO,
    # Exceptions
    SeriesConvergenceError,
    # Precision scope
    caller_context,
    precision_scope,
    quiet_range,
    round_to_context,
    working_digits,
    # Conversion & predicates
    copy_sign,
    infinity,
    is_integral,
    is_special,
    to_decimal,
    # ULP comparisons
    is_close_ulp,
    ulp,
    # Primitives
    hypot,
)

# Constants (π family)
from decimath.core.math.constants import (
    PI_GUARD_DIGITS,
    half_pi,
    pi,
    pi_digits,
    two_pi,
)

# Angle Reduction
from decimath.core.math.angle_reduction import (
    COS_QUADRANT_VALUES,
    SIN_QUADRANT_VALUES,
    TAN_QUADRANT_VALUES,
    ReducedAngle,
    convert_from_radians,
    reduce_angle,
)

# Series
from decimath.core.math.series import (
    ATAN_REDUCTION_LIMIT,
    SinCos,
    atan_series,
    sin_cos_series,
)

# Trigonometric
from decimath.core.math.trigonometric import (
    acos,
    asin,
    atan,
    atan2,
    cos,
    sin,
    sin_cos,
    tan,
)

# Hyperbolic
from decimath.core.math.hyperbolic import (
    SINH_SERIES_SWITCH,
    TANH_SATURATION,
    acosh,
    asinh,
    atanh,
    cosh,
    expm1,
    ln1p,
    sinh,
    tanh,
    tanh_saturation,
)

# Gamma
from decimath.core.math.gamma import (
    FACTORIAL_DIRECT_LIMIT,
    GAMMA_MAX_ARGUMENT,
    combination,
    factorial,
    gamma,
    permutation,
    spouge_parameter,
)

# Real Ops
from decimath.core.math.real_ops import (
    DecimalOps,
    FloatOps,
    RealOps,
    real_ops_for,
    register_real_ops,
)

__all__ = [
    # Numerical Safeguards — Constants
    "HALF",
    "INFINITY",
    "NAN",
    "NEG_INFINITY",
    "ONE",
    "RANGE_SIGNALS",
    "TWO",
    "ULP_TOLERANCE_DEFAULT",
    "ZERO",
    # Numerical Safeguards — Exceptions
    "SeriesConvergenceError",
    # Numerical Safeguards — Precision scope
    "caller_context",
    "precision_scope",
    "quiet_range",
    "round_to_context",
    "working_digits",
    # Numerical Safeguards — Conversion & predicates
    "copy_sign",
    "infinity",
    "is_integral",
    "is_special",
    "to_decimal",
    # Numerical Safeguards — ULP comparisons
    "is_close_ulp",
    "ulp",
    # Numerical Safeguards — Primitives
    "hypot",
    # Constants
    "PI_GUARD_DIGITS",
    "half_pi",
    "pi",
    "pi_digits",
    "two_pi",
    # Angle Reduction
    "COS_QUADRANT_VALUES",
    "SIN_QUADRANT_VALUES",
    "TAN_QUADRANT_VALUES",
    "ReducedAngle",
    "convert_from_radians",
    "reduce_angle",
    # Series
    "ATAN_REDUCTION_LIMIT",
    "SinCos",
    "atan_series",
    "sin_cos_series",
    # Trigonometric
    "acos",
    "asin",
    "atan",
    "atan2",
    "cos",
    "sin",
    "sin_cos",
    "tan",
    # Hyperbolic — Constants
    "SINH_SERIES_SWITCH",
    "TANH_SATURATION",
    # Hyperbolic — Functions
    "acosh",
    "asinh",
    "atanh",
    "cosh",
    "expm1",
    "ln1p",
    "sinh",
    "tanh",
    "tanh_saturation",
    # Gamma — Constants
    "FACTORIAL_DIRECT_LIMIT",
    "GAMMA_MAX_ARGUMENT",
    # Gamma — Functions
    "combination",
    "factorial",
    "gamma",
    "permutation",
    "spouge_parameter",
    # Real Ops
    "DecimalOps",
    "FloatOps",
    "RealOps",
    "real_ops_for",
    "register_real_ops",
]
