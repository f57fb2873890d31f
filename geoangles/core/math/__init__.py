"""
Core math modules для geoangles

Числовые примитивы и правила знака/диапазона для угловых значений.
"""

# Numerical Safeguards
from geoangles.core.math.numerical_safeguards import (
    clamp,
    is_valid_float,
    quantize_half_up,
    round_to_decimals,
    split_whole_fraction,
)

# Angle Guards
from geoangles.core.math.angle_guards import (
    AXIS_LIMITS_DEG,
    apply_hemisphere_sign,
    assert_in_range,
    axis_limit,
    clamp_to_axis_range,
    coerce_finite,
    hemisphere_from_sign,
)

__all__ = [
    # Numerical Safeguards
    "clamp",
    "is_valid_float",
    "quantize_half_up",
    "round_to_decimals",
    "split_whole_fraction",
    # Angle Guards — Constants
    "AXIS_LIMITS_DEG",
    # Angle Guards — Functions
    "apply_hemisphere_sign",
    "assert_in_range",
    "axis_limit",
    "clamp_to_axis_range",
    "coerce_finite",
    "hemisphere_from_sign",
]
