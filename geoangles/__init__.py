"""
geoangles — конверсия географических углов между DD, DM и DMS

Разбор свободного текста координат в Decimal Degrees, конверсия DD ↔ DM/DMS
с корректным переносом на границах 60 единиц и форматирование для отображения.
"""

from geoangles.conversion import (
    ConversionOptions,
    axis_from_hemisphere,
    dd_pair_to_dm,
    dd_pair_to_dms,
    dd_to_dm,
    dd_to_dms,
    dm_pair_to_dd,
    dm_to_dd,
    dms_pair_to_dd,
    dms_to_dd,
    format_dd,
    format_dd_pair,
    format_dm,
    format_dm_pair,
    format_dms,
    format_dms_pair,
    parse_hemisphere,
    parse_pair_to_dd,
    parse_to_dd,
)
from geoangles.core.domain import (
    DEFAULT_DD_DECIMALS,
    DEFAULT_DM_DECIMALS,
    DEFAULT_DMS_DECIMALS,
    MAX_LATITUDE_DEG,
    MAX_LONGITUDE_DEG,
    MAX_MINUTES,
    MAX_SECONDS,
    MINUTES_PER_DEGREE,
    SECONDS_PER_DEGREE,
    SECONDS_PER_MINUTE,
    AngleAxis,
    AxisRangeError,
    CoordinateError,
    DecimalDegrees,
    DegreesMinutes,
    DegreesMinutesSeconds,
    Hemisphere,
    InvalidNumberError,
    MinutesRangeError,
    SecondsRangeError,
    UnrecognizedFormatError,
    UnsupportedInputError,
)
from geoangles.core.math import (
    apply_hemisphere_sign,
    assert_in_range,
    axis_limit,
    clamp_to_axis_range,
    coerce_finite,
    hemisphere_from_sign,
)

__version__ = "0.1.0"

__all__ = [
    # Types
    "AngleAxis",
    "Hemisphere",
    "DecimalDegrees",
    "DegreesMinutes",
    "DegreesMinutesSeconds",
    "ConversionOptions",
    # Parsing
    "parse_to_dd",
    "parse_pair_to_dd",
    "axis_from_hemisphere",
    "parse_hemisphere",
    # Conversion
    "dd_to_dm",
    "dd_to_dms",
    "dm_to_dd",
    "dms_to_dd",
    "dd_pair_to_dm",
    "dd_pair_to_dms",
    "dm_pair_to_dd",
    "dms_pair_to_dd",
    # Formatting
    "format_dd",
    "format_dm",
    "format_dms",
    "format_dd_pair",
    "format_dm_pair",
    "format_dms_pair",
    # Validation & sign helpers
    "hemisphere_from_sign",
    "apply_hemisphere_sign",
    "clamp_to_axis_range",
    "coerce_finite",
    "assert_in_range",
    "axis_limit",
    # Errors
    "CoordinateError",
    "InvalidNumberError",
    "UnsupportedInputError",
    "UnrecognizedFormatError",
    "MinutesRangeError",
    "SecondsRangeError",
    "AxisRangeError",
    # Constants
    "DEFAULT_DD_DECIMALS",
    "DEFAULT_DM_DECIMALS",
    "DEFAULT_DMS_DECIMALS",
    "MAX_LATITUDE_DEG",
    "MAX_LONGITUDE_DEG",
    "MAX_MINUTES",
    "MAX_SECONDS",
    "MINUTES_PER_DEGREE",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_DEGREE",
]
