"""
Domain models and value objects.

Contains the angle enums, DD/DM/DMS value records, error taxonomy and constants.
"""

from geoangles.core.domain.angles import (
    AngleAxis,
    DecimalDegrees,
    DegreesMinutes,
    DegreesMinutesSeconds,
    Hemisphere,
)
from geoangles.core.domain.constants import (
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
)
from geoangles.core.domain.errors import (
    AxisRangeError,
    CoordinateError,
    InvalidNumberError,
    MinutesRangeError,
    SecondsRangeError,
    UnrecognizedFormatError,
    UnsupportedInputError,
)

__all__ = [
    # Angle models
    "AngleAxis",
    "Hemisphere",
    "DecimalDegrees",
    "DegreesMinutes",
    "DegreesMinutesSeconds",
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
    # Errors
    "CoordinateError",
    "InvalidNumberError",
    "UnsupportedInputError",
    "UnrecognizedFormatError",
    "MinutesRangeError",
    "SecondsRangeError",
    "AxisRangeError",
]
