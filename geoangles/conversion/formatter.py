"""
Formatter — Отображение DD/DM/DMS в виде строк

Чистый рендеринг без дополнительной валидации:
- DD:  "48.85440° N"
- DM:  "48° 51.26' N"
- DMS: "48° 51' 15.84\" N"

Градусы (и целые минуты DMS) выводятся без принудительных знаков после запятой;
точность дробной единицы задаётся параметром decimals.
Половина округляется от нуля: 7.125 → "7.13".
"""

from geoangles.core.domain.angles import (
    DecimalDegrees,
    DegreesMinutes,
    DegreesMinutesSeconds,
    Hemisphere,
)
from geoangles.core.domain.constants import (
    DEFAULT_DD_DECIMALS,
    DEFAULT_DM_DECIMALS,
    DEFAULT_DMS_DECIMALS,
)
from geoangles.core.math.angle_guards import hemisphere_from_sign
from geoangles.core.math.numerical_safeguards import quantize_half_up


def _fixed(value: float, decimals: int) -> str:
    return f"{quantize_half_up(value, decimals):f}"


def _resolve_hemisphere(record: DegreesMinutes | DegreesMinutesSeconds) -> Hemisphere:
    """Сохранённое полушарие или выведенное из знака degrees."""
    if record.hemisphere is not None:
        return record.hemisphere
    return hemisphere_from_sign(record.axis, record.degrees)


# =============================================================================
# SINGLE VALUES
# =============================================================================


def format_dd(dd: DecimalDegrees, decimals: int = DEFAULT_DD_DECIMALS) -> str:
    """
    Форматирование Decimal Degrees.

    Examples:
        >>> format_dd(DecimalDegrees(axis=AngleAxis.LATITUDE, degrees=48.8544))
        '48.85440° N'
        >>> format_dd(DecimalDegrees(axis=AngleAxis.LONGITUDE, degrees=-122.4194), 2)
        '122.42° W'
    """
    hemisphere = hemisphere_from_sign(dd.axis, dd.degrees)
    return f"{_fixed(abs(dd.degrees), decimals)}° {hemisphere.value}"


def format_dm(dm: DegreesMinutes, decimals: int = DEFAULT_DM_DECIMALS) -> str:
    """
    Форматирование Degrees-Minutes.

    Examples:
        >>> format_dm(DegreesMinutes(axis=AngleAxis.LATITUDE, degrees=48, minutes=51.264))
        "48° 51.26' N"
    """
    hemisphere = _resolve_hemisphere(dm)
    return f"{abs(dm.degrees)}° {_fixed(dm.minutes, decimals)}' {hemisphere.value}"


def format_dms(dms: DegreesMinutesSeconds, decimals: int = DEFAULT_DMS_DECIMALS) -> str:
    """Форматирование Degrees-Minutes-Seconds: 48° 51' 15.84\" N."""
    hemisphere = _resolve_hemisphere(dms)
    return (
        f"{abs(dms.degrees)}° {dms.minutes}' "
        f"{_fixed(dms.seconds, decimals)}\" {hemisphere.value}"
    )


# =============================================================================
# PAIR VARIANTS
# =============================================================================


def format_dd_pair(
    lat_dd: DecimalDegrees,
    lon_dd: DecimalDegrees,
    decimals: int = DEFAULT_DD_DECIMALS,
) -> tuple[str, str]:
    """Форматирование пары (широта, долгота) DD."""
    return format_dd(lat_dd, decimals), format_dd(lon_dd, decimals)


def format_dm_pair(
    lat_dm: DegreesMinutes,
    lon_dm: DegreesMinutes,
    decimals: int = DEFAULT_DM_DECIMALS,
) -> tuple[str, str]:
    """Форматирование пары (широта, долгота) DM."""
    return format_dm(lat_dm, decimals), format_dm(lon_dm, decimals)


def format_dms_pair(
    lat_dms: DegreesMinutesSeconds,
    lon_dms: DegreesMinutesSeconds,
    decimals: int = DEFAULT_DMS_DECIMALS,
) -> tuple[str, str]:
    """Форматирование пары (широта, долгота) DMS."""
    return format_dms(lat_dms, decimals), format_dms(lon_dms, decimals)
