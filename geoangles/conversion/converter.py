"""
Converter — Конверсия DD ↔ DM/DMS

Чистые числовые преобразования между десятичными градусами и форматами
градусы-минуты / градусы-минуты-секунды, для одиночных значений и пар.

ПРАВИЛА ПЕРЕНОСА (ROLLOVER):
1. DD → DM: если минуты после округления >= 60, градусы сдвигаются на 1
   от нуля, минуты обнуляются, полушарие вычисляется заново из сдвинутого
   знакового значения.
2. DD → DMS: секунды >= 60 переносятся в минуты, минуты >= 60 в модуль
   градусов. Полушарие берётся из исходного значения и не пересчитывается.

Асимметрия между 1 и 2 намеренная и покрыта тестами.

DM/DMS → DD никогда не выполняет clamp: значение вне диапазона оси → AxisRangeError.
"""

import logging
import math

from geoangles.conversion.options import ConversionOptions
from geoangles.core.domain.angles import (
    DecimalDegrees,
    DegreesMinutes,
    DegreesMinutesSeconds,
)
from geoangles.core.domain.constants import (
    DEFAULT_DM_DECIMALS,
    DEFAULT_DMS_DECIMALS,
    MAX_MINUTES,
    MAX_SECONDS,
    MINUTES_PER_DEGREE,
    SECONDS_PER_DEGREE,
    SECONDS_PER_MINUTE,
)
from geoangles.core.domain.errors import MinutesRangeError, SecondsRangeError
from geoangles.core.math.angle_guards import (
    apply_hemisphere_sign,
    assert_in_range,
    clamp_to_axis_range,
    hemisphere_from_sign,
)
from geoangles.core.math.numerical_safeguards import round_to_decimals, split_whole_fraction

logger = logging.getLogger(__name__)


def _source_degrees(dd: DecimalDegrees, options: ConversionOptions) -> float:
    """Исходные градусы с учётом опции clamp."""
    if not options.clamp:
        return dd.degrees

    clamped = clamp_to_axis_range(dd.axis, dd.degrees)
    if clamped != dd.degrees:
        logger.debug("Clamped %s degrees %s to %s", dd.axis.value, dd.degrees, clamped)
    return clamped


# =============================================================================
# DD → DM / DMS
# =============================================================================


def dd_to_dm(dd: DecimalDegrees, options: ConversionOptions | None = None) -> DegreesMinutes:
    """
    Конверсия Decimal Degrees → Degrees-Minutes.

    Args:
        dd: Десятичные градусы
        options: decimals (точность минут, default 2) и clamp (default False)

    Returns:
        DegreesMinutes с модулем градусов, минутами и полушарием

    Examples:
        >>> dm = dd_to_dm(DecimalDegrees(axis=AngleAxis.LATITUDE, degrees=45.999))
        >>> dm.degrees, dm.minutes, dm.hemisphere.value
        (45, 59.94, 'N')
        >>> dm = dd_to_dm(DecimalDegrees(axis=AngleAxis.LATITUDE, degrees=45.99999))
        >>> dm.degrees, dm.minutes
        (46, 0.0)
    """
    options = options or ConversionOptions()
    decimals = options.resolve_decimals(DEFAULT_DM_DECIMALS)
    degrees = _source_degrees(dd, options)

    deg_int, frac = split_whole_fraction(degrees)
    minutes = round_to_decimals(frac * MINUTES_PER_DEGREE, decimals)

    if minutes >= MAX_MINUTES:
        rolled = deg_int + 1 if deg_int >= 0 else deg_int - 1
        logger.debug("Minutes rolled over: %s -> %d° 0'", degrees, rolled)
        return DegreesMinutes(
            axis=dd.axis,
            degrees=abs(rolled),
            minutes=0.0,
            hemisphere=hemisphere_from_sign(dd.axis, rolled),
        )

    return DegreesMinutes(
        axis=dd.axis,
        degrees=abs(deg_int),
        minutes=minutes,
        hemisphere=hemisphere_from_sign(dd.axis, degrees),
    )


def dd_to_dms(
    dd: DecimalDegrees, options: ConversionOptions | None = None
) -> DegreesMinutesSeconds:
    """
    Конверсия Decimal Degrees → Degrees-Minutes-Seconds.

    Минуты усекаются (floor), округляются только секунды.

    Args:
        dd: Десятичные градусы
        options: decimals (точность секунд, default 2) и clamp (default False)

    Returns:
        DegreesMinutesSeconds с модулем градусов, минутами, секундами и полушарием
    """
    options = options or ConversionOptions()
    decimals = options.resolve_decimals(DEFAULT_DMS_DECIMALS)
    degrees = _source_degrees(dd, options)

    deg_int, frac = split_whole_fraction(degrees)
    minutes = math.floor(frac * MINUTES_PER_DEGREE)
    seconds = round_to_decimals(
        frac * SECONDS_PER_DEGREE - minutes * SECONDS_PER_MINUTE, decimals
    )
    degrees_abs = abs(deg_int)

    if seconds >= MAX_SECONDS:
        seconds = 0.0
        minutes += 1
    if minutes >= MAX_MINUTES:
        minutes = 0
        degrees_abs += 1
        logger.debug("Minutes rolled over: %s -> %d° 0'", degrees, degrees_abs)

    # Полушарие из исходного значения, перенос его не меняет
    return DegreesMinutesSeconds(
        axis=dd.axis,
        degrees=degrees_abs,
        minutes=minutes,
        seconds=seconds,
        hemisphere=hemisphere_from_sign(dd.axis, degrees),
    )


# =============================================================================
# DM / DMS → DD
# =============================================================================


def dm_to_dd(dm: DegreesMinutes) -> DecimalDegrees:
    """
    Конверсия Degrees-Minutes → Decimal Degrees.

    Отрицательные degrees дают отрицательный результат, но полушарие,
    если задано, всегда определяет итоговый знак.

    Raises:
        MinutesRangeError: Если минуты вне [0, 60)
        AxisRangeError: Если результат вне диапазона оси
    """
    if dm.minutes < 0 or dm.minutes >= MAX_MINUTES:
        raise MinutesRangeError(dm.minutes)

    base = abs(dm.degrees) + dm.minutes / MINUTES_PER_DEGREE
    signed = apply_hemisphere_sign(-base if dm.degrees < 0 else base, dm.hemisphere)
    assert_in_range(dm.axis, signed)
    return DecimalDegrees(axis=dm.axis, degrees=signed)


def dms_to_dd(dms: DegreesMinutesSeconds) -> DecimalDegrees:
    """
    Конверсия Degrees-Minutes-Seconds → Decimal Degrees.

    Правила знака те же, что и в dm_to_dd.

    Raises:
        MinutesRangeError: Если минуты вне [0, 60)
        SecondsRangeError: Если секунды вне [0, 60)
        AxisRangeError: Если результат вне диапазона оси
    """
    if dms.minutes < 0 or dms.minutes >= MAX_MINUTES:
        raise MinutesRangeError(dms.minutes)
    if dms.seconds < 0 or dms.seconds >= MAX_SECONDS:
        raise SecondsRangeError(dms.seconds)

    base = (
        abs(dms.degrees)
        + dms.minutes / MINUTES_PER_DEGREE
        + dms.seconds / SECONDS_PER_DEGREE
    )
    signed = apply_hemisphere_sign(-base if dms.degrees < 0 else base, dms.hemisphere)
    assert_in_range(dms.axis, signed)
    return DecimalDegrees(axis=dms.axis, degrees=signed)


# =============================================================================
# PAIR VARIANTS
# =============================================================================


def dd_pair_to_dm(
    lat_dd: DecimalDegrees,
    lon_dd: DecimalDegrees,
    options: ConversionOptions | None = None,
) -> tuple[DegreesMinutes, DegreesMinutes]:
    """Конверсия пары (широта, долгота) DD → DM."""
    return dd_to_dm(lat_dd, options), dd_to_dm(lon_dd, options)


def dd_pair_to_dms(
    lat_dd: DecimalDegrees,
    lon_dd: DecimalDegrees,
    options: ConversionOptions | None = None,
) -> tuple[DegreesMinutesSeconds, DegreesMinutesSeconds]:
    """Конверсия пары (широта, долгота) DD → DMS."""
    return dd_to_dms(lat_dd, options), dd_to_dms(lon_dd, options)


def dm_pair_to_dd(
    lat_dm: DegreesMinutes, lon_dm: DegreesMinutes
) -> tuple[DecimalDegrees, DecimalDegrees]:
    """Конверсия пары (широта, долгота) DM → DD."""
    return dm_to_dd(lat_dm), dm_to_dd(lon_dm)


def dms_pair_to_dd(
    lat_dms: DegreesMinutesSeconds, lon_dms: DegreesMinutesSeconds
) -> tuple[DecimalDegrees, DecimalDegrees]:
    """Конверсия пары (широта, долгота) DMS → DD."""
    return dms_to_dd(lat_dms), dms_to_dd(lon_dms)
