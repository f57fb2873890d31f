"""
Angle Guards — Валидация и правила знака для угловых значений

Единственный источник правил диапазонов и знака для parser, converter и formatter:
- Вывод полушария из знака значения
- Применение знака полушария к значению
- Ограничение (clamp) и проверка диапазона оси
- Приведение входа к конечному float

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ноль относится к положительному полушарию (N для широты, E для долготы)
2. Если полушарие задано, оно всегда определяет знак (перекрывает числовой знак)
3. Широта: [-90, 90], долгота: [-180, 180]
"""

from typing import Any, Final

from geoangles.core.domain.angles import AngleAxis, Hemisphere
from geoangles.core.domain.constants import MAX_LATITUDE_DEG, MAX_LONGITUDE_DEG
from geoangles.core.domain.errors import AxisRangeError, InvalidNumberError
from geoangles.core.math.numerical_safeguards import clamp, is_valid_float


# Максимальный модуль градусов для каждой оси
AXIS_LIMITS_DEG: Final[dict[AngleAxis, float]] = {
    AngleAxis.LATITUDE: MAX_LATITUDE_DEG,
    AngleAxis.LONGITUDE: MAX_LONGITUDE_DEG,
}


def axis_limit(axis: AngleAxis) -> float:
    """Максимальный модуль градусов для оси (90 или 180)."""
    return AXIS_LIMITS_DEG[axis]


# =============================================================================
# ЗНАК И ПОЛУШАРИЕ
# =============================================================================


def hemisphere_from_sign(axis: AngleAxis, value: float) -> Hemisphere:
    """
    Полушарие по оси и знаку значения.

    Args:
        axis: Ось (широта или долгота)
        value: Знаковое значение

    Returns:
        - Широта: N для value >= 0, S для value < 0
        - Долгота: E для value >= 0, W для value < 0

    Examples:
        >>> hemisphere_from_sign(AngleAxis.LATITUDE, -45.1)
        <Hemisphere.SOUTH: 'S'>
        >>> hemisphere_from_sign(AngleAxis.LONGITUDE, 0.0)
        <Hemisphere.EAST: 'E'>
    """
    if axis == AngleAxis.LATITUDE:
        return Hemisphere.NORTH if value >= 0 else Hemisphere.SOUTH
    return Hemisphere.EAST if value >= 0 else Hemisphere.WEST


def apply_hemisphere_sign(value: float, hemisphere: Hemisphere | None = None) -> float:
    """
    Применение знака полушария к значению.

    Args:
        value: Исходное значение
        hemisphere: Полушарие (optional)

    Returns:
        - hemisphere не задано: value без изменений
        - S/W: -abs(value)
        - N/E: abs(value)
    """
    if hemisphere is None:
        return value
    if hemisphere.is_negative:
        return -abs(value)
    return abs(value)


# =============================================================================
# ДИАПАЗОНЫ
# =============================================================================


def clamp_to_axis_range(axis: AngleAxis, degrees: float) -> float:
    """
    Ограничение градусов диапазоном оси (насыщение на границе).

    Examples:
        >>> clamp_to_axis_range(AngleAxis.LATITUDE, 95.0)
        90.0
        >>> clamp_to_axis_range(AngleAxis.LONGITUDE, -185.0)
        -180.0
    """
    limit = axis_limit(axis)
    return clamp(degrees, -limit, limit)


def assert_in_range(axis: AngleAxis, degrees: float) -> None:
    """
    Проверка, что градусы в диапазоне оси.

    Raises:
        AxisRangeError: Если degrees вне [-90, 90] (широта) или [-180, 180] (долгота)
    """
    limit = axis_limit(axis)
    if degrees < -limit or degrees > limit:
        raise AxisRangeError(axis, degrees, limit)


# =============================================================================
# ПРИВЕДЕНИЕ ЧИСЕЛ
# =============================================================================


def coerce_finite(value: Any, label: str = "number") -> float:
    """
    Приведение значения к конечному float.

    Строки обрезаются по краям и разбираются как число. bool не считается числом.

    Args:
        value: Число или строка
        label: Имя значения для сообщения об ошибке

    Returns:
        Конечный float

    Raises:
        InvalidNumberError: Если значение нечисловое, NaN или Inf

    Examples:
        >>> coerce_finite(" 45.123 ")
        45.123
        >>> coerce_finite(float("nan"), "latitude")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        InvalidNumberError: Invalid latitude: nan
    """
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            raise InvalidNumberError(label, value) from None
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            number = float(value)
        except OverflowError:
            # int, не представимый в float (например 10**400)
            raise InvalidNumberError(label, value) from None
    else:
        raise InvalidNumberError(label, value)

    if not is_valid_float(number):
        raise InvalidNumberError(label, value)

    return number
