"""
Parser — Разбор текстовых и числовых координат в Decimal Degrees

Поддерживаемые форматы:
- Десятичные градусы: "45.123", 45.123, "-122.4194"
- Градусы-минуты: "45° 7.38'", "45 7.38 N"
- Градусы-минуты-секунды: "45° 7' 22.8\" N", "45 7 22.8"
- Индикаторы полушария N/S/E/W как отдельные однобуквенные токены
  (полные названия "NORTH", "WEST" в тексте координаты не распознаются)

Алгоритм:
1. Число или простая строка вида [+-]d[.d] → прямое приведение
2. Иначе: извлечение полушария (первый отдельный токен N/S/E/W)
3. Извлечение всех знаковых десятичных токенов по порядку
4. Ветвление по количеству чисел: 1 (градусы), 2 (DM), >=3 (DMS), 0 (ошибка)

Полушарие всегда перекрывает числовой знак: "-45 30 N" → +45.5.
"""

import logging
import math
import re
from typing import Final

from geoangles.core.domain.angles import AngleAxis, DecimalDegrees, Hemisphere
from geoangles.core.domain.constants import (
    MAX_MINUTES,
    MAX_SECONDS,
    MINUTES_PER_DEGREE,
    SECONDS_PER_DEGREE,
)
from geoangles.core.domain.errors import (
    MinutesRangeError,
    SecondsRangeError,
    UnrecognizedFormatError,
    UnsupportedInputError,
)
from geoangles.core.math.angle_guards import (
    apply_hemisphere_sign,
    assert_in_range,
    coerce_finite,
)
from geoangles.core.math.numerical_safeguards import is_valid_float

logger = logging.getLogger(__name__)


# =============================================================================
# PATTERNS
# =============================================================================

# Простые десятичные градусы без единиц и полушария
PLAIN_DECIMAL_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?\d+(\.\d+)?", re.ASCII)

# Отдельный буквенный индикатор полушария
HEMISPHERE_TOKEN_PATTERN: Final[re.Pattern[str]] = re.compile(r"\b([NSEW])\b", re.ASCII)

# Знаковые десятичные токены внутри произвольного текста
NUMBER_TOKEN_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?\d+(?:\.\d+)?", re.ASCII)

# Полные названия достижимы только через parse_hemisphere
_HEMISPHERE_NAMES: Final[dict[str, Hemisphere]] = {
    "N": Hemisphere.NORTH,
    "NORTH": Hemisphere.NORTH,
    "S": Hemisphere.SOUTH,
    "SOUTH": Hemisphere.SOUTH,
    "E": Hemisphere.EAST,
    "EAST": Hemisphere.EAST,
    "W": Hemisphere.WEST,
    "WEST": Hemisphere.WEST,
}


# =============================================================================
# HEMISPHERE HELPERS
# =============================================================================


def axis_from_hemisphere(hemisphere: Hemisphere) -> AngleAxis:
    """
    Ось по полушарию: N/S → широта, E/W → долгота.

    Examples:
        >>> axis_from_hemisphere(Hemisphere.SOUTH)
        <AngleAxis.LATITUDE: 'lat'>
        >>> axis_from_hemisphere(Hemisphere.EAST)
        <AngleAxis.LONGITUDE: 'lon'>
    """
    return hemisphere.axis


def parse_hemisphere(value: str) -> Hemisphere:
    """
    Разбор полушария из буквы или полного английского названия.

    Регистр и пробелы по краям игнорируются: "n", " S ", "west".

    Полные названия принимает только эта функция: токенизатор parse_to_dd
    извлекает лишь отдельные буквы N/S/E/W.

    Raises:
        UnrecognizedFormatError: Если значение не является полушарием
    """
    hemisphere = _HEMISPHERE_NAMES.get(value.strip().upper())
    if hemisphere is None:
        raise UnrecognizedFormatError(value)
    return hemisphere


# =============================================================================
# TOKENIZER
# =============================================================================


def _tokenize(text: str) -> tuple[Hemisphere | None, list[float]]:
    """Извлечение полушария и всех числовых токенов из нормализованной строки."""
    hemi_match = HEMISPHERE_TOKEN_PATTERN.search(text)
    hemisphere = parse_hemisphere(hemi_match.group(1)) if hemi_match else None
    numbers = [float(token) for token in NUMBER_TOKEN_PATTERN.findall(text)]
    return hemisphere, numbers


def _resolve_sign(degree_token: float, hemisphere: Hemisphere | None) -> int:
    """Знак: из полушария, если оно есть, иначе из токена градусов (ноль → +)."""
    if hemisphere is not None:
        return -1 if hemisphere.is_negative else 1
    return -1 if degree_token < 0 else 1


def _whole_degrees(degree_token: float) -> float:
    """Модуль целых градусов токена; бесконечность проходит дальше к проверке диапазона."""
    magnitude = abs(degree_token)
    if not is_valid_float(magnitude):
        return magnitude
    return float(math.trunc(magnitude))


def _check_minutes(minutes: float) -> None:
    if minutes >= MAX_MINUTES:
        raise MinutesRangeError(minutes)


def _check_seconds(seconds: float) -> None:
    if seconds >= MAX_SECONDS:
        raise SecondsRangeError(seconds)


# =============================================================================
# PARSING
# =============================================================================


def parse_to_dd(value: str | float | int, axis: AngleAxis) -> DecimalDegrees:
    """
    Разбор координаты (строка или число) в Decimal Degrees.

    Args:
        value: Координата в одном из поддерживаемых форматов
        axis: Ось, по которой проверяется диапазон

    Returns:
        DecimalDegrees с градусами в диапазоне оси

    Raises:
        InvalidNumberError: Число не конечное (NaN, Inf)
        UnsupportedInputError: Вход не строка и не число
        UnrecognizedFormatError: В строке нет числовых токенов
        MinutesRangeError: Минуты >= 60
        SecondsRangeError: Секунды >= 60
        AxisRangeError: Итог вне диапазона оси

    Examples:
        >>> parse_to_dd("45° 7.38' N", AngleAxis.LATITUDE).degrees
        45.123
        >>> parse_to_dd("-122.4194", AngleAxis.LONGITUDE).degrees
        -122.4194
    """
    is_number = isinstance(value, (int, float)) and not isinstance(value, bool)
    if is_number or (isinstance(value, str) and PLAIN_DECIMAL_PATTERN.fullmatch(value.strip())):
        degrees = coerce_finite(value, "decimal degrees")
        assert_in_range(axis, degrees)
        return DecimalDegrees(axis=axis, degrees=degrees)

    if not isinstance(value, str):
        raise UnsupportedInputError(value)

    text = value.strip().upper()
    hemisphere, numbers = _tokenize(text)
    count = len(numbers)
    logger.debug(
        "Parsing %r as %s: %d numeric token(s), hemisphere=%s",
        value,
        axis.value,
        count,
        hemisphere.value if hemisphere else None,
    )

    if count == 1:
        degrees = apply_hemisphere_sign(numbers[0], hemisphere)

    elif count == 2:
        degree_token, minutes = numbers[0], abs(numbers[1])
        _check_minutes(minutes)
        sign = _resolve_sign(degree_token, hemisphere)
        degrees = sign * (_whole_degrees(degree_token) + minutes / MINUTES_PER_DEGREE)

    elif count >= 3:
        # Токены после секунд игнорируются
        degree_token, minutes, seconds = numbers[0], abs(numbers[1]), abs(numbers[2])
        _check_minutes(minutes)
        _check_seconds(seconds)
        sign = _resolve_sign(degree_token, hemisphere)
        degrees = sign * (
            _whole_degrees(degree_token)
            + minutes / MINUTES_PER_DEGREE
            + seconds / SECONDS_PER_DEGREE
        )

    else:
        raise UnrecognizedFormatError(value)

    assert_in_range(axis, degrees)
    return DecimalDegrees(axis=axis, degrees=degrees)


def parse_pair_to_dd(
    lat_value: str | float | int,
    lon_value: str | float | int,
) -> tuple[DecimalDegrees, DecimalDegrees]:
    """
    Разбор пары координат: первая всегда широта, вторая долгота.

    Ошибка разбора широты возникает до разбора долготы.

    Examples:
        >>> lat, lon = parse_pair_to_dd("48.8544° N", "123.5005° W")
        >>> lat.degrees, lon.degrees
        (48.8544, -123.5005)
    """
    lat = parse_to_dd(lat_value, AngleAxis.LATITUDE)
    lon = parse_to_dd(lon_value, AngleAxis.LONGITUDE)
    return lat, lon
