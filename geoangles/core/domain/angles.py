"""
Angles — Модели угловых значений (широта/долгота)

Immutable Pydantic модели трёх представлений географического угла:
- DecimalDegrees (DD): знаковое вещественное значение
- DegreesMinutes (DM): целые градусы + дробные минуты + полушарие
- DegreesMinutesSeconds (DMS): целые градусы + целые минуты + дробные секунды + полушарие

Все модели frozen=True: любая операция создаёт новый экземпляр.

ИНВАРИАНТЫ:
1. Полушарие N/S допустимо только для широты, E/W только для долготы
2. Диапазоны минут/секунд [0, 60) проверяются операциями конверсии, а не моделью
3. Диапазон градусов проверяется операциями, которые производят DD
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ENUMS
# =============================================================================


class AngleAxis(str, Enum):
    """Ось угла: широта или долгота"""

    LATITUDE = "lat"
    LONGITUDE = "lon"


class Hemisphere(str, Enum):
    """Полушарие (буквенный индикатор знака)"""

    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"

    @property
    def is_negative(self) -> bool:
        """S и W соответствуют отрицательному знаку."""
        return self in (Hemisphere.SOUTH, Hemisphere.WEST)

    @property
    def axis(self) -> AngleAxis:
        """Ось, к которой относится полушарие."""
        if self in (Hemisphere.NORTH, Hemisphere.SOUTH):
            return AngleAxis.LATITUDE
        return AngleAxis.LONGITUDE


def _check_hemisphere_axis(hemisphere: Hemisphere | None, info) -> Hemisphere | None:
    """Проверка соответствия полушария оси (N/S → lat, E/W → lon)."""
    if hemisphere is None or "axis" not in info.data:
        return hemisphere
    axis = info.data["axis"]
    if hemisphere.axis != axis:
        raise ValueError(
            f"hemisphere {hemisphere.value} does not belong to axis {axis.value}"
        )
    return hemisphere


# =============================================================================
# DECIMAL DEGREES
# =============================================================================


class DecimalDegrees(BaseModel):
    """
    Угол в десятичных градусах (DD).

    Знак хранится в самом значении: отрицательные значения соответствуют
    S (широта) или W (долгота). Полушарие не хранится, а выводится.
    """

    axis: AngleAxis = Field(..., description="Ось угла (lat/lon)")
    degrees: float = Field(..., allow_inf_nan=False, description="Знаковые градусы")

    model_config = {"frozen": True}


# =============================================================================
# DEGREES-MINUTES
# =============================================================================


class DegreesMinutes(BaseModel):
    """
    Угол в формате градусы-минуты (DM).

    Знак переносится полем hemisphere, если оно задано; иначе выводится
    из знака degrees.
    """

    axis: AngleAxis = Field(..., description="Ось угла (lat/lon)")
    degrees: int = Field(..., description="Целые градусы (обычно модуль)")
    minutes: float = Field(..., allow_inf_nan=False, description="Дробные минуты [0, 60)")
    hemisphere: Hemisphere | None = Field(None, description="Полушарие (optional)")

    model_config = {"frozen": True}

    @field_validator("hemisphere")
    @classmethod
    def validate_hemisphere_axis(cls, v: Hemisphere | None, info) -> Hemisphere | None:
        """Полушарие должно соответствовать оси"""
        return _check_hemisphere_axis(v, info)


# =============================================================================
# DEGREES-MINUTES-SECONDS
# =============================================================================


class DegreesMinutesSeconds(BaseModel):
    """
    Угол в формате градусы-минуты-секунды (DMS).

    Правила знака те же, что и для DegreesMinutes.
    """

    axis: AngleAxis = Field(..., description="Ось угла (lat/lon)")
    degrees: int = Field(..., description="Целые градусы (обычно модуль)")
    minutes: int = Field(..., description="Целые минуты [0, 60)")
    seconds: float = Field(..., allow_inf_nan=False, description="Дробные секунды [0, 60)")
    hemisphere: Hemisphere | None = Field(None, description="Полушарие (optional)")

    model_config = {"frozen": True}

    @field_validator("hemisphere")
    @classmethod
    def validate_hemisphere_axis(cls, v: Hemisphere | None, info) -> Hemisphere | None:
        """Полушарие должно соответствовать оси"""
        return _check_hemisphere_axis(v, info)
