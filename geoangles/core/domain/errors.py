"""
Errors — Таксономия ошибок конверсии координат

Все ошибки наследуются от CoordinateError (ValueError) и возбуждаются
в точке обнаружения. Частичных результатов нет: операция либо возвращает
полностью валидное значение, либо бросает исключение.
"""

from typing import Any

from geoangles.core.domain.angles import AngleAxis


class CoordinateError(ValueError):
    """Базовая ошибка для всех нарушений при разборе и конверсии углов."""

    pass


class InvalidNumberError(CoordinateError):
    """Значение не приводится к конечному float (нечисловая строка, NaN, Inf)."""

    def __init__(self, label: str, value: Any):
        self.label = label
        self.value = value
        try:
            shown = repr(value)
        except ValueError:
            # int длиннее предела преобразования int → str
            shown = f"<int with {value.bit_length()} bits>"
        super().__init__(f"Invalid {label}: {shown}")


class UnsupportedInputError(CoordinateError, TypeError):
    """Парсер получил вход, который не является ни строкой, ни числом."""

    def __init__(self, value: Any):
        self.input_type = type(value)
        super().__init__(f"Unsupported input type: {self.input_type.__name__}")


class UnrecognizedFormatError(CoordinateError):
    """Во входной строке не найдено ни одного числового токена."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Unrecognized coordinate format: {text!r}")


class MinutesRangeError(CoordinateError):
    """Минуты вне диапазона [0, 60)."""

    def __init__(self, minutes: float):
        self.minutes = minutes
        super().__init__(f"Minutes must be in [0, 60), got {minutes}")


class SecondsRangeError(CoordinateError):
    """Секунды вне диапазона [0, 60)."""

    def __init__(self, seconds: float):
        self.seconds = seconds
        super().__init__(f"Seconds must be in [0, 60), got {seconds}")


class AxisRangeError(CoordinateError):
    """
    Итоговое значение градусов вне допустимого диапазона оси.

    Широта: [-90, 90], долгота: [-180, 180].
    """

    def __init__(self, axis: AngleAxis, degrees: float, limit: float):
        self.axis = axis
        self.degrees = degrees
        self.limit = limit
        super().__init__(
            f"{axis.value} degrees out of range: {degrees} (allowed [-{limit:g}, {limit:g}])"
        )
