"""
Numerical Safeguards — Числовые примитивы для угловой арифметики

Модуль содержит базовые операции, на которых построены guards и converter:
- Проверка конечности float (NaN/Inf)
- Ограничение значения диапазоном (clamp)
- Разделение значения на целую часть и модуль дробной части
- Округление до заданного числа знаков: половина всегда от нуля (half-up),
  по точному двоичному значению float

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Целая часть всегда получается усечением к нулю (trunc), а не floor
2. Дробная часть всегда неотрицательна
3. Все операции детерминированы и не имеют побочных эффектов
4. Точная двоичная половина (22.5, 11.25, 7.125) округляется от нуля;
   значения вроде 1.005, которые в float чуть меньше половины, округляются вниз
"""

import math
from decimal import ROUND_HALF_UP, Context, Decimal


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# ДИАПАЗОНЫ
# =============================================================================


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(95.0, -90.0, 90.0)
        90.0
        >>> clamp(-185.0, -180.0, 180.0)
        -180.0
        >>> clamp(45.0, -90.0, 90.0)
        45.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


# =============================================================================
# ЦЕЛАЯ/ДРОБНАЯ ЧАСТЬ И ОКРУГЛЕНИЕ
# =============================================================================


def split_whole_fraction(value: float) -> tuple[int, float]:
    """
    Разделение значения на целую часть (усечение к нулю) и модуль дробной части.

    Args:
        value: Исходное значение (любого знака)

    Returns:
        (whole, fraction):
            - whole: int(trunc(value)), знак сохраняется
            - fraction: abs(value - whole), всегда в [0, 1)

    Examples:
        >>> split_whole_fraction(48.5)
        (48, 0.5)
        >>> split_whole_fraction(-122.25)
        (-122, 0.25)
        >>> split_whole_fraction(-0.5)
        (0, 0.5)
    """
    whole = math.trunc(value)
    return whole, abs(value - whole)


def quantize_half_up(value: float, decimals: int) -> Decimal:
    """
    Округление конечного float до decimals знаков, половина от нуля.

    Округляется точное двоичное значение float, а не его repr.

    Args:
        value: Конечное значение
        decimals: Число знаков (>= 0)

    Returns:
        Decimal ровно с decimals знаками после запятой

    Raises:
        ValueError: Если decimals отрицательный

    Examples:
        >>> str(quantize_half_up(7.125, 2))
        '7.13'
        >>> str(quantize_half_up(22.5, 0))
        '23'
        >>> str(quantize_half_up(1.005, 2))
        '1.00'
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")

    exact = Decimal(value)
    # Точности хватает на все целые цифры, decimals знаков и перенос разряда
    context = Context(prec=max(exact.adjusted(), 0) + decimals + 2)
    return exact.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP, context=context)


def round_to_decimals(value: float, decimals: int) -> float:
    """
    Округление до заданного числа знаков после запятой (половина от нуля).

    Args:
        value: Значение для округления
        decimals: Число знаков (>= 0)

    Returns:
        Округлённое значение (float)

    Raises:
        ValueError: Если decimals отрицательный

    Examples:
        >>> round_to_decimals(59.9994, 2)
        60.0
        >>> round_to_decimals(51.264, 2)
        51.26
        >>> round_to_decimals(22.5, 0)
        23.0
    """
    return float(quantize_half_up(value, decimals))
