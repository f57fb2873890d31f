"""
Тесты для модулей Numerical Safeguards и Angle Guards

Проверяет:
1. Вывод полушария из знака и согласованность с осью
2. Применение знака полушария
3. Clamp и проверку диапазона оси
4. Приведение входа к конечному float
5. Числовые примитивы (split, round, clamp)
"""

import math

import pytest

from geoangles.core.domain import (
    AngleAxis,
    AxisRangeError,
    CoordinateError,
    Hemisphere,
    InvalidNumberError,
)
from geoangles.core.math import (
    AXIS_LIMITS_DEG,
    apply_hemisphere_sign,
    assert_in_range,
    axis_limit,
    clamp,
    clamp_to_axis_range,
    coerce_finite,
    hemisphere_from_sign,
    is_valid_float,
    quantize_half_up,
    round_to_decimals,
    split_whole_fraction,
)


# =============================================================================
# ЗНАК И ПОЛУШАРИЕ
# =============================================================================


class TestHemisphereFromSign:
    """Тесты для hemisphere_from_sign"""

    def test_latitude_signs(self) -> None:
        """Широта: N для >= 0, S для < 0"""
        assert hemisphere_from_sign(AngleAxis.LATITUDE, 45.123) == Hemisphere.NORTH
        assert hemisphere_from_sign(AngleAxis.LATITUDE, -45.123) == Hemisphere.SOUTH

    def test_longitude_signs(self) -> None:
        """Долгота: E для >= 0, W для < 0"""
        assert hemisphere_from_sign(AngleAxis.LONGITUDE, 122.419) == Hemisphere.EAST
        assert hemisphere_from_sign(AngleAxis.LONGITUDE, -122.419) == Hemisphere.WEST

    def test_zero_is_positive_hemisphere(self) -> None:
        """Ноль относится к положительному полушарию"""
        assert hemisphere_from_sign(AngleAxis.LATITUDE, 0.0) == Hemisphere.NORTH
        assert hemisphere_from_sign(AngleAxis.LONGITUDE, 0) == Hemisphere.EAST
        assert hemisphere_from_sign(AngleAxis.LATITUDE, -0.0) == Hemisphere.NORTH

    def test_axis_consistency(self) -> None:
        """Широта всегда N/S, долгота всегда E/W"""
        values = [-1e9, -180.0, -90.0, -1e-12, 0.0, 1e-12, 90.0, 180.0, 1e9]
        for value in values:
            assert hemisphere_from_sign(AngleAxis.LATITUDE, value) in (
                Hemisphere.NORTH,
                Hemisphere.SOUTH,
            )
            assert hemisphere_from_sign(AngleAxis.LONGITUDE, value) in (
                Hemisphere.EAST,
                Hemisphere.WEST,
            )


class TestApplyHemisphereSign:
    """Тесты для apply_hemisphere_sign"""

    def test_no_hemisphere_keeps_value(self) -> None:
        """Без полушария значение не меняется (знак сохраняется)"""
        assert apply_hemisphere_sign(45.123) == 45.123
        assert apply_hemisphere_sign(-45.123) == -45.123
        assert apply_hemisphere_sign(-45.123, None) == -45.123

    def test_negative_hemispheres(self) -> None:
        """S и W дают отрицательный модуль"""
        assert apply_hemisphere_sign(45.123, Hemisphere.SOUTH) == -45.123
        assert apply_hemisphere_sign(-45.123, Hemisphere.WEST) == -45.123

    def test_positive_hemispheres_override_sign(self) -> None:
        """N и E дают положительный модуль даже для отрицательного значения"""
        assert apply_hemisphere_sign(45.123, Hemisphere.NORTH) == 45.123
        assert apply_hemisphere_sign(-45.123, Hemisphere.EAST) == 45.123


# =============================================================================
# ДИАПАЗОНЫ
# =============================================================================


class TestAxisRange:
    """Тесты для axis_limit, clamp_to_axis_range и assert_in_range"""

    def test_axis_limits(self) -> None:
        """Пределы: 90 для широты, 180 для долготы"""
        assert axis_limit(AngleAxis.LATITUDE) == 90.0
        assert axis_limit(AngleAxis.LONGITUDE) == 180.0
        assert set(AXIS_LIMITS_DEG) == {AngleAxis.LATITUDE, AngleAxis.LONGITUDE}

    def test_clamp_saturates_at_bounds(self) -> None:
        """Значения вне диапазона насыщаются на границе"""
        assert clamp_to_axis_range(AngleAxis.LATITUDE, 95.0) == 90.0
        assert clamp_to_axis_range(AngleAxis.LATITUDE, -95.0) == -90.0
        assert clamp_to_axis_range(AngleAxis.LONGITUDE, 185.0) == 180.0
        assert clamp_to_axis_range(AngleAxis.LONGITUDE, -185.0) == -180.0

    def test_clamp_keeps_valid_values(self) -> None:
        """Значения в диапазоне не меняются"""
        assert clamp_to_axis_range(AngleAxis.LATITUDE, 45.0) == 45.0
        assert clamp_to_axis_range(AngleAxis.LONGITUDE, -122.4194) == -122.4194

    def test_assert_in_range_accepts_bounds(self) -> None:
        """Границы диапазона включены"""
        assert_in_range(AngleAxis.LATITUDE, 90.0)
        assert_in_range(AngleAxis.LATITUDE, -90.0)
        assert_in_range(AngleAxis.LONGITUDE, 180.0)
        assert_in_range(AngleAxis.LONGITUDE, -180.0)

    def test_assert_in_range_rejects_out_of_range(self) -> None:
        """Значение вне диапазона вызывает AxisRangeError с осью и значением"""
        with pytest.raises(AxisRangeError, match="lat degrees out of range: 95") as exc_info:
            assert_in_range(AngleAxis.LATITUDE, 95.0)

        assert exc_info.value.axis == AngleAxis.LATITUDE
        assert exc_info.value.degrees == 95.0
        assert exc_info.value.limit == 90.0

        with pytest.raises(AxisRangeError, match="lon degrees out of range"):
            assert_in_range(AngleAxis.LONGITUDE, -180.5)

    def test_longitude_range_wider_than_latitude(self) -> None:
        """120° допустимо для долготы, но не для широты"""
        assert_in_range(AngleAxis.LONGITUDE, 120.0)
        with pytest.raises(AxisRangeError):
            assert_in_range(AngleAxis.LATITUDE, 120.0)

    def test_axis_range_error_is_value_error(self) -> None:
        """Все ошибки домена наследуются от CoordinateError / ValueError"""
        with pytest.raises(CoordinateError):
            assert_in_range(AngleAxis.LATITUDE, 91.0)
        with pytest.raises(ValueError):
            assert_in_range(AngleAxis.LATITUDE, 91.0)


# =============================================================================
# ПРИВЕДЕНИЕ ЧИСЕЛ
# =============================================================================


class TestCoerceFinite:
    """Тесты для coerce_finite"""

    def test_numbers_pass_through(self) -> None:
        """Конечные числа возвращаются как float"""
        assert coerce_finite(45.123) == 45.123
        assert coerce_finite(45) == 45.0
        assert isinstance(coerce_finite(45), float)

    def test_strings_are_trimmed_and_parsed(self) -> None:
        """Строки обрезаются и разбираются"""
        assert coerce_finite("45.123") == 45.123
        assert coerce_finite("  -122.4194 ") == -122.4194
        assert coerce_finite("+7") == 7.0

    def test_non_numeric_string_raises(self) -> None:
        """Нечисловая строка вызывает InvalidNumberError"""
        with pytest.raises(InvalidNumberError, match="Invalid number"):
            coerce_finite("invalid")

        with pytest.raises(InvalidNumberError):
            coerce_finite("")

    def test_nan_and_inf_raise(self) -> None:
        """NaN и ±Inf вызывают InvalidNumberError"""
        for value in (float("nan"), float("inf"), float("-inf"), "nan", "inf", "-Infinity"):
            with pytest.raises(InvalidNumberError):
                coerce_finite(value)

    def test_label_in_error(self) -> None:
        """label передаётся в ошибку"""
        with pytest.raises(InvalidNumberError, match="Invalid latitude") as exc_info:
            coerce_finite("abc", "latitude")

        assert exc_info.value.label == "latitude"
        assert exc_info.value.value == "abc"

    def test_other_types_raise(self) -> None:
        """bool, None и прочие типы не являются числами"""
        for value in (True, None, [45.0], {"degrees": 45.0}):
            with pytest.raises(InvalidNumberError):
                coerce_finite(value)

    def test_int_too_large_for_float_raises(self) -> None:
        """int вне диапазона float вызывает InvalidNumberError, а не OverflowError"""
        with pytest.raises(InvalidNumberError, match="Invalid number") as exc_info:
            coerce_finite(10**400)

        assert exc_info.value.value == 10**400

        with pytest.raises(InvalidNumberError, match="Invalid latitude"):
            coerce_finite(-(10**5000), "latitude")


# =============================================================================
# ЧИСЛОВЫЕ ПРИМИТИВЫ
# =============================================================================


class TestNumericalSafeguards:
    """Тесты для numerical_safeguards"""

    def test_is_valid_float(self) -> None:
        """NaN/Inf невалидны, конечные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-180.0)
        assert not is_valid_float(math.nan)
        assert not is_valid_float(math.inf)

    def test_clamp_optional_bounds(self) -> None:
        """clamp с одной или двумя границами"""
        assert clamp(5.0, 0.0, 10.0) == 5.0
        assert clamp(-1.0, 0.0, 10.0) == 0.0
        assert clamp(15.0, 0.0, 10.0) == 10.0
        assert clamp(15.0, min_value=0.0) == 15.0
        assert clamp(-15.0, max_value=0.0) == -15.0

    def test_split_whole_fraction_truncates_toward_zero(self) -> None:
        """Целая часть усекается к нулю, дробная часть неотрицательна"""
        assert split_whole_fraction(48.5) == (48, 0.5)
        assert split_whole_fraction(-122.25) == (-122, 0.25)
        assert split_whole_fraction(-0.5) == (0, 0.5)
        assert split_whole_fraction(90.0) == (90, 0.0)

        whole, frac = split_whole_fraction(-45.75)
        assert isinstance(whole, int)
        assert frac >= 0

    def test_round_to_decimals(self) -> None:
        """Округление до заданного числа знаков"""
        assert round_to_decimals(51.264, 2) == 51.26
        assert round_to_decimals(59.9994, 2) == 60.0
        assert round_to_decimals(7.38, 0) == 7.0
        assert isinstance(round_to_decimals(7.38, 0), float)

    def test_round_to_decimals_rejects_negative(self) -> None:
        """Отрицательная точность недопустима"""
        with pytest.raises(ValueError, match="decimals must be non-negative"):
            round_to_decimals(1.0, -1)

    def test_round_to_decimals_ties_away_from_zero(self) -> None:
        """Точная двоичная половина округляется от нуля"""
        assert round_to_decimals(22.5, 0) == 23.0
        assert round_to_decimals(11.25, 1) == 11.3
        assert round_to_decimals(7.125, 2) == 7.13
        assert round_to_decimals(28.125, 2) == 28.13
        assert round_to_decimals(-2.5, 0) == -3.0

    def test_round_to_decimals_uses_exact_binary_value(self) -> None:
        """1.005 в float чуть меньше половины и округляется вниз"""
        assert round_to_decimals(1.005, 2) == 1.0
        assert round_to_decimals(2.675, 2) == 2.67

    def test_quantize_half_up_keeps_trailing_zeros(self) -> None:
        """Decimal с ровно decimals знаками"""
        assert str(quantize_half_up(48.8544, 5)) == "48.85440"
        assert str(quantize_half_up(0.0, 3)) == "0.000"
        assert str(quantize_half_up(9.995, 2)) == "9.99"
        assert str(quantize_half_up(9.9951, 2)) == "10.00"
        assert str(quantize_half_up(22.5, 0)) == "23"

    def test_quantize_half_up_rejects_negative(self) -> None:
        """Отрицательная точность недопустима"""
        with pytest.raises(ValueError, match="decimals must be non-negative"):
            quantize_half_up(1.0, -2)
