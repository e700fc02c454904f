"""
Тесты арифметики температур (interval scale)

Ключевое свойство: `+` / `-` трактуют правый операнд как разность и
конвертируют его без offset. Применение абсолютной конверсии к разности
даёт физически неправдоподобный результат.
"""

import pytest

from measura.core.errors import IncompatibleDimensionsError
from measura.dimensions import Energy, Length, Temperature, TemperatureUnit, ThermalCapacity


class TestAbsoluteScale:
    """Абсолютные показания"""

    def test_freezing_point(self) -> None:
        freezing = Temperature.celsius(0.0)
        assert freezing.to_kelvin_scale() == pytest.approx(273.15)
        assert freezing.to_fahrenheit_scale() == pytest.approx(32.0)
        assert freezing.to_rankine_scale() == pytest.approx(491.67)

    def test_boiling_point(self) -> None:
        assert Temperature.celsius(100.0).to_fahrenheit_scale() == pytest.approx(212.0)
        assert Temperature.fahrenheit(212.0) == Temperature.celsius(100.0)

    def test_minus_forty_coincides(self) -> None:
        assert Temperature.celsius(-40.0) == Temperature.fahrenheit(-40.0)

    def test_absolute_zero(self) -> None:
        assert Temperature.kelvin(0.0) == Temperature.fahrenheit(-459.67)
        assert Temperature.rankine(0.0) == Temperature.kelvin(0.0)
        assert Temperature.celsius(-300.0).is_below_absolute_zero()
        assert not Temperature.celsius(-273.0).is_below_absolute_zero()


class TestDegrees:
    """Разности температур (delta)"""

    def test_degree_size(self) -> None:
        assert Temperature.celsius(10.0).to_fahrenheit_degrees() == pytest.approx(18.0)
        assert Temperature.fahrenheit(9.0).to_kelvin_degrees() == pytest.approx(5.0)
        assert Temperature.kelvin(1.0).to_celsius_degrees() == pytest.approx(1.0)

    def test_degrees_ignore_offset(self) -> None:
        """Нулевая разность остаётся нулевой в любой шкале"""
        assert Temperature.celsius(0.0).to_fahrenheit_degrees() == pytest.approx(0.0)
        assert Temperature.celsius(0.0).to_fahrenheit_scale() == pytest.approx(32.0)


class TestTemperatureArithmetic:
    """`+` / `-`: правый операнд всегда разность"""

    def test_fahrenheit_minus_celsius_delta(self) -> None:
        """100 °F - 5 °C = 100 °F - 9 °F = 91 °F"""
        result = Temperature.fahrenheit(100.0) - Temperature.celsius(5.0)
        assert result.unit is TemperatureUnit.FAHRENHEIT
        assert result.value == pytest.approx(91.0)

    def test_fahrenheit_plus_celsius_delta(self) -> None:
        """72 °F + 5 °C (прирост) = 81 °F"""
        result = Temperature.fahrenheit(72.0) + Temperature.celsius(5.0)
        assert result.value == pytest.approx(81.0)

    def test_offset_not_leaked(self) -> None:
        """Сумма абсолютных показаний в кельвинах дала бы 571.3 K вместо 298.15 K"""
        result = Temperature.celsius(20.0) + Temperature.celsius(5.0)
        assert result.value == pytest.approx(25.0)
        assert result.to_kelvin_scale() == pytest.approx(298.15)

    def test_add_delta_matches_operator(self) -> None:
        base = Temperature.celsius(20.0)
        delta = Temperature.fahrenheit(18.0)
        assert base.add_delta(delta) == base + delta
        assert base.add_delta(delta).value == pytest.approx(30.0)

    def test_difference_of_readings(self) -> None:
        """Разность двух абсолютных показаний"""
        diff = Temperature.celsius(30.0).difference(Temperature.fahrenheit(50.0))
        assert diff.unit is TemperatureUnit.CELSIUS
        assert diff.value == pytest.approx(20.0)

    def test_delta_round_trip_through_arithmetic(self) -> None:
        a = Temperature.celsius(37.0)
        b = Temperature.fahrenheit(98.6)
        assert (a + b - b).value == pytest.approx(a.value)

    def test_scalar_scaling(self) -> None:
        assert (Temperature.celsius(10.0) * 2).value == 20.0

    def test_cross_dimension_rejected(self) -> None:
        with pytest.raises(IncompatibleDimensionsError):
            Temperature.celsius(1.0) + Length.meters(1.0)


class TestThermalComposition:
    """Temperature * ThermalCapacity использует абсолютную шкалу Кельвина"""

    def test_heat_content(self) -> None:
        energy = Temperature.celsius(26.85) * ThermalCapacity.joules_per_kelvin(10.0)
        assert isinstance(energy, Energy)
        assert energy.to_joules() == pytest.approx(3000.0)

    def test_commutative(self) -> None:
        capacity = ThermalCapacity.joules_per_kelvin(2.0)
        t = Temperature.kelvin(150.0)
        assert capacity * t == t * capacity

    def test_energy_over_temperature(self) -> None:
        capacity = Energy.joules(600.0) / Temperature.kelvin(300.0)
        assert isinstance(capacity, ThermalCapacity)
        assert capacity.to_joules_per_kelvin() == pytest.approx(2.0)

    def test_display(self) -> None:
        assert str(Temperature.fahrenheit(98.6)) == "98.6 °F"
        assert str(Temperature.kelvin(300.0)) == "300.0 K"
