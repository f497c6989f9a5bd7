#
# Real - Temperature Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import math

# Third Party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from real.temperature import (
    ABSOLUTE_ZERO,
    BOILING,
    FREEZING,
    Temperature,
    TemperatureUnit,
    celsius,
    fahrenheit,
    kelvin,
)


# Tests ----------------------------------------------------------------------------------------------------------------

class TestConstructors:

    @pytest.mark.parametrize(
        "got, expected",
        [
            pytest.param(kelvin(300), 300.0, id="kelvin"),
            pytest.param(celsius(0), FREEZING.kelvin, id="celsius"),
            pytest.param(celsius(-273.15), ABSOLUTE_ZERO.kelvin, id="celsius-absolute-zero"),
            pytest.param(fahrenheit(32), FREEZING.kelvin, id="fahrenheit"),
            pytest.param(fahrenheit(212), BOILING.kelvin, id="fahrenheit-boiling"),
        ],
    )
    def test_constructors(self, got, expected):
        assert got.kelvin == pytest.approx(expected)

    def test_int_is_stored_as_float(self):
        assert isinstance(Temperature(300).kelvin, float)

    @pytest.mark.parametrize("value", ["300", None, True])
    def test_invalid_type(self, value):
        with pytest.raises(TypeError, match=r"kelvin must be"):
            Temperature(value)


class TestInUnit:

    @pytest.mark.parametrize(
        "temperature, unit, expected",
        [
            pytest.param(FREEZING, TemperatureUnit.KELVIN, 273.15, id="kelvin-to-kelvin"),
            pytest.param(FREEZING, TemperatureUnit.CELSIUS, 0.0, id="kelvin-to-celsius"),
            pytest.param(FREEZING, TemperatureUnit.FAHRENHEIT, 32.0, id="kelvin-to-fahrenheit"),
            pytest.param(BOILING, TemperatureUnit.CELSIUS, 100.0, id="boiling-to-celsius"),
            pytest.param(BOILING, TemperatureUnit.FAHRENHEIT, 212.0, id="boiling-to-fahrenheit"),
            pytest.param(ABSOLUTE_ZERO, TemperatureUnit.FAHRENHEIT, -459.67, id="absolute-zero-fahrenheit"),
        ],
    )
    def test_in_unit(self, temperature, unit, expected):
        assert temperature.in_unit(unit) == pytest.approx(expected, abs=1e-9)

    def test_properties(self):
        assert BOILING.celsius == pytest.approx(100.0)
        assert BOILING.fahrenheit == pytest.approx(212.0)

    @pytest.mark.parametrize("unit", ["X", None, 3, "K", "°C", "°F"])
    def test_invalid_unit_is_fatal(self, unit):
        with pytest.raises(AssertionError, match=r"invalid temperature unit"):
            FREEZING.in_unit(unit)


class TestTemperatureString:

    @pytest.mark.parametrize(
        "temperature, expected",
        [
            pytest.param(ABSOLUTE_ZERO, "-273.15 °C", id="zero"),
            pytest.param(FREEZING, "0.00 °C", id="freezing"),
            pytest.param(BOILING, "100.00 °C", id="boiling"),
        ],
    )
    def test_str(self, temperature, expected):
        assert str(temperature) == expected

    def test_str_nan(self):
        assert str(Temperature(math.nan)) == "0"

    @pytest.mark.parametrize(
        "spec, temperature, expected",
        [
            pytest.param("K", FREEZING, "273.15 K", id="kelvin"),
            pytest.param("C", FREEZING, "0.00 °C", id="celsius"),
            pytest.param("f", FREEZING, "0.00 °C", id="celsius-alias"),
            pytest.param("F", FREEZING, "32.00 °F", id="fahrenheit"),
            pytest.param(".1C", BOILING, "100.0 °C", id="precision"),
            pytest.param(".0F", BOILING, "212 °F", id="precision-zero"),
            pytest.param(".1F", celsius(21.5), "70.7 °F", id="room"),
            pytest.param("", BOILING, "100.00 °C", id="default"),
            pytest.param("x", BOILING, "100.00 °C", id="unknown-verb"),
        ],
    )
    def test_format(self, spec, temperature, expected):
        assert format(temperature, spec) == expected
