import pytest

from patternday.strategy import Rain, Sun, Weather, WeatherKind


def test_rain():
    weather = Weather(WeatherKind.RAIN)
    assert weather.sell(1) == 10.0


def test_sun():
    weather = Weather(WeatherKind.SUN)
    assert weather.sell(1) == 5.0


@pytest.mark.parametrize("count", [0, 1, 3, 10])
def test_sun_costs_half_of_rain(count):
    assert Weather(WeatherKind.SUN).sell(count) * 2 == Weather(WeatherKind.RAIN).sell(count)


def test_umbrella_prices_directly():
    assert Rain(cost=4).price(3) == 12
    assert Sun(cost=4).price(3) == 6


def test_weather_accepts_plain_integer():
    assert Weather(1).umbrella == Rain(cost=10)
    assert Weather(0).umbrella == Sun(cost=10)


def test_unknown_weather_is_rejected():
    with pytest.raises(ValueError):
        Weather(7)