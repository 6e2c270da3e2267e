import pytest

from patternday.state import Month, MonthState

CASES = [
    ("Jan", 31, (True, False, False, False)),
    ("Feb", 28, (False, False, True, False)),
    ("Feb", 29, (False, False, False, True)),
    ("Mar", 31, (True, False, False, False)),
    ("Apr", 30, (False, True, False, False)),
    ("May", 31, (True, False, False, False)),
    ("June", 30, (False, True, False, False)),
    ("July", 31, (True, False, False, False)),
    ("Aug", 31, (True, False, False, False)),
    ("Sept", 30, (False, True, False, False)),
    ("Oct", 31, (True, False, False, False)),
    ("Nov", 30, (False, True, False, False)),
    ("Dec", 31, (True, False, False, False)),
]


@pytest.mark.parametrize("name,day,expected", CASES)
def test_month_classification(name, day, expected):
    m = Month(name, day)
    assert (m.solar(), m.lunar(), m.leap(), m.non_leap()) == expected


def test_unusual_day_count_matches_nothing():
    m = Month("Odd", 27)
    assert (m.solar(), m.lunar(), m.leap(), m.non_leap()) == (False,) * 4


def test_default_status_is_solar():
    month = Month("Jan", 31)
    assert month.status == MonthState.SOLAR
    assert month.status.value == 0