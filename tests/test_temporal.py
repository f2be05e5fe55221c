from datetime import date, datetime

import pytest

from modern_timeline.exceptions import MalformedDateError
from modern_timeline.temporal import TimeValue


def test_lower_precision_defaults():
    assert TimeValue(1969).to_json() == {
        "year": 1969, "month": 1, "day": 1, "hour": 0, "minute": 0, "second": 0,
    }


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2019-08-02T16:07:42", TimeValue(2019, 8, 2, 16, 7, 42)),
        ("2019-08-02 16:07", TimeValue(2019, 8, 2, 16, 7)),
        ("2019-08-02T16:07:42Z", TimeValue(2019, 8, 2, 16, 7, 42)),
        ("2019-08", TimeValue(2019, 8)),
        ("-0044-03-15", TimeValue(-44, 3, 15)),
        (datetime(2019, 8, 2, 16, 7, 42), TimeValue(2019, 8, 2, 16, 7, 42)),
        (date(2019, 8, 2), TimeValue(2019, 8, 2)),
        ({"year": 2019, "month": 8, "day": None}, TimeValue(2019, 8)),
        ([2019, 8, 5, 17, 39, 23], TimeValue(2019, 8, 5, 17, 39, 23)),
        ((1815,), TimeValue(1815)),
    ],
)
def test_from_raw(raw, expected):
    assert TimeValue.from_raw(raw) == expected


def test_from_raw_keeps_time_values():
    value = TimeValue(2000, 2, 29)
    assert TimeValue.from_raw(value) is value


@pytest.mark.parametrize(
    "raw",
    [
        "yesterday",
        "2019-02-30",
        "2019-08-02T24:00",
        "",
        None,
        True,
        3.5,
        {"month": 8},
        {"year": 2019, "week": 3},
        [2019, 8, 2, 16, 7, 42, 0],
        [],
        [2019, "eight"],
    ],
)
def test_from_raw_rejects_malformed_values(raw):
    with pytest.raises(MalformedDateError):
        TimeValue.from_raw(raw)


def test_leap_day_validation():
    assert TimeValue(2000, 2, 29).day == 29
    with pytest.raises(MalformedDateError):
        TimeValue(1900, 2, 29)


def test_error_names_the_value():
    with pytest.raises(MalformedDateError) as exc_info:
        TimeValue.from_raw("soon")
    assert "'soon'" in str(exc_info.value)
