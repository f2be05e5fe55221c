# modern_timeline/temporal.py
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict

from .exceptions import MalformedDateError

COMPONENTS = ("year", "month", "day", "hour", "minute", "second")

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

_ISO_PATTERN = re.compile(
    r"^(?P<year>-?\d{1,})"
    r"(?:-(?P<month>\d{1,2})"
    r"(?:-(?P<day>\d{1,2})"
    r"(?:[T ](?P<hour>\d{1,2}):(?P<minute>\d{2})(?::(?P<second>\d{2})(?:\.\d+)?)?"
    r"(?:Z|[+-]\d{2}:?\d{2})?)?)?)?$"
)


def _is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2 and _is_leap(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def _as_int(value, component: str) -> int:
    if isinstance(value, bool):
        raise MalformedDateError(value, f"{component} must be an integer, not a boolean")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and re.fullmatch(r"-?\d+", value.strip()):
        return int(value.strip())
    raise MalformedDateError(value, f"{component} must be an integer")


@dataclass(frozen=True)
class TimeValue:
    """A Gregorian point in time decomposed into integer components.

    Values with lower precision (a year, or a year and month) fill the
    missing date components with 1 and the time components with 0.
    """

    year: int
    month: int = 1
    day: int = 1
    hour: int = 0
    minute: int = 0
    second: int = 0

    def __post_init__(self):
        for component in COMPONENTS:
            value = getattr(self, component)
            if isinstance(value, bool) or not isinstance(value, int):
                raise MalformedDateError(value, f"{component} must be an integer")

        if not 1 <= self.month <= 12:
            raise MalformedDateError(self.month, "month out of range")
        if not 1 <= self.day <= days_in_month(self.year, self.month):
            raise MalformedDateError(self.day, "day out of range for month")
        if not 0 <= self.hour <= 23:
            raise MalformedDateError(self.hour, "hour out of range")
        if not 0 <= self.minute <= 59:
            raise MalformedDateError(self.minute, "minute out of range")
        if not 0 <= self.second <= 59:
            raise MalformedDateError(self.second, "second out of range")

    @classmethod
    def from_raw(cls, value) -> "TimeValue":
        """Coerce a raw query value into a TimeValue.

        Accepts TimeValue, datetime, date, ISO-like strings, mappings with
        named components and sequences of one to six integers.
        """
        if isinstance(value, TimeValue):
            return value
        if isinstance(value, datetime):
            return cls(value.year, value.month, value.day, value.hour, value.minute, value.second)
        if isinstance(value, date):
            return cls(value.year, value.month, value.day)
        if isinstance(value, str):
            return cls._from_string(value)
        if isinstance(value, Mapping):
            return cls._from_mapping(value)
        if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
            return cls._from_sequence(value)
        raise MalformedDateError(value, f"unsupported type {type(value).__name__}")

    @classmethod
    def _from_string(cls, text: str) -> "TimeValue":
        match = _ISO_PATTERN.match(text.strip())
        if not match:
            raise MalformedDateError(text, "not an ISO date")
        parts = {k: int(v) for k, v in match.groupdict().items() if v is not None}
        return cls(**parts)

    @classmethod
    def _from_mapping(cls, data: Mapping) -> "TimeValue":
        if data.get("year") is None:
            raise MalformedDateError(data, "year is required")
        unknown = set(data) - set(COMPONENTS)
        if unknown:
            raise MalformedDateError(data, f"unknown components {sorted(unknown)}")
        parts = {k: _as_int(v, k) for k, v in data.items() if v is not None}
        return cls(**parts)

    @classmethod
    def _from_sequence(cls, items: Sequence) -> "TimeValue":
        if not 1 <= len(items) <= len(COMPONENTS):
            raise MalformedDateError(items, "expected one to six components")
        return cls(*(_as_int(v, c) for v, c in zip(items, COMPONENTS)))

    def to_json(self) -> Dict[str, int]:
        return {
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "hour": self.hour,
            "minute": self.minute,
            "second": self.second,
        }
