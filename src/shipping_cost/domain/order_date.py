from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

FRIDAY = 5

_ACCEPTED_FORMATS = ("%Y-%m-%d", "%Y-%m-%d %H:%M:%S")


@dataclass(frozen=True, slots=True)
class OrderDate:
    # Only the calendar date matters; time of day is dropped on construction.
    value: date

    def __post_init__(self) -> None:
        if isinstance(self.value, datetime):
            object.__setattr__(self, "value", self.value.date())
        elif not isinstance(self.value, date):
            raise ValueError(f"OrderDate requires a date, got: {type(self.value).__name__}")

    @classmethod
    def from_date(cls, value: date) -> OrderDate:
        return cls(value)

    @classmethod
    def from_datetime(cls, value: datetime) -> OrderDate:
        return cls(value.date())

    @classmethod
    def from_string(cls, text: str) -> OrderDate:
        for fmt in _ACCEPTED_FORMATS:
            try:
                return cls(datetime.strptime(text, fmt).date())
            except ValueError:
                continue
        raise ValueError(f"Invalid date format: {text}. Expected YYYY-MM-DD or YYYY-MM-DD HH:MM:SS")

    @classmethod
    def today(cls) -> OrderDate:
        return cls(date.today())

    @property
    def iso_weekday(self) -> int:
        return self.value.isoweekday()

    def is_friday(self) -> bool:
        return self.iso_weekday == FRIDAY

    @property
    def day_name(self) -> str:
        return self.value.strftime("%A")

    def format(self) -> str:
        return self.value.isoformat()

    def __str__(self) -> str:
        return self.format()
