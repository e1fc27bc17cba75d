"""Units understood by the engine's REST parameters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class DurationUnit(StrEnum):
    """Time unit suffixes."""

    WEEK = "w"
    DAY = "d"
    HOUR = "h"
    MINUTE = "m"
    SECOND = "s"
    MILLISECOND = "ms"


@dataclass(frozen=True)
class Duration:
    """A time value such as ``5m`` or ``1d``."""

    amount: int
    unit: DurationUnit

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Duration amount must not be negative")

    @classmethod
    def weeks(cls, amount: int) -> Duration:
        return cls(amount, DurationUnit.WEEK)

    @classmethod
    def days(cls, amount: int) -> Duration:
        return cls(amount, DurationUnit.DAY)

    @classmethod
    def hours(cls, amount: int) -> Duration:
        return cls(amount, DurationUnit.HOUR)

    @classmethod
    def minutes(cls, amount: int) -> Duration:
        return cls(amount, DurationUnit.MINUTE)

    @classmethod
    def seconds(cls, amount: int) -> Duration:
        return cls(amount, DurationUnit.SECOND)

    @classmethod
    def milliseconds(cls, amount: int) -> Duration:
        return cls(amount, DurationUnit.MILLISECOND)

    def __str__(self) -> str:
        return f"{self.amount}{self.unit.value}"


TimeValue = int | str | Duration


def format_time(value: TimeValue) -> str:
    """Render a time parameter; plain integers are milliseconds."""
    if isinstance(value, bool):
        raise TypeError("time value must be int, str or Duration")
    if isinstance(value, (int, Duration)):
        return str(value)
    if isinstance(value, str):
        return value
    raise TypeError("time value must be int, str or Duration")
