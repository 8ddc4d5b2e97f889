from __future__ import annotations

from dataclasses import dataclass, field
from operator import attrgetter
from typing import Iterable, Union

START_OF_DAY = 0
END_OF_DAY = 24 * 60


def time_in_minutes(hours: int, minutes: int) -> int:
    """Convert a wall-clock time to minutes since midnight."""

    if not 0 <= hours < 24:
        raise ValueError("hours must be in [0, 24)")
    if not 0 <= minutes < 60:
        raise ValueError("minutes must be in [0, 60)")
    return hours * 60 + minutes


@dataclass(frozen=True)
class TimeRange:
    """A span of minutes within a single day.

    ``end`` is exclusive. The one exception is the free window that runs up to
    the end of the day, which is built with ``end_inclusive=True``; the flag is
    not part of equality, so ``[600, 1440]`` equals ``[600, 1440)``.
    """

    start: int
    end: int
    end_inclusive: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.start, int) or not isinstance(self.end, int):
            raise ValueError("TimeRange bounds must be whole minutes")
        if self.start > self.end:
            raise ValueError("TimeRange start must not be after its end")
        if self.start < START_OF_DAY or self.end > END_OF_DAY:
            raise ValueError("TimeRange must lie within a single day")

    @classmethod
    def from_start_end(cls, start: int, end: int, inclusive: bool = False) -> "TimeRange":
        return cls(start, end, end_inclusive=inclusive)

    @classmethod
    def from_start_duration(cls, start: int, duration: int) -> "TimeRange":
        return cls(start, start + duration)

    @property
    def duration(self) -> int:
        return self.end - self.start

    def overlaps(self, other: "TimeRange") -> bool:
        if self.start == other.start:
            return True
        return self.contains(other.start) or other.contains(self.start)

    def contains(self, other: Union[int, "TimeRange"]) -> bool:
        if isinstance(other, TimeRange):
            if other.duration == 0:
                return self.contains(other.start)
            return self.start <= other.start and other.end <= self.end
        if self.end_inclusive:
            return self.start <= other <= self.end
        return self.start <= other < self.end

    def __str__(self) -> str:
        closing = "]" if self.end_inclusive else ")"
        return f"[{self.start}, {self.end}{closing}"


WHOLE_DAY = TimeRange(START_OF_DAY, END_OF_DAY)


ORDER_BY_START = attrgetter("start")


@dataclass(frozen=True)
class Event:
    """A calendar entry that blocks the time of everyone attending it."""

    name: str
    when: TimeRange
    attendees: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not isinstance(self.when, TimeRange):
            raise ValueError("Event.when must be a TimeRange")
        object.__setattr__(self, "attendees", _as_attendee_set(self.attendees))


@dataclass(frozen=True)
class MeetingRequest:
    """A meeting that needs ``duration`` contiguous minutes."""

    attendees: frozenset[str]
    duration: int
    optional_attendees: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not isinstance(self.duration, int):
            raise ValueError("Duration must be a whole number of minutes")
        if self.duration < 0:
            raise ValueError("Duration must be non-negative")
        object.__setattr__(self, "attendees", _as_attendee_set(self.attendees))
        object.__setattr__(
            self, "optional_attendees", _as_attendee_set(self.optional_attendees)
        )


def _as_attendee_set(attendees: Iterable[str]) -> frozenset[str]:
    # a bare string would otherwise be split into characters
    if isinstance(attendees, str):
        return frozenset([attendees])
    return frozenset(attendees)
