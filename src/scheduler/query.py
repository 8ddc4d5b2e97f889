from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import AbstractSet, Iterable, List, Sequence

from .models import (
    END_OF_DAY,
    ORDER_BY_START,
    START_OF_DAY,
    WHOLE_DAY,
    Event,
    MeetingRequest,
    TimeRange,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MeetingTimes:
    """Free windows for a request and whether optional attendees fit in them."""

    ranges: List[TimeRange]
    includes_optional: bool


def query(events: Iterable[Event], request: MeetingRequest) -> List[TimeRange]:
    """Return every window of the day in which ``request`` could be held."""

    return find_meeting_times(events, request).ranges


def find_meeting_times(events: Iterable[Event], request: MeetingRequest) -> MeetingTimes:
    """Find free windows, preferring ones that suit the optional attendees too.

    Everyone (mandatory and optional) is tried first. If that leaves no window,
    the optional attendees are dropped and the search runs again for the
    mandatory attendees alone; that second result is returned even when empty.
    """

    if request.duration > WHOLE_DAY.duration:
        logger.debug("Duration %s exceeds a whole day", request.duration)
        return MeetingTimes(ranges=[], includes_optional=True)

    events = list(events)
    everyone = request.attendees | request.optional_attendees
    ranges = available_ranges(events, everyone, request.duration)
    if ranges or not request.optional_attendees:
        return MeetingTimes(ranges=ranges, includes_optional=True)

    logger.info(
        "No window suits all %s attendees, retrying with %s mandatory attendees",
        len(everyone),
        len(request.attendees),
    )
    ranges = available_ranges(events, request.attendees, request.duration)
    return MeetingTimes(ranges=ranges, includes_optional=False)


def available_ranges(
    events: Iterable[Event],
    attendees: AbstractSet[str],
    duration: int,
) -> List[TimeRange]:
    relevant = relevant_events(events, attendees)
    busy = merge_busy_ranges(sort_by_start(relevant))
    logger.debug(
        "%s relevant events merged into busy ranges %s",
        len(relevant),
        ", ".join(str(time_range) for time_range in busy),
    )
    return free_ranges(busy, duration)


def relevant_events(events: Iterable[Event], attendees: AbstractSet[str]) -> List[Event]:
    """Keep the events that at least one of ``attendees`` is going to."""

    return [event for event in events if not event.attendees.isdisjoint(attendees)]


def sort_by_start(events: Iterable[Event]) -> List[Event]:
    return sorted(events, key=lambda event: ORDER_BY_START(event.when))


def merge_busy_ranges(events: Sequence[Event]) -> List[TimeRange]:
    """Collapse start-ordered events into disjoint busy ranges.

    Zero-length events occupy no time and are left out.
    """

    ranges = [event.when for event in events if event.when.duration > 0]
    if not ranges:
        return []

    merged: List[TimeRange] = []
    current = ranges[0]
    for when in ranges[1:]:
        if current.overlaps(when):
            # a later event can sit entirely inside the current range
            current = TimeRange(current.start, max(current.end, when.end))
            continue
        merged.append(current)
        current = when
    merged.append(current)
    return merged


def free_ranges(busy: Sequence[TimeRange], duration: int) -> List[TimeRange]:
    """Return the gaps around ``busy`` that are at least ``duration`` long.

    The window that runs to the end of the day is inclusive of ``END_OF_DAY``.
    """

    cursor = START_OF_DAY
    gaps: List[TimeRange] = []
    for time_range in busy:
        if time_range.start - cursor >= duration:
            gaps.append(TimeRange.from_start_end(cursor, time_range.start))
        cursor = time_range.end
    if END_OF_DAY - cursor >= duration:
        gaps.append(TimeRange.from_start_end(cursor, END_OF_DAY, inclusive=True))
    return gaps
