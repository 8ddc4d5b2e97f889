import pytest

from src.scheduler.models import (
    END_OF_DAY,
    ORDER_BY_START,
    START_OF_DAY,
    WHOLE_DAY,
    Event,
    MeetingRequest,
    TimeRange,
    time_in_minutes,
)


def test_whole_day_spans_start_to_end_of_day():
    assert WHOLE_DAY.start == START_OF_DAY == 0
    assert WHOLE_DAY.end == END_OF_DAY == 1440
    assert WHOLE_DAY.duration == 1440


def test_inclusive_flag_does_not_affect_equality():
    inclusive = TimeRange.from_start_end(600, END_OF_DAY, inclusive=True)

    assert inclusive == TimeRange(600, 1440)
    assert hash(inclusive) == hash(TimeRange(600, 1440))
    assert str(inclusive) == "[600, 1440]"
    assert str(TimeRange(600, 1440)) == "[600, 1440)"


def test_from_start_duration():
    assert TimeRange.from_start_duration(time_in_minutes(9, 30), 45) == TimeRange(570, 615)


@pytest.mark.parametrize(
    "first, second, expected",
    [
        ((540, 600), (570, 630), True),
        ((540, 600), (600, 660), False),
        ((540, 720), (600, 630), True),
        ((540, 540), (540, 600), True),
        ((0, 60), (120, 180), False),
    ],
)
def test_overlaps_is_symmetric(first, second, expected):
    a, b = TimeRange(*first), TimeRange(*second)

    assert a.overlaps(b) is expected
    assert b.overlaps(a) is expected


def test_contains_points_and_ranges():
    time_range = TimeRange(540, 600)

    assert time_range.contains(540)
    assert not time_range.contains(600)
    assert time_range.contains(TimeRange(550, 600))
    assert not time_range.contains(TimeRange(550, 610))
    assert TimeRange.from_start_end(600, END_OF_DAY, inclusive=True).contains(END_OF_DAY)


def test_order_by_start_keeps_ties_in_input_order():
    ranges = [TimeRange(60, 300), TimeRange(0, 400), TimeRange(60, 90)]

    assert sorted(ranges, key=ORDER_BY_START) == [
        TimeRange(0, 400),
        TimeRange(60, 300),
        TimeRange(60, 90),
    ]


@pytest.mark.parametrize("bounds", [(600, 540), (-1, 10), (0, 1441)])
def test_invalid_ranges_are_rejected(bounds):
    with pytest.raises(ValueError):
        TimeRange(*bounds)


@pytest.mark.parametrize("hours, minutes", [(24, 0), (-1, 0), (10, 60)])
def test_time_in_minutes_validates_input(hours, minutes):
    with pytest.raises(ValueError):
        time_in_minutes(hours, minutes)


def test_event_attendees_are_a_set():
    event = Event("sync", TimeRange(0, 30), ["A", "B", "A"])

    assert event.attendees == frozenset({"A", "B"})
    assert Event("solo", TimeRange(0, 30), "Alice").attendees == frozenset({"Alice"})


def test_meeting_request_rejects_negative_duration():
    with pytest.raises(ValueError):
        MeetingRequest(attendees=frozenset({"A"}), duration=-1)


def test_meeting_request_allows_more_than_a_day():
    request = MeetingRequest(attendees=["A"], duration=3000, optional_attendees=["B"])

    assert request.attendees == frozenset({"A"})
    assert request.optional_attendees == frozenset({"B"})
