# tests/test_overlap.py

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from app.services.calendar.overlap import find_conflict, find_conflicts, overlaps, ranges_overlap


def _at(text: str) -> datetime:
    return datetime.fromisoformat(text).astimezone()


def test_touching_ranges_do_not_conflict(make_task) -> None:
    existing = make_task(start_time="2024-01-01T09:00", end_time="2024-01-01T10:00")

    assert overlaps(99, _at("2024-01-01T10:00"), _at("2024-01-01T11:00"), [existing]) is False
    assert overlaps(99, _at("2024-01-01T08:00"), _at("2024-01-01T09:00"), [existing]) is False


def test_partial_overlap_conflicts(make_task) -> None:
    existing = make_task(start_time="2024-02-05T14:15", end_time="2024-02-05T14:45")

    assert overlaps(99, _at("2024-02-05T14:00"), _at("2024-02-05T14:30"), [existing]) is True


def test_containment_conflicts_both_ways(make_task) -> None:
    existing = make_task(start_time="2024-01-01T09:00", end_time="2024-01-01T12:00")

    assert overlaps(99, _at("2024-01-01T10:00"), _at("2024-01-01T11:00"), [existing])
    assert overlaps(99, _at("2024-01-01T08:00"), _at("2024-01-01T13:00"), [existing])


def test_candidate_never_conflicts_with_itself(make_task) -> None:
    task = make_task(id=7, start_time="2024-01-01T09:00", end_time="2024-01-01T10:00")

    assert overlaps(7, _at("2024-01-01T09:30"), _at("2024-01-01T10:30"), [task]) is False
    # ids from a URL arrive as strings
    assert overlaps("7", _at("2024-01-01T09:30"), _at("2024-01-01T10:30"), [task]) is False


def test_all_day_tasks_never_conflict(make_task) -> None:
    all_day = make_task(due_date="2024-01-01")

    start = _at("2024-01-01T00:00")
    assert overlaps(99, start, start + timedelta(days=1), [all_day]) is False


def test_task_with_half_a_time_pair_is_ignored(make_task) -> None:
    broken = make_task(start_time="2024-01-01T09:00")
    assert overlaps(99, _at("2024-01-01T08:00"), _at("2024-01-01T12:00"), [broken]) is False


def test_repeating_tasks_are_checked_on_their_base_range_only(make_task) -> None:
    daily = make_task(repeat="daily", start_time="2024-01-01T09:00", end_time="2024-01-01T10:00")

    assert overlaps(99, _at("2024-01-01T09:30"), _at("2024-01-01T10:30"), [daily]) is True
    # the next day's occurrence is not expanded
    assert overlaps(99, _at("2024-01-02T09:30"), _at("2024-01-02T10:30"), [daily]) is False


def test_conflicts_compare_instants_across_timezones(make_task) -> None:
    existing = make_task(start_time="2024-01-01T09:00:00+00:00", end_time="2024-01-01T10:00:00+00:00")
    plus_one = timezone(timedelta(hours=1))

    start = datetime(2024, 1, 1, 10, 30, tzinfo=plus_one)
    assert overlaps(99, start, start + timedelta(minutes=30), [existing]) is True


def test_find_conflicts_reports_every_conflict_in_order(make_task) -> None:
    a = make_task(start_time="2024-01-01T09:00", end_time="2024-01-01T10:00")
    b = make_task(start_time="2024-01-01T12:00", end_time="2024-01-01T13:00")
    c = make_task(start_time="2024-01-01T09:30", end_time="2024-01-01T09:45")

    start, end = _at("2024-01-01T09:15"), _at("2024-01-01T09:40")

    assert [t.id for t in find_conflicts(99, start, end, [a, b, c])] == [a.id, c.id]
    assert find_conflict(99, start, end, [a, b, c]).id == a.id
    assert find_conflict(99, start, end, [b]) is None


def test_ranges_overlap_is_symmetric() -> None:
    a = (_at("2024-01-01T09:00"), _at("2024-01-01T10:00"))
    b = (_at("2024-01-01T09:59"), _at("2024-01-01T11:00"))
    assert ranges_overlap(*a, *b) and ranges_overlap(*b, *a)
