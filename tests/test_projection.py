# tests/test_projection.py

from __future__ import annotations

from datetime import date

from app.models.recurrence import Frequency
from app.services.calendar.projection import (
    CATEGORY_COLORS,
    NEUTRAL_COLOR,
    PRIORITY_COLORS,
    display_duration_minutes,
    event_color,
    project,
    project_all,
)
from app.utils.calendar_grid import CalendarView


def test_weekly_task_projects_to_weekday_rule(make_task) -> None:
    task = make_task(
        repeat="weekly",
        repeat_days=["mon", "wed"],
        start_time="2024-01-01T09:00",
        end_time="2024-01-01T10:00",
    )

    spec = project(task)

    assert spec is not None
    assert spec.rrule is not None
    assert spec.rrule.freq == Frequency.WEEKLY
    assert set(spec.rrule.byweekday) == {"mo", "we"}
    assert spec.rrule.dtstart == task.start_time
    assert spec.duration_minutes == 60
    assert spec.all_day is False


def test_zero_length_task_clamps_to_fifteen_minutes(make_task) -> None:
    task = make_task(repeat="daily", start_time="2024-01-01T09:00", end_time="2024-01-01T09:00")

    spec = project(task)

    assert spec.duration_minutes == 15
    assert display_duration_minutes(task) == 15


def test_inverted_pair_also_clamps(make_task) -> None:
    task = make_task(repeat="monthly", start_time="2024-01-01T10:00", end_time="2024-01-01T09:00")
    assert project(task).duration_minutes == 15


def test_non_repeating_timed_task_is_single_placement(make_task) -> None:
    task = make_task(start_time="2024-01-02T09:00", end_time="2024-01-02T09:45")

    spec = project(task)

    assert spec.rrule is None
    assert spec.is_recurring is False
    assert spec.start == task.start_time
    assert spec.end == task.end_time
    assert spec.all_day is False


def test_non_repeating_all_day_task_anchors_on_due_date(make_task) -> None:
    task = make_task(due_date="2024-03-05")

    spec = project(task)

    assert spec.all_day is True
    assert spec.start == date(2024, 3, 5)
    assert spec.end is None


def test_daily_task(make_task) -> None:
    task = make_task(repeat="daily", start_time="2024-01-01T07:00", end_time="2024-01-01T07:30")

    spec = project(task)

    assert spec.rrule.freq == Frequency.DAILY
    assert spec.rrule.byweekday is None
    assert spec.duration_minutes == 30


def test_all_day_repeating_task_has_no_duration(make_task) -> None:
    task = make_task(repeat="daily", due_date="2024-01-10")

    spec = project(task)

    assert spec.all_day is True
    assert spec.rrule.dtstart == date(2024, 1, 10)
    assert spec.duration_minutes is None


def test_weekdays_ignores_repeat_days(make_task) -> None:
    task = make_task(
        repeat="weekdays",
        repeat_days=["sat"],
        start_time="2024-01-01T09:00",
        end_time="2024-01-01T10:00",
    )

    spec = project(task)

    assert spec.rrule.freq == Frequency.WEEKLY
    assert spec.rrule.byweekday == ["mo", "tu", "we", "th", "fr"]


def test_weekly_with_no_days_is_an_empty_weekday_set(make_task) -> None:
    task = make_task(repeat="weekly", start_time="2024-01-01T09:00", end_time="2024-01-01T10:00")

    spec = project(task)

    assert spec.rrule.byweekday == []


def test_monthly_task_has_no_weekday_set(make_task) -> None:
    task = make_task(repeat="monthly", start_time="2024-01-31T18:00", end_time="2024-01-31T20:00")

    spec = project(task)

    assert spec.rrule.freq == Frequency.MONTHLY
    assert spec.rrule.byweekday is None
    assert spec.duration_minutes == 120


def test_projection_is_deterministic(make_task) -> None:
    task = make_task(
        repeat="weekly",
        repeat_days=["fri", "tue"],
        start_time="2024-01-02T09:00",
        end_time="2024-01-02T09:20",
    )
    assert project(task) == project(task)
    assert project(task).model_dump() == project(task).model_dump()


def test_task_without_anchor_projects_to_none(make_task) -> None:
    task = make_task(due_date=None)
    assert project(task) is None


def test_project_all_skips_tasks_without_anchor(make_task) -> None:
    good = make_task(title="good")
    bad = make_task(title="bad", due_date=None)

    specs = project_all([bad, good])

    assert [s.title for s in specs] == ["good"]


def test_untimed_display_duration_defaults_to_thirty(make_task) -> None:
    assert display_duration_minutes(make_task()) == 30


def test_event_color_by_view(make_task) -> None:
    task = make_task(category="work", priority="high")
    assert event_color(task, CalendarView.WEEK) == CATEGORY_COLORS["work"]
    assert event_color(task, CalendarView.MONTH) == PRIORITY_COLORS["high"]

    plain = make_task()
    assert event_color(plain, CalendarView.WEEK) == CATEGORY_COLORS["other"]
    assert event_color(plain, CalendarView.MONTH) == NEUTRAL_COLOR
