# tests/test_calendar_grid.py

from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta

import pytest

from app.utils.calendar_grid import (
    CalendarView,
    month_label,
    month_matrix,
    shift_anchor,
    visible_range,
    week_range,
)


@pytest.mark.parametrize("year", [1999, 2000, 2023, 2024, 2100])
@pytest.mark.parametrize("month", range(12))
def test_month_matrix_covers_every_day_once(year: int, month: int) -> None:
    matrix = month_matrix(year, month)
    days_in_month = calendar.monthrange(year, month + 1)[1]

    assert all(len(row) == 7 for row in matrix)
    cells = [cell for row in matrix for cell in row if cell is not None]
    assert cells == list(range(1, days_in_month + 1))


@pytest.mark.parametrize("month", range(12))
def test_month_matrix_first_day_sits_under_its_weekday(month: int) -> None:
    matrix = month_matrix(2024, month)
    first_weekday = date(2024, month + 1, 1).weekday()

    assert matrix[0][first_weekday] == 1
    assert matrix[0][:first_weekday] == [None] * first_weekday


def test_february_of_a_leap_year() -> None:
    matrix = month_matrix(2024, 1)
    cells = [cell for row in matrix for cell in row if cell is not None]

    assert cells[-1] == 29
    assert len(cells) == 29
    # 1 Feb 2024 is a Thursday
    assert matrix[0] == [None, None, None, 1, 2, 3, 4]
    assert matrix[-1] == [26, 27, 28, 29, None, None, None]


def test_month_starting_on_sunday_pads_six_cells() -> None:
    # 1 Sep 2024 is a Sunday
    matrix = month_matrix(2024, 8)
    assert matrix[0] == [None] * 6 + [1]


def test_month_matrix_rejects_out_of_range_month() -> None:
    with pytest.raises(ValueError):
        month_matrix(2024, 12)
    with pytest.raises(ValueError):
        month_matrix(2024, -1)


def test_week_range_is_monday_to_sunday_around_the_date() -> None:
    start = date(2023, 12, 20)
    for offset in range(60):
        day = start + timedelta(days=offset)
        week = week_range(day)

        assert len(week) == 7
        assert week[0].weekday() == 0
        assert day in week
        assert all(b - a == timedelta(days=1) for a, b in zip(week, week[1:]))


def test_sunday_ends_the_week() -> None:
    sunday = date(2024, 1, 7)
    week = week_range(sunday)
    assert week[0] == date(2024, 1, 1)
    assert week[-1] == sunday


def test_week_range_accepts_datetimes() -> None:
    week = week_range(datetime(2024, 2, 29, 23, 30))
    assert week[0] == date(2024, 2, 26)
    assert week[-1] == date(2024, 3, 3)


def test_shift_anchor_by_week_and_month() -> None:
    anchor = date(2024, 1, 31)
    assert shift_anchor(anchor, CalendarView.WEEK, 1) == date(2024, 2, 7)
    assert shift_anchor(anchor, CalendarView.WEEK, -1) == date(2024, 1, 24)
    assert shift_anchor(anchor, CalendarView.MONTH, 1) == date(2024, 2, 29)
    assert shift_anchor(anchor, CalendarView.MONTH, -2) == date(2023, 11, 30)
    assert shift_anchor(anchor, CalendarView.MONTH, 0) == anchor


def test_visible_range() -> None:
    assert visible_range(date(2024, 1, 3), CalendarView.WEEK) == (date(2024, 1, 1), date(2024, 1, 7))
    assert visible_range(date(2024, 2, 14), CalendarView.MONTH) == (date(2024, 2, 1), date(2024, 2, 29))
    assert visible_range(date(2023, 12, 31), CalendarView.MONTH) == (date(2023, 12, 1), date(2023, 12, 31))


def test_month_label() -> None:
    assert month_label(date(2024, 2, 10)) == date(2024, 2, 1).strftime("%B %Y")


def test_month_matrix_at_the_edges_of_the_calendar() -> None:
    december = month_matrix(9999, 11)
    assert [cell for row in december for cell in row if cell is not None][-1] == 31

    january = month_matrix(1, 0)
    assert january[0][0] == 1
