"""Date-grid layouts for calendar navigation (weeks start on Monday)"""
from datetime import date, datetime, timedelta
from enum import Enum
from typing import List, Optional, Tuple, Union

from dateutil.relativedelta import relativedelta

from app.utils.datetime_helper import to_local_date


class CalendarView(str, Enum):
    """Visible calendar layout"""
    WEEK = "week"
    MONTH = "month"


def _days_in_month(year: int, month: int) -> int:
    # day=31 clamps to the last day without leaving the month
    return (date(year, month, 1) + relativedelta(day=31)).day


def month_matrix(year: int, month: int) -> List[List[Optional[int]]]:
    """
    Build the day matrix of a month.

    Args:
        year: Calendar year
        month: Zero-based month index (0 = January, 1 = February, ...)

    Returns:
        Rows of exactly 7 cells, Monday first. Cells before day 1 and after
        the last day are None; the day numbers 1..N appear once each in
        row-major order.

    Raises:
        ValueError: If month is outside 0..11
    """
    if not 0 <= month <= 11:
        raise ValueError(f"month index must be in 0..11, got {month}")

    first_day = date(year, month + 1, 1)
    start_col = first_day.weekday()  # 0=Monday, 6=Sunday
    days_in_month = _days_in_month(year, month + 1)

    matrix: List[List[Optional[int]]] = []
    row: List[Optional[int]] = [None] * 7
    current_day = 1

    for col in range(start_col, 7):
        row[col] = current_day
        current_day += 1
    matrix.append(row)

    while current_day <= days_in_month:
        row = [None] * 7
        for col in range(7):
            if current_day > days_in_month:
                break
            row[col] = current_day
            current_day += 1
        matrix.append(row)

    return matrix


def week_range(value: Union[date, datetime]) -> List[date]:
    """
    Return the Monday-to-Sunday week containing a date.

    Sunday belongs to the week that started six days earlier. Datetimes
    are reduced to their local calendar date first.
    """
    day = to_local_date(value)
    monday = day - timedelta(days=day.weekday())
    return [monday + timedelta(days=offset) for offset in range(7)]


def shift_anchor(anchor: date, view: CalendarView, step: int) -> date:
    """
    Move the navigation anchor by whole weeks or months.

    In month view the day is clamped to the target month's length
    (Jan 31 + 1 month is Feb 29 in a leap year).
    """
    if view == CalendarView.WEEK:
        return anchor + timedelta(weeks=step)
    return anchor + relativedelta(months=step)


def visible_range(anchor: date, view: CalendarView) -> Tuple[date, date]:
    """First and last date shown for the anchor in the given view"""
    if view == CalendarView.WEEK:
        week = week_range(anchor)
        return week[0], week[-1]
    first = anchor.replace(day=1)
    last = first.replace(day=_days_in_month(first.year, first.month))
    return first, last


def month_label(anchor: date) -> str:
    """Heading such as 'February 2024'"""
    return anchor.strftime("%B %Y")
