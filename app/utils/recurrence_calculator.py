"""Expansion of projected recurrence rules into concrete occurrences"""
from datetime import date, datetime, time, timedelta
from typing import Iterable, List, Optional, Union
import logging

from dateutil.rrule import DAILY, MONTHLY, WEEKLY, MO, TU, WE, TH, FR, SA, SU, rrule

from app.config import MAX_OCCURRENCES_PER_RULE
from app.models.occurrence import Occurrence, OccurrenceSpec, RecurrenceRule
from app.models.recurrence import Frequency, MIN_DURATION_MINUTES
from app.utils.datetime_helper import from_local_wall, minutes_between, to_local_wall

logger = logging.getLogger(__name__)

FREQUENCY_MAP = {
    Frequency.DAILY: DAILY,
    Frequency.WEEKLY: WEEKLY,
    Frequency.MONTHLY: MONTHLY,
}

RRULE_WEEKDAYS = {
    "mo": MO,
    "tu": TU,
    "we": WE,
    "th": TH,
    "fr": FR,
    "sa": SA,
    "su": SU,
}

Bound = Union[date, datetime]


def _to_wall(value: Bound) -> datetime:
    """Naive local wall-clock datetime for a date (midnight) or an instant"""
    if isinstance(value, datetime):
        return to_local_wall(value)
    return datetime.combine(value, time.min)


def build_rrule(rule: RecurrenceRule) -> Optional[rrule]:
    """
    Build a dateutil rrule in local wall-clock time.

    Returns None for a weekly rule with an empty weekday set, which
    repeats on no day.
    """
    byweekday = None
    if rule.byweekday is not None:
        codes = [code for code in rule.byweekday if code in RRULE_WEEKDAYS]
        if not codes:
            return None
        byweekday = [RRULE_WEEKDAYS[code] for code in codes]

    return rrule(
        FREQUENCY_MAP[rule.freq],
        dtstart=_to_wall(rule.dtstart),
        byweekday=byweekday,
    )


def _placement_length(spec: OccurrenceSpec) -> timedelta:
    if spec.all_day:
        return timedelta(days=1)
    if spec.rrule is not None:
        return timedelta(minutes=spec.duration_minutes or MIN_DURATION_MINUTES)
    if spec.end is None:
        return timedelta(minutes=MIN_DURATION_MINUTES)
    return timedelta(minutes=max(MIN_DURATION_MINUTES, minutes_between(spec.start, spec.end)))


def _occurrence(spec: OccurrenceSpec, start_wall: datetime, length: timedelta) -> Occurrence:
    return Occurrence(
        task_id=spec.id,
        title=spec.title,
        start=from_local_wall(start_wall),
        end=from_local_wall(start_wall + length),
        all_day=spec.all_day,
    )


def expand(
    spec: OccurrenceSpec,
    window_start: Bound,
    window_end: Bound,
    max_occurrences: Optional[int] = None,
) -> List[Occurrence]:
    """
    Materialize the occurrences of a projected task inside a window.

    Args:
        spec: Output of the projection engine
        window_start: Inclusive window start (a date means local midnight)
        window_end: Exclusive window end
        max_occurrences: Cap on the number of occurrences returned
            (defaults to MAX_OCCURRENCES_PER_RULE)

    Returns:
        Occurrences whose span intersects [window_start, window_end),
        ordered by start
    """
    if max_occurrences is None:
        max_occurrences = MAX_OCCURRENCES_PER_RULE

    ws = _to_wall(window_start)
    we = _to_wall(window_end)
    if we <= ws or (spec.start is None and spec.rrule is None):
        return []

    length = _placement_length(spec)

    if spec.rrule is None:
        start_wall = _to_wall(spec.start)
        if start_wall < we and start_wall + length > ws:
            return [_occurrence(spec, start_wall, length)]
        return []

    rule = build_rrule(spec.rrule)
    if rule is None:
        return []

    occurrences: List[Occurrence] = []
    # Starts after ws - length are exactly the placements ending after ws
    for start_wall in rule.xafter(ws - length, inc=False):
        if start_wall >= we:
            break
        if len(occurrences) >= max_occurrences:
            logger.warning(
                f"Expansion of task {spec.id} truncated at {max_occurrences} occurrences"
            )
            break
        occurrences.append(_occurrence(spec, start_wall, length))

    return occurrences


def expand_all(
    specs: Iterable[OccurrenceSpec],
    window_start: Bound,
    window_end: Bound,
    max_occurrences: Optional[int] = None,
) -> List[Occurrence]:
    """Expand every spec and merge the results ordered by start"""
    occurrences: List[Occurrence] = []
    for spec in specs:
        occurrences.extend(expand(spec, window_start, window_end, max_occurrences))
    occurrences.sort(key=lambda o: (o.start, str(o.task_id)))
    return occurrences


def next_occurrence(spec: OccurrenceSpec, after: datetime) -> Optional[datetime]:
    """
    Start of the first occurrence strictly after an instant.

    Returns:
        An aware local datetime, or None if the task never occurs again
    """
    after_wall = to_local_wall(after)

    if spec.rrule is None:
        if spec.start is None:
            return None
        start_wall = _to_wall(spec.start)
        return from_local_wall(start_wall) if start_wall > after_wall else None

    rule = build_rrule(spec.rrule)
    if rule is None:
        return None

    found = rule.after(after_wall, inc=False)
    return from_local_wall(found) if found is not None else None


