"""Calendar period arithmetic for the agenda views.

Weeks start on Monday. Period ends are the last representable instant of
their final day, so a fetch filter of ``start <= t <= end`` covers the whole
period without reaching into the next one.
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from enum import Enum

from dateutil.relativedelta import relativedelta

WEEK_STARTS_ON = 0  # Monday, per date.weekday()
DAYS_PER_WEEK = 7
MONTHS_PER_YEAR = 12


class Granularity(str, Enum):
    DAY = 'day'
    WEEK = 'week'
    MONTH = 'month'
    YEAR = 'year'


DEFAULT_GRANULARITY = Granularity.WEEK


@dataclass(frozen=True)
class ColumnSlot:
    """One displayed subdivision of a period, before appointments are attached."""

    column_date: date
    start: datetime
    end: datetime
    label: str


def as_datetime(value: date | datetime) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def start_of_day(value: date | datetime) -> datetime:
    return datetime.combine(as_datetime(value).date(), time.min)


def end_of_day(value: date | datetime) -> datetime:
    return datetime.combine(as_datetime(value).date(), time.max)


def start_of_week(value: date | datetime) -> datetime:
    day_start = start_of_day(value)
    offset = (day_start.weekday() - WEEK_STARTS_ON) % DAYS_PER_WEEK
    return day_start - timedelta(days=offset)


def end_of_week(value: date | datetime) -> datetime:
    return end_of_day(start_of_week(value) + timedelta(days=DAYS_PER_WEEK - 1))


def start_of_month(value: date | datetime) -> datetime:
    return start_of_day(value).replace(day=1)


def end_of_month(value: date | datetime) -> datetime:
    last_day = start_of_month(value) + relativedelta(months=1) - timedelta(days=1)
    return end_of_day(last_day)


def start_of_year(value: date | datetime) -> datetime:
    return start_of_day(value).replace(month=1, day=1)


def end_of_year(value: date | datetime) -> datetime:
    return end_of_day(start_of_year(value).replace(month=12, day=31))


def compute_bounds(reference: date | datetime, granularity: Granularity) -> tuple[datetime, datetime]:
    """Return the inclusive ``(start, end)`` of the period containing ``reference``."""
    granularity = Granularity(granularity)

    if granularity is Granularity.DAY:
        return start_of_day(reference), end_of_day(reference)
    if granularity is Granularity.WEEK:
        return start_of_week(reference), end_of_week(reference)
    if granularity is Granularity.MONTH:
        return start_of_month(reference), end_of_month(reference)
    return start_of_year(reference), end_of_year(reference)


def _day_slot(day: datetime, label: str) -> ColumnSlot:
    return ColumnSlot(column_date=day.date(), start=start_of_day(day), end=end_of_day(day), label=label)


def enumerate_columns(reference: date | datetime, granularity: Granularity) -> list[ColumnSlot]:
    """Return the columns of the period containing ``reference``, oldest first.

    Month views are split into Monday-started weeks; the first and last of
    those may reach into the neighbouring months.
    """
    granularity = Granularity(granularity)
    start, end = compute_bounds(reference, granularity)

    if granularity is Granularity.DAY:
        return [_day_slot(start, start.strftime('%A, %d %B'))]

    if granularity is Granularity.WEEK:
        days = [start + timedelta(days=offset) for offset in range(DAYS_PER_WEEK)]
        return [_day_slot(day, f"{day.strftime('%a')} {day.strftime('%d/%m')}") for day in days]

    if granularity is Granularity.MONTH:
        slots: list[ColumnSlot] = []
        week_start = start_of_week(start)
        while week_start <= end:
            slots.append(
                ColumnSlot(
                    column_date=week_start.date(),
                    start=week_start,
                    end=end_of_week(week_start),
                    label=f'Week {len(slots) + 1}',
                )
            )
            week_start += timedelta(days=DAYS_PER_WEEK)
        return slots

    slots = []
    for month_index in range(MONTHS_PER_YEAR):
        month_start = start + relativedelta(months=month_index)
        slots.append(
            ColumnSlot(
                column_date=month_start.date(),
                start=month_start,
                end=end_of_month(month_start),
                label=month_start.strftime('%B'),
            )
        )
    return slots


def period_label(reference: date | datetime, granularity: Granularity) -> str:
    granularity = Granularity(granularity)
    reference = as_datetime(reference)

    if granularity is Granularity.DAY:
        return reference.strftime('%d %B %Y')
    if granularity is Granularity.WEEK:
        week_start, week_end = compute_bounds(reference, granularity)
        return f"{week_start.strftime('%d/%m')} - {week_end.strftime('%d/%m/%Y')}"
    if granularity is Granularity.MONTH:
        return reference.strftime('%B %Y')
    return reference.strftime('%Y')
