from datetime import date, datetime

import pytest

from backend.agenda.periods import (
    Granularity,
    compute_bounds,
    end_of_month,
    enumerate_columns,
    period_label,
    start_of_week,
)

WEDNESDAY = datetime(2026, 1, 7, 10, 30)


def test_week_bounds_run_from_monday_start_to_sunday_end() -> None:
    start, end = compute_bounds(WEDNESDAY, Granularity.WEEK)

    assert start == datetime(2026, 1, 5, 0, 0)
    assert end == datetime(2026, 1, 11, 23, 59, 59, 999999)


def test_week_columns_are_monday_through_sunday() -> None:
    columns = enumerate_columns(WEDNESDAY, Granularity.WEEK)

    assert [column.column_date for column in columns] == [date(2026, 1, day) for day in range(5, 12)]
    assert columns[0].label == 'Mon 05/01'
    assert columns[-1].label == 'Sun 11/01'


def test_day_bounds_cover_the_whole_reference_day() -> None:
    start, end = compute_bounds(WEDNESDAY, Granularity.DAY)

    assert start == datetime(2026, 1, 7, 0, 0)
    assert end == datetime(2026, 1, 7, 23, 59, 59, 999999)


def test_day_view_has_a_single_column_with_full_weekday_label() -> None:
    columns = enumerate_columns(WEDNESDAY, Granularity.DAY)

    assert len(columns) == 1
    assert columns[0].column_date == date(2026, 1, 7)
    assert columns[0].label == 'Wednesday, 07 January'


def test_month_bounds_handle_leap_february() -> None:
    start, end = compute_bounds(date(2024, 2, 10), Granularity.MONTH)

    assert start == datetime(2024, 2, 1, 0, 0)
    assert end == datetime(2024, 2, 29, 23, 59, 59, 999999)


def test_month_columns_are_weeks_intersecting_the_month() -> None:
    columns = enumerate_columns(WEDNESDAY, Granularity.MONTH)

    assert [column.column_date for column in columns] == [
        date(2025, 12, 29),
        date(2026, 1, 5),
        date(2026, 1, 12),
        date(2026, 1, 19),
        date(2026, 1, 26),
    ]
    assert [column.label for column in columns] == ['Week 1', 'Week 2', 'Week 3', 'Week 4', 'Week 5']
    assert columns[-1].end == datetime(2026, 2, 1, 23, 59, 59, 999999)


def test_month_starting_on_monday_begins_with_its_own_first_day() -> None:
    columns = enumerate_columns(date(2026, 6, 15), Granularity.MONTH)

    assert columns[0].column_date == date(2026, 6, 1)
    assert len(columns) == 5


def test_year_view_has_one_column_per_month() -> None:
    columns = enumerate_columns(WEDNESDAY, Granularity.YEAR)

    assert len(columns) == 12
    assert columns[0].label == 'January'
    assert columns[-1].label == 'December'
    assert columns[1].end == datetime(2026, 2, 28, 23, 59, 59, 999999)


def test_year_bounds_span_january_first_to_december_last() -> None:
    assert compute_bounds(WEDNESDAY, Granularity.YEAR) == (
        datetime(2026, 1, 1, 0, 0),
        datetime(2026, 12, 31, 23, 59, 59, 999999),
    )


def test_start_of_week_on_sunday_goes_back_to_monday() -> None:
    assert start_of_week(date(2026, 1, 11)) == datetime(2026, 1, 5)


def test_end_of_month_in_december() -> None:
    assert end_of_month(date(2026, 12, 3)) == datetime(2026, 12, 31, 23, 59, 59, 999999)


@pytest.mark.parametrize(
    ('granularity', 'label'),
    [
        (Granularity.DAY, '07 January 2026'),
        (Granularity.WEEK, '05/01 - 11/01/2026'),
        (Granularity.MONTH, 'January 2026'),
        (Granularity.YEAR, '2026'),
    ],
)
def test_period_label(granularity: Granularity, label: str) -> None:
    assert period_label(WEDNESDAY, granularity) == label


@pytest.mark.parametrize('granularity', list(Granularity))
@pytest.mark.parametrize(
    'reference',
    [
        datetime(2026, 1, 1, 0, 0),
        datetime(2026, 1, 7, 10, 30),
        datetime(2026, 2, 28, 23, 59),
        datetime(2024, 2, 29, 12, 0),
        datetime(2026, 12, 31, 23, 59, 59, 999999),
    ],
)
def test_columns_are_ascending_and_span_the_reference(granularity: Granularity, reference: datetime) -> None:
    columns = enumerate_columns(reference, granularity)

    assert columns
    assert [column.start for column in columns] == sorted(column.start for column in columns)
    assert columns[0].start <= reference <= columns[-1].end


def test_granularity_accepts_plain_strings() -> None:
    assert compute_bounds(WEDNESDAY, 'week') == compute_bounds(WEDNESDAY, Granularity.WEEK)
