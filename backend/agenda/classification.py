"""Assign appointments to the columns of the active agenda view."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime

from backend.agenda.periods import (
    ColumnSlot,
    Granularity,
    as_datetime,
    end_of_week,
    enumerate_columns,
    start_of_week,
)
from backend.agenda.records import AppointmentRecord


@dataclass(frozen=True)
class Column:
    column_date: date
    start: datetime
    end: datetime
    label: str
    appointments: tuple[AppointmentRecord, ...]

    @property
    def count(self) -> int:
        return len(self.appointments)


def classify(appointment: AppointmentRecord, column_date: date | datetime, granularity: Granularity) -> bool:
    """Return whether ``appointment`` belongs in the column anchored at ``column_date``.

    Month columns are whole Monday..Sunday weeks, so an appointment in a week
    that straddles two months matches that week's column in both month views.
    Year columns compare the month only; the fetch already constrains the year.
    """
    granularity = Granularity(granularity)
    scheduled_at = appointment.scheduled_at
    column_date = as_datetime(column_date)

    if granularity in (Granularity.DAY, Granularity.WEEK):
        return scheduled_at.date() == column_date.date()
    if granularity is Granularity.MONTH:
        return start_of_week(column_date) <= scheduled_at <= end_of_week(column_date)
    return scheduled_at.month == column_date.month


def attach_appointments(
    slots: Iterable[ColumnSlot],
    appointments: Iterable[AppointmentRecord],
    granularity: Granularity,
) -> list[Column]:
    appointments = tuple(appointments)
    return [
        Column(
            column_date=slot.column_date,
            start=slot.start,
            end=slot.end,
            label=slot.label,
            appointments=tuple(
                appointment
                for appointment in appointments
                if classify(appointment, slot.column_date, granularity)
            ),
        )
        for slot in slots
    ]


def build_columns(
    appointments: Iterable[AppointmentRecord],
    reference: date | datetime,
    granularity: Granularity,
) -> list[Column]:
    return attach_appointments(enumerate_columns(reference, granularity), appointments, granularity)
