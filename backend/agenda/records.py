"""Read-only records handed to the agenda core by the data layer."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import datetime


class FetchError(Exception):
    """The backing store could not serve a read."""


@dataclass(frozen=True)
class AppointmentRecord:
    id: str
    scheduled_at: datetime
    consultation_type: str
    status: str
    patient_name: str
    notes: str | None = None


@dataclass(frozen=True)
class PatientRecord:
    id: str
    name: str


# (start, end) -> appointments with start <= scheduled_at <= end, ascending.
AppointmentFetcher = Callable[[datetime, datetime], Awaitable[list[AppointmentRecord]]]
