"""Appointment status taxonomy and its display lookup tables.

Labels outside the taxonomy are displayed as ``DEFAULT_STATUS``. Reporting
does not coerce them; see ``backend.agenda.summary``.
"""

from enum import Enum


class AppointmentStatus(str, Enum):
    SCHEDULED = 'scheduled'
    CONFIRMED = 'confirmed'
    CANCELED = 'canceled'
    COMPLETED = 'completed'


KNOWN_STATUSES = tuple(status.value for status in AppointmentStatus)
DEFAULT_STATUS = AppointmentStatus.SCHEDULED

STATUS_COLORS = {
    AppointmentStatus.SCHEDULED: 'blue',
    AppointmentStatus.CONFIRMED: 'green',
    AppointmentStatus.CANCELED: 'red',
    AppointmentStatus.COMPLETED: 'gray',
}

STATUS_BADGE_VARIANTS = {
    AppointmentStatus.SCHEDULED: 'default',
    AppointmentStatus.CONFIRMED: 'secondary',
    AppointmentStatus.CANCELED: 'destructive',
    AppointmentStatus.COMPLETED: 'outline',
}


def normalize_status(label: str | None) -> AppointmentStatus:
    if label in KNOWN_STATUSES:
        return AppointmentStatus(label)
    return DEFAULT_STATUS


def status_color(label: str | None) -> str:
    return STATUS_COLORS[normalize_status(label)]


def status_badge_variant(label: str | None) -> str:
    return STATUS_BADGE_VARIANTS[normalize_status(label)]
