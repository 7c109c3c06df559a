from collections.abc import Iterable

from backend.agenda.records import AppointmentRecord
from backend.agenda.status import KNOWN_STATUSES


def summarize(appointments: Iterable[AppointmentRecord]) -> dict[str, int]:
    """Count appointments per known status label.

    Every known label is present, zero when unused. Labels outside the
    taxonomy are left out instead of being folded into the default status.
    """
    counts = {status: 0 for status in KNOWN_STATUSES}
    for appointment in appointments:
        if appointment.status in counts:
            counts[appointment.status] += 1
    return counts
