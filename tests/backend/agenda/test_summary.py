from datetime import datetime

from backend.agenda.status import (
    DEFAULT_STATUS,
    STATUS_COLORS,
    normalize_status,
    status_badge_variant,
    status_color,
)
from backend.agenda.summary import summarize


def test_summarize_reports_every_known_status_even_when_empty() -> None:
    assert summarize([]) == {'scheduled': 0, 'confirmed': 0, 'canceled': 0, 'completed': 0}


def test_summarize_counts_known_labels_and_skips_unknown_ones(make_appointment) -> None:
    appointments = [
        make_appointment(datetime(2026, 1, 5, 9, 0), status='scheduled'),
        make_appointment(datetime(2026, 1, 5, 10, 0), status='confirmed'),
        make_appointment(datetime(2026, 1, 6, 9, 0), status='confirmed'),
        make_appointment(datetime(2026, 1, 7, 9, 0), status='completed'),
        make_appointment(datetime(2026, 1, 8, 9, 0), status='no-show'),
        make_appointment(datetime(2026, 1, 9, 9, 0), status=''),
    ]

    counts = summarize(appointments)

    assert counts == {'scheduled': 1, 'confirmed': 2, 'canceled': 0, 'completed': 1}
    assert 'no-show' not in counts
    assert sum(counts.values()) == 4


def test_unknown_status_is_displayed_as_scheduled() -> None:
    assert normalize_status('no-show') is DEFAULT_STATUS
    assert normalize_status(None) is DEFAULT_STATUS
    assert status_color('no-show') == STATUS_COLORS[DEFAULT_STATUS] == 'blue'
    assert status_badge_variant('') == 'default'


def test_known_statuses_map_to_their_own_entries() -> None:
    assert status_color('canceled') == 'red'
    assert status_color('completed') == 'gray'
    assert status_badge_variant('canceled') == 'destructive'
    assert status_badge_variant('confirmed') == 'secondary'
