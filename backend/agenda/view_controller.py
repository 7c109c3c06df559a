"""Stateful agenda view: granularity, reference date and the loaded appointments.

Only the fetch suspends. Every state change issues a new request number and a
response is applied only if its number is still the latest one, so a slow
fetch for a period the user already left can never overwrite newer data.

Columns, counts and the period label always describe the period the loaded
appointments belong to. While a fetch is pending or after it failed, the view
keeps showing the last period that loaded; the requested granularity and
reference stay in place for the next attempt.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from backend.agenda.classification import Column, build_columns
from backend.agenda.navigation import Direction, advance
from backend.agenda.periods import DEFAULT_GRANULARITY, Granularity, as_datetime, compute_bounds, period_label
from backend.agenda.records import AppointmentFetcher, AppointmentRecord, FetchError
from backend.agenda.summary import summarize

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = 'Could not load appointments.'


class LoadState(str, Enum):
    IDLE = 'idle'
    LOADING = 'loading'
    READY = 'ready'
    ERROR = 'error'


@dataclass(frozen=True)
class AgendaSnapshot:
    granularity: Granularity
    reference: datetime
    period_label: str
    start: datetime
    end: datetime
    load_state: LoadState
    columns: list[Column]
    status_counts: dict[str, int]
    error: str | None = None


class AgendaViewController:
    def __init__(
        self,
        fetch_appointments: AppointmentFetcher,
        granularity: Granularity = DEFAULT_GRANULARITY,
        reference: date | datetime | None = None,
        notify_error: Callable[[str], None] | None = None,
    ) -> None:
        self._fetch_appointments = fetch_appointments
        self._notify_error = notify_error
        self._latest_request = 0

        self.granularity = Granularity(granularity)
        self.reference = as_datetime(reference) if reference is not None else datetime.now()
        self.appointments: tuple[AppointmentRecord, ...] = ()
        self.load_state = LoadState.IDLE
        self.last_error: FetchError | None = None
        self._loaded_view: tuple[datetime, Granularity] | None = None

    @property
    def bounds(self) -> tuple[datetime, datetime]:
        return compute_bounds(self.reference, self.granularity)

    @property
    def displayed_view(self) -> tuple[datetime, Granularity]:
        """Reference and granularity of the period currently on screen."""
        if self.load_state is not LoadState.READY and self._loaded_view is not None:
            return self._loaded_view
        return self.reference, self.granularity

    @property
    def period_label(self) -> str:
        return period_label(*self.displayed_view)

    @property
    def columns(self) -> list[Column]:
        reference, granularity = self.displayed_view
        return build_columns(self.appointments, reference, granularity)

    @property
    def status_counts(self) -> dict[str, int]:
        return summarize(self.appointments)

    async def set_granularity(self, granularity: Granularity) -> bool:
        self.granularity = Granularity(granularity)
        return await self.refresh()

    async def navigate(self, direction: Direction) -> bool:
        self.reference = advance(self.reference, self.granularity, direction)
        return await self.refresh()

    async def refresh(self) -> bool:
        """Fetch the current period; return whether this call updated the view."""
        self._latest_request += 1
        request_id = self._latest_request
        start, end = self.bounds
        self.load_state = LoadState.LOADING
        logger.debug('Agenda request %s: %s to %s (%s)', request_id, start, end, self.granularity.value)

        try:
            appointments = await self._fetch_appointments(start, end)
        except FetchError as exc:
            if request_id != self._latest_request:
                logger.info('Ignoring failure of superseded agenda request %s', request_id)
                return False

            self.last_error = exc
            self.load_state = LoadState.ERROR
            logger.warning('Agenda request %s failed: %s', request_id, exc)
            if self._notify_error is not None:
                self._notify_error(LOAD_ERROR_MESSAGE)
            return False

        if request_id != self._latest_request:
            logger.debug('Discarding superseded agenda request %s', request_id)
            return False

        self.appointments = tuple(appointments)
        self._loaded_view = (self.reference, self.granularity)
        self.last_error = None
        self.load_state = LoadState.READY
        return True

    def snapshot(self) -> AgendaSnapshot:
        reference, granularity = self.displayed_view
        start, end = compute_bounds(reference, granularity)
        return AgendaSnapshot(
            granularity=granularity,
            reference=reference,
            period_label=self.period_label,
            start=start,
            end=end,
            load_state=self.load_state,
            columns=self.columns,
            status_counts=self.status_counts,
            error=str(self.last_error) if self.last_error is not None else None,
        )
