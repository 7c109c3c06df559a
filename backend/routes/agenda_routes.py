from datetime import date, datetime

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel
from sqlalchemy.orm import Session

from backend.agenda.classification import Column
from backend.agenda.navigation import Direction
from backend.agenda.periods import DEFAULT_GRANULARITY, Granularity
from backend.agenda.records import AppointmentRecord
from backend.agenda.status import status_color
from backend.agenda.view_controller import AgendaSnapshot, AgendaViewController, LoadState
from backend.core import config
from backend.repositories.clinic_repository import make_appointment_fetcher
from backend.routes.dependencies import database_unavailable, ensure_database_ready, get_db

router = APIRouter(tags=['agenda'])

if config.DEFAULT_AGENDA_GRANULARITY in config.AGENDA_GRANULARITIES:
    CONFIGURED_GRANULARITY = Granularity(config.DEFAULT_AGENDA_GRANULARITY)
else:
    CONFIGURED_GRANULARITY = DEFAULT_GRANULARITY


class AppointmentCardResponse(BaseModel):
    id: str
    patient_name: str
    scheduled_at: datetime
    time_label: str
    consultation_type: str
    status: str
    status_color: str
    notes: str | None = None


class AgendaColumnResponse(BaseModel):
    label: str
    date: date
    start: datetime
    end: datetime
    appointment_count: int
    appointments: list[AppointmentCardResponse]


class AgendaResponse(BaseModel):
    granularity: Granularity
    reference_date: date
    period_label: str
    start: datetime
    end: datetime
    columns: list[AgendaColumnResponse]
    status_counts: dict[str, int]


def build_appointment_card(appointment: AppointmentRecord) -> AppointmentCardResponse:
    return AppointmentCardResponse(
        id=appointment.id,
        patient_name=appointment.patient_name,
        scheduled_at=appointment.scheduled_at,
        time_label=appointment.scheduled_at.strftime('%H:%M'),
        consultation_type=appointment.consultation_type,
        status=appointment.status,
        status_color=status_color(appointment.status),
        notes=appointment.notes,
    )


def build_agenda_column(column: Column) -> AgendaColumnResponse:
    return AgendaColumnResponse(
        label=column.label,
        date=column.column_date,
        start=column.start,
        end=column.end,
        appointment_count=column.count,
        appointments=[build_appointment_card(appointment) for appointment in column.appointments],
    )


def build_agenda_response(snapshot: AgendaSnapshot) -> AgendaResponse:
    return AgendaResponse(
        granularity=snapshot.granularity,
        reference_date=snapshot.reference.date(),
        period_label=snapshot.period_label,
        start=snapshot.start,
        end=snapshot.end,
        columns=[build_agenda_column(column) for column in snapshot.columns],
        status_counts=snapshot.status_counts,
    )


def agenda_or_unavailable(controller: AgendaViewController) -> AgendaResponse:
    if controller.load_state is LoadState.ERROR:
        raise database_unavailable() from controller.last_error
    return build_agenda_response(controller.snapshot())


@router.get('', response_model=AgendaResponse)
async def get_agenda(
    granularity: Granularity = Query(default=CONFIGURED_GRANULARITY),
    reference_date: date | None = Query(default=None),
    db: Session = Depends(get_db),
):
    ensure_database_ready()

    controller = AgendaViewController(
        make_appointment_fetcher(db),
        granularity=granularity,
        reference=reference_date,
    )
    await controller.refresh()

    return agenda_or_unavailable(controller)


@router.get('/navigate', response_model=AgendaResponse)
async def navigate_agenda(
    direction: Direction = Query(...),
    granularity: Granularity = Query(default=CONFIGURED_GRANULARITY),
    reference_date: date | None = Query(default=None),
    db: Session = Depends(get_db),
):
    ensure_database_ready()

    controller = AgendaViewController(
        make_appointment_fetcher(db),
        granularity=granularity,
        reference=reference_date,
    )
    await controller.navigate(direction)

    return agenda_or_unavailable(controller)
