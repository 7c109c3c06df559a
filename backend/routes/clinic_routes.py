from datetime import date, datetime

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel
from sqlalchemy.orm import Session

from backend.agenda.records import FetchError
from backend.agenda.status import status_badge_variant
from backend.repositories.clinic_repository import (
    fetch_all_appointments,
    fetch_dashboard_stats,
    fetch_patients,
    fetch_payment_methods,
    search_patients,
)
from backend.routes.dependencies import database_unavailable, ensure_database_ready, get_db

router = APIRouter(tags=['clinic'])

DEFAULT_PAYMENT_METHOD_ICON = 'dollar-sign'
PAYMENT_METHOD_ICONS = {
    'cash': 'banknote',
    'debit card': 'credit-card',
    'credit card': 'credit-card',
    'pix': 'smartphone',
    'health insurance': 'building',
}


class PatientResponse(BaseModel):
    id: str
    full_name: str
    document_number: str | None = None
    birth_date: date | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    notes: str | None = None

    class Config:
        from_attributes = True


class PatientOptionResponse(BaseModel):
    id: str
    name: str


class AppointmentListItemResponse(BaseModel):
    id: str
    patient_name: str
    scheduled_at: datetime
    consultation_type: str
    status: str
    badge_variant: str
    notes: str | None = None


class PaymentMethodResponse(BaseModel):
    id: str
    name: str
    description: str | None = None
    icon: str


class DashboardResponse(BaseModel):
    total_patients: int
    appointments_today: int
    upcoming_appointments: int
    completed_appointments: int


def payment_method_icon(name: str | None) -> str:
    return PAYMENT_METHOD_ICONS.get((name or '').strip().lower(), DEFAULT_PAYMENT_METHOD_ICON)


@router.get('/patients', response_model=list[PatientResponse])
def list_patients(
    search: str | None = Query(default=None),
    db: Session = Depends(get_db),
):
    ensure_database_ready()

    try:
        return search_patients(db, search)
    except FetchError as exc:
        raise database_unavailable() from exc


@router.get('/patients/options', response_model=list[PatientOptionResponse])
def list_patient_options(db: Session = Depends(get_db)):
    ensure_database_ready()

    try:
        patients = fetch_patients(db)
    except FetchError as exc:
        raise database_unavailable() from exc

    return [PatientOptionResponse(id=patient.id, name=patient.name) for patient in patients]


@router.get('/appointments', response_model=list[AppointmentListItemResponse])
def list_appointments(db: Session = Depends(get_db)):
    ensure_database_ready()

    try:
        appointments = fetch_all_appointments(db)
    except FetchError as exc:
        raise database_unavailable() from exc

    return [
        AppointmentListItemResponse(
            id=appointment.id,
            patient_name=appointment.patient_name,
            scheduled_at=appointment.scheduled_at,
            consultation_type=appointment.consultation_type,
            status=appointment.status,
            badge_variant=status_badge_variant(appointment.status),
            notes=appointment.notes,
        )
        for appointment in appointments
    ]


@router.get('/payment-methods', response_model=list[PaymentMethodResponse])
def list_payment_methods(db: Session = Depends(get_db)):
    ensure_database_ready()

    try:
        payment_methods = fetch_payment_methods(db)
    except FetchError as exc:
        raise database_unavailable() from exc

    return [
        PaymentMethodResponse(
            id=payment_method.id,
            name=payment_method.name,
            description=payment_method.description,
            icon=payment_method_icon(payment_method.name),
        )
        for payment_method in payment_methods
    ]


@router.get('/dashboard', response_model=DashboardResponse)
def get_dashboard(db: Session = Depends(get_db)):
    ensure_database_ready()

    try:
        stats = fetch_dashboard_stats(db, now=datetime.now())
    except FetchError as exc:
        raise database_unavailable() from exc

    return DashboardResponse(
        total_patients=stats.total_patients,
        appointments_today=stats.appointments_today,
        upcoming_appointments=stats.upcoming_appointments,
        completed_appointments=stats.completed_appointments,
    )
