"""Read-side queries over the clinic tables.

Every function raises ``FetchError`` when the database cannot be reached, so
callers only ever handle one failure type.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

from fastapi.concurrency import run_in_threadpool
from sqlalchemy import func, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.agenda.periods import start_of_day
from backend.agenda.records import AppointmentFetcher, AppointmentRecord, FetchError, PatientRecord
from backend.agenda.status import AppointmentStatus
from backend.models.appointment import Appointment
from backend.models.patient import Patient
from backend.models.payment_method import PaymentMethod

UPCOMING_STATUSES = (AppointmentStatus.SCHEDULED.value, AppointmentStatus.CONFIRMED.value)


@dataclass(frozen=True)
class DashboardStats:
    total_patients: int
    appointments_today: int
    upcoming_appointments: int
    completed_appointments: int


def _to_record(appointment: Appointment, patient_name: str | None) -> AppointmentRecord:
    return AppointmentRecord(
        id=appointment.id,
        scheduled_at=appointment.scheduled_at,
        consultation_type=appointment.consultation_type or '',
        status=appointment.status or '',
        patient_name=patient_name or '',
        notes=appointment.notes,
    )


def fetch_appointments(db: Session, start: datetime, end: datetime) -> list[AppointmentRecord]:
    try:
        rows = db.query(Appointment, Patient.full_name).outerjoin(
            Patient, Appointment.patient_id == Patient.id,
        ).filter(
            Appointment.scheduled_at >= start,
            Appointment.scheduled_at <= end,
        ).order_by(Appointment.scheduled_at.asc()).all()
    except SQLAlchemyError as exc:
        raise FetchError('Could not load appointments.') from exc

    return [_to_record(appointment, patient_name) for appointment, patient_name in rows]


def fetch_all_appointments(db: Session) -> list[AppointmentRecord]:
    try:
        rows = db.query(Appointment, Patient.full_name).outerjoin(
            Patient, Appointment.patient_id == Patient.id,
        ).order_by(Appointment.scheduled_at.asc()).all()
    except SQLAlchemyError as exc:
        raise FetchError('Could not load appointments.') from exc

    return [_to_record(appointment, patient_name) for appointment, patient_name in rows]


def make_appointment_fetcher(db: Session) -> AppointmentFetcher:
    async def fetch(start: datetime, end: datetime) -> list[AppointmentRecord]:
        return await run_in_threadpool(fetch_appointments, db, start, end)

    return fetch


def fetch_patients(db: Session) -> list[PatientRecord]:
    try:
        rows = db.query(Patient.id, Patient.full_name).order_by(Patient.full_name.asc()).all()
    except SQLAlchemyError as exc:
        raise FetchError('Could not load patients.') from exc

    return [PatientRecord(id=patient_id, name=full_name) for patient_id, full_name in rows]


def search_patients(db: Session, search: str | None = None) -> list[Patient]:
    """Name matches ignore case; document number and phone match by substring."""
    try:
        query = db.query(Patient)
        term = (search or '').strip()
        if term:
            query = query.filter(
                or_(
                    Patient.full_name.icontains(term, autoescape=True),
                    Patient.document_number.contains(term, autoescape=True),
                    Patient.phone.contains(term, autoescape=True),
                )
            )
        return query.order_by(Patient.full_name.asc()).all()
    except SQLAlchemyError as exc:
        raise FetchError('Could not load patients.') from exc


def fetch_payment_methods(db: Session) -> list[PaymentMethod]:
    try:
        return db.query(PaymentMethod).filter(
            PaymentMethod.active.is_(True),
        ).order_by(PaymentMethod.name.asc()).all()
    except SQLAlchemyError as exc:
        raise FetchError('Could not load payment methods.') from exc


def fetch_dashboard_stats(db: Session, now: datetime) -> DashboardStats:
    today = start_of_day(now)
    tomorrow = today + timedelta(days=1)

    try:
        total_patients = db.query(func.count(Patient.id)).scalar() or 0
        appointments_today = db.query(func.count(Appointment.id)).filter(
            Appointment.scheduled_at >= today,
            Appointment.scheduled_at < tomorrow,
            Appointment.status != AppointmentStatus.CANCELED.value,
        ).scalar() or 0
        upcoming_appointments = db.query(func.count(Appointment.id)).filter(
            Appointment.scheduled_at >= tomorrow,
            Appointment.status.in_(UPCOMING_STATUSES),
        ).scalar() or 0
        completed_appointments = db.query(func.count(Appointment.id)).filter(
            Appointment.status == AppointmentStatus.COMPLETED.value,
        ).scalar() or 0
    except SQLAlchemyError as exc:
        raise FetchError('Could not load dashboard statistics.') from exc

    return DashboardStats(
        total_patients=total_patients,
        appointments_today=appointments_today,
        upcoming_appointments=upcoming_appointments,
        completed_appointments=completed_appointments,
    )
