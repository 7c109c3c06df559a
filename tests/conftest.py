import os
from datetime import datetime

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault('DATABASE_URL', 'sqlite:///./test.db')

from backend.agenda.records import AppointmentRecord  # noqa: E402
from backend.database import Base  # noqa: E402
from backend.models.appointment import Appointment  # noqa: E402
from backend.models.patient import Patient  # noqa: E402
from backend.models.payment_method import PaymentMethod  # noqa: E402


def build_appointment_record(
    scheduled_at: datetime,
    status: str = 'scheduled',
    record_id: str | None = None,
    patient_name: str = 'Ana Souza',
) -> AppointmentRecord:
    return AppointmentRecord(
        id=record_id or scheduled_at.isoformat(),
        scheduled_at=scheduled_at,
        consultation_type='Cleaning',
        status=status,
        patient_name=patient_name,
    )


@pytest.fixture
def clinic_db():
    # One shared connection so the threadpool-backed fetcher sees the same in-memory database.
    engine = create_engine(
        'sqlite:///:memory:',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    tables = [Patient.__table__, Appointment.__table__, PaymentMethod.__table__]
    Base.metadata.create_all(bind=engine, tables=tables)

    db = testing_session_local()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine, tables=list(reversed(tables)))


@pytest.fixture
def make_appointment():
    return build_appointment_record


class BrokenSession:
    """Stands in for a session whose database is unreachable."""

    def query(self, *args, **kwargs):
        from sqlalchemy.exc import OperationalError

        raise OperationalError('SELECT 1', {}, Exception('connection refused'))


@pytest.fixture
def broken_db():
    return BrokenSession()
