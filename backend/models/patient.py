"""Patient model definitions."""

import uuid

from sqlalchemy import Column, Date, DateTime, String, func
from sqlalchemy.orm import relationship

from backend.database import Base


class Patient(Base):
    """A person registered with the clinic."""
    __tablename__ = "patients"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    full_name = Column(String, nullable=False, index=True)
    document_number = Column(String)
    birth_date = Column(Date)
    phone = Column(String)
    email = Column(String)
    address = Column(String)
    notes = Column(String)
    created_at = Column(DateTime, server_default=func.now())

    appointments = relationship("Appointment", back_populates="patient")
