"""Appointment model definitions."""

import uuid

from sqlalchemy import Column, DateTime, ForeignKey, String, func
from sqlalchemy.orm import relationship

from backend.database import Base


class Appointment(Base):
    """Represents a scheduled consultation."""
    __tablename__ = "appointments"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    patient_id = Column(String(36), ForeignKey("patients.id"), nullable=False)
    scheduled_at = Column(DateTime, nullable=False)
    consultation_type = Column(String, nullable=False)
    status = Column(String, nullable=False, default="scheduled")
    notes = Column(String)
    created_at = Column(DateTime, server_default=func.now())

    patient = relationship("Patient", back_populates="appointments")
