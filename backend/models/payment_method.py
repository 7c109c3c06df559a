"""Payment method model definitions."""

import uuid

from sqlalchemy import Boolean, Column, String

from backend.database import Base


class PaymentMethod(Base):
    """A payment option accepted at the front desk."""
    __tablename__ = "payment_methods"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=False)
    description = Column(String)
    active = Column(Boolean, default=True)
