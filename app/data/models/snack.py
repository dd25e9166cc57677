# app/data/models/snack.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Text, Numeric, DateTime, Uuid, CheckConstraint

from app.data.database import Base


def _utcnow():
    return datetime.now(timezone.utc)


class SnackModel(Base):
    __tablename__ = "snacks"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(120), nullable=False)
    description = Column(Text, nullable=True)

    #tylko do wyswietlania
    price = Column(Numeric(10, 2), nullable=False)
    quantity = Column(Integer, nullable=False, default=0)
    image_url = Column(String(255), nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    __table_args__ = (CheckConstraint("quantity >= 0", name="ck_snack_quantity_non_negative"),)
