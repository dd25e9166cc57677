# app/data/models/cart.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime, Uuid, Index, text
from sqlalchemy.orm import relationship

from app.data.database import Base


class CartStatus:
    PENDING = "pending"
    CONFIRMED = "confirmed"


def _utcnow():
    return datetime.now(timezone.utc)


class CartModel(Base):
    __tablename__ = "carts"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, nullable=False, index=True)

    status = Column(String(20), nullable=False, default=CartStatus.PENDING)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    #pozycje zawsze posortowane po id
    items = relationship(
        "ItemModel",
        back_populates="cart",
        cascade="all, delete-orphan",
        order_by="ItemModel.id",
    )

    #najwyzej jeden koszyk pending na uzytkownika
    __table_args__ = (
        Index(
            "uq_carts_user_pending",
            "user_id",
            unique=True,
            postgresql_where=text("status = 'pending'"),
            sqlite_where=text("status = 'pending'"),
        ),
    )
