# app/data/models/item.py
import uuid

from sqlalchemy import Column, Integer, ForeignKey, Uuid, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import relationship

from app.data.database import Base


class ItemModel(Base):
    __tablename__ = "items"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    cart_id = Column(Uuid, ForeignKey("carts.id", ondelete="CASCADE"), nullable=False, index=True)
    snack_id = Column(Uuid, ForeignKey("snacks.id"), nullable=False)

    quantity = Column(Integer, nullable=False)

    cart = relationship("CartModel", back_populates="items")
    snack = relationship("SnackModel")

    __table_args__ = (
        UniqueConstraint("cart_id", "snack_id", name="u_cart_snack"),
        CheckConstraint("quantity > 0", name="ck_item_quantity_positive"),
    )
