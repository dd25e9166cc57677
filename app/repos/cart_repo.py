# app/repos/cart_repo.py
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.orm import Session, selectinload

from app.data.models.cart import CartModel, CartStatus
from app.data.models.item import ItemModel


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_pending_cart_for_user(self, user_id: UUID) -> CartModel | None:
        return self.db.execute(
            select(CartModel)
            .options(selectinload(CartModel.items).selectinload(ItemModel.snack))
            .where(
                CartModel.user_id == user_id,
                CartModel.status == CartStatus.PENDING,
            )
        ).scalar_one_or_none()

    def get_cart(self, cart_id: UUID) -> CartModel | None:
        #koszyk + pozycje + przekaski jednym zapytaniem na relacje
        return self.db.execute(
            select(CartModel)
            .options(selectinload(CartModel.items).selectinload(ItemModel.snack))
            .where(CartModel.id == cart_id)
        ).scalar_one_or_none()

    def create_cart(self, cart: CartModel) -> CartModel:
        self.db.add(cart)
        self.db.flush()
        return cart

    def update_cart_status(self, cart_id: UUID, from_status: str, to_status: str) -> int:
        # update carts set status='confirmed' where id=? and status='pending'
        result = self.db.execute(
            update(CartModel)
            .where(CartModel.id == cart_id, CartModel.status == from_status)
            .values(status=to_status)
        )
        return result.rowcount

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
