# app/repos/item_repo.py
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.data.models.item import ItemModel


class ItemRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_item(self, item_id: UUID) -> ItemModel | None:
        return self.db.get(ItemModel, item_id)

    def get_item_in_cart(self, cart_id: UUID, snack_id: UUID) -> ItemModel | None:
        return self.db.execute(
            select(ItemModel).where(
                ItemModel.cart_id == cart_id,
                ItemModel.snack_id == snack_id,
            )
            .execution_options(populate_existing=True)
        ).scalar_one_or_none()

    def save_item(self, item: ItemModel) -> ItemModel:
        """Insert albo update, bez commita."""
        self.db.add(item)
        self.db.flush()
        return item

    def delete_item(self, item: ItemModel):
        self.db.delete(item)
        self.db.flush()
