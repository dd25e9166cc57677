# app/services/cart_service.py
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.data.models.cart import CartModel, CartStatus
from app.data.models.item import ItemModel
from app.domain.errors import (
    CartServiceError,
    ForbiddenError,
    InternalError,
    InvalidRequestError,
    NotFoundError,
)
from app.domain.identity import UserContext
from app.domain.schemas import AddItemToCartRequest, UpdateItemFromCartRequest
from app.repos.cart_repo import CartRepo
from app.repos.item_repo import ItemRepo
from app.repos.snack_repo import SnackRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Use case'y koszyka w statusie pending.

    Kazda operacja albo zwraca swiezo odczytany koszyk (z pozycjami i
    przekaskami), albo rzuca CartServiceError z kodem statusu.
    Stan magazynu jest tylko sprawdzany, nigdy nie zmniejszany.
    """

    def __init__(self, db: Session):
        self.cart_repo = CartRepo(db)
        self.item_repo = ItemRepo(db)
        self.snack_repo = SnackRepo(db)

    #query
    def get_cart_by_id(self, user_id: UUID) -> CartModel:
        """
        Zwraca koszyk pending uzytkownika o podanym id.
        Argument to id wlasciciela, nie klucz koszyka.
        """
        cart = self._read(self.cart_repo.get_pending_cart_for_user, user_id)
        if not cart:
            raise NotFoundError("cart not found")

        for item in cart.items:
            if item.snack is None:
                raise InternalError(f"snack {item.snack_id} not found")

        return cart

    #commands
    def open_cart(self, user_context: UserContext) -> CartModel:
        user_id = user_context.user_uuid()

        existing = self._read(self.cart_repo.get_pending_cart_for_user, user_id)
        if existing:
            logger.info(f"User {user_id} already has pending cart {existing.id}")
            return existing

        try:
            created = self.cart_repo.create_cart(
                CartModel(user_id=user_id, status=CartStatus.PENDING)
            )
            self.cart_repo.commit()
        except IntegrityError:
            # rownolegle otwarcie, indeks unikalny pilnuje jednego pending
            self.cart_repo.rollback()
            existing = self._read(self.cart_repo.get_pending_cart_for_user, user_id)
            if existing:
                return existing
            raise InternalError("failed to create cart")
        except SQLAlchemyError as e:
            self.cart_repo.rollback()
            logger.error(f"Failed to create cart for user {user_id}: {e}")
            raise InternalError(f"failed to create cart: {e}")

        logger.info(f"Created pending cart {created.id} for user {user_id}")
        return self._reload(created.id)

    def add_item_to_cart(
        self,
        req: AddItemToCartRequest,
        user_context: UserContext,
    ) -> CartModel:
        if req.quantity <= 0:
            raise InvalidRequestError("quantity must be greater than 0")

        user_id = user_context.user_uuid()

        try:
            cart = self._pending_cart(user_id)

            snack = self.snack_repo.get_snack(req.snack_id, for_update=True)
            if not snack:
                raise NotFoundError("snack not found")

            existing_item = self.item_repo.get_item_in_cart(cart.id, snack.id)
            in_cart = existing_item.quantity if existing_item else 0

            #liczy sie laczna ilosc w koszyku, nie tylko dodawana
            if in_cart + req.quantity > snack.quantity:
                logger.warning(
                    f"Stock not enough for snack {snack.id}: "
                    f"requested {in_cart + req.quantity}, available {snack.quantity}"
                )
                raise InvalidRequestError("stock not enough")

            if existing_item:
                logger.info(
                    f"Snack {snack.id} already in cart {cart.id}, quantity "
                    f"{existing_item.quantity} -> {existing_item.quantity + req.quantity}"
                )
                existing_item.quantity += req.quantity
                self.item_repo.save_item(existing_item)
            else:
                logger.info(f"Adding snack {snack.id} to cart {cart.id}")
                self.item_repo.save_item(
                    ItemModel(
                        cart_id=cart.id,
                        snack_id=snack.id,
                        quantity=req.quantity,
                    )
                )

            self.cart_repo.commit()
        except CartServiceError:
            self.cart_repo.rollback()
            raise
        except SQLAlchemyError as e:
            self.cart_repo.rollback()
            logger.error(f"Failed to add item to cart: {e}")
            raise InternalError(f"failed to add item: {e}")

        return self._reload(cart.id)

    def update_item_from_cart(
        self,
        req: UpdateItemFromCartRequest,
        user_context: UserContext,
    ) -> CartModel:
        if req.quantity <= 0:
            raise InvalidRequestError("quantity must be greater than 0")

        user_id = user_context.user_uuid()

        try:
            cart = self._pending_cart(user_id)

            item = self.item_repo.get_item(req.item_id)
            if not item:
                raise NotFoundError("item not found")
            self._ensure_item_in_cart(item, cart)

            snack = self.snack_repo.get_snack(item.snack_id, for_update=True)
            if not snack:
                raise NotFoundError("snack not found")

            if req.quantity > snack.quantity:
                logger.warning(
                    f"Stock not enough for snack {snack.id}: "
                    f"requested {req.quantity}, available {snack.quantity}"
                )
                raise InvalidRequestError("stock not enough")

            logger.info(f"Item {item.id} in cart {cart.id}: quantity {item.quantity} -> {req.quantity}")
            item.quantity = req.quantity
            self.item_repo.save_item(item)

            self.cart_repo.commit()
        except CartServiceError:
            self.cart_repo.rollback()
            raise
        except SQLAlchemyError as e:
            self.cart_repo.rollback()
            logger.error(f"Failed to update item {req.item_id}: {e}")
            raise InternalError(f"failed to update item: {e}")

        return self._reload(cart.id)

    def delete_item_from_cart(self, item_id: UUID, user_context: UserContext) -> CartModel:
        user_id = user_context.user_uuid()

        try:
            cart = self._pending_cart(user_id)

            item = self.item_repo.get_item(item_id)
            if not item:
                raise NotFoundError("item not found")
            self._ensure_item_in_cart(item, cart)

            self.item_repo.delete_item(item)
            self.cart_repo.commit()
        except CartServiceError:
            self.cart_repo.rollback()
            raise
        except SQLAlchemyError as e:
            self.cart_repo.rollback()
            logger.error(f"Failed to delete item {item_id}: {e}")
            raise InternalError(f"failed to delete item: {e}")

        logger.info(f"Item {item_id} removed from cart {cart.id}")
        return self._reload(cart.id)

    def confirm_cart(self, cart_id: UUID, user_context: UserContext) -> CartModel:
        cart = self._read(self.cart_repo.get_cart, cart_id)
        if cart is None:
            raise InvalidRequestError("cart not found")

        user_id = user_context.user_uuid()

        if cart.user_id != user_id:
            logger.warning(f"User {user_id} tried to confirm cart {cart.id} of user {cart.user_id}")
            raise ForbiddenError("cart does not belong to user")

        if cart.status != CartStatus.PENDING:
            raise InvalidRequestError("cart is not pending")

        try:
            rowcount = self.cart_repo.update_cart_status(
                cart_id=cart.id,
                from_status=CartStatus.PENDING,
                to_status=CartStatus.CONFIRMED,
            )

            #0 rows -> ktos inny juz potwierdzil
            if rowcount == 0:
                self.cart_repo.rollback()
                raise InvalidRequestError("cart is not pending")

            self.cart_repo.commit()
        except SQLAlchemyError as e:
            self.cart_repo.rollback()
            logger.error(f"Failed to confirm cart {cart_id}: {e}")
            raise InternalError(f"failed to confirm cart: {e}")

        logger.info(f"Cart {cart_id} confirmed by user {user_id}")
        return self._reload(cart_id)

    def _pending_cart(self, user_id: UUID) -> CartModel:
        cart = self.cart_repo.get_pending_cart_for_user(user_id)
        if not cart:
            raise NotFoundError("cart not found")
        return cart

    @staticmethod
    def _ensure_item_in_cart(item: ItemModel, cart: CartModel):
        if item.cart_id != cart.id:
            logger.warning(f"Item {item.id} is not part of cart {cart.id}")
            raise ForbiddenError("item does not belong to user's cart")

    def _read(self, query, *args):
        try:
            return query(*args)
        except SQLAlchemyError as e:
            self.cart_repo.rollback()
            logger.error(f"Failed to read cart data: {e}")
            raise InternalError(f"failed to read cart: {e}")

    def _reload(self, cart_id: UUID) -> CartModel:
        try:
            cart = self.cart_repo.get_cart(cart_id)
        except SQLAlchemyError as e:
            self.cart_repo.rollback()
            raise InternalError(f"failed to fetch updated cart: {e}")
        if cart is None:
            raise InternalError("failed to fetch updated cart")
        return cart
