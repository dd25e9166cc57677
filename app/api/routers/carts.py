#app/api/routers/carts.py
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.domain.identity import UserContext, get_user_context
from app.domain.schemas import (
    AddItemToCartRequest,
    CartOut,
    ErrorOut,
    UpdateItemFromCartRequest,
    UpdateItemQuantityIn,
)
from app.services.cart_service import CartService

router = APIRouter(
    prefix="/carts",
    tags=["carts"],
    responses={
        400: {"model": ErrorOut},
        403: {"model": ErrorOut},
        404: {"model": ErrorOut},
        500: {"model": ErrorOut},
    },
)


def get_service(db: Session = Depends(get_db)) -> CartService:
    return CartService(db)


@router.post("", response_model=CartOut, status_code=status.HTTP_200_OK)
def open_cart(
    user: UserContext = Depends(get_user_context),
    svc: CartService = Depends(get_service),
):
    return CartOut.model_validate(svc.open_cart(user))


@router.get("/pending", response_model=CartOut)
def get_pending_cart(
    user: UserContext = Depends(get_user_context),
    svc: CartService = Depends(get_service),
):
    cart = svc.get_cart_by_id(user.user_uuid())
    return CartOut.model_validate(cart)


@router.post("/items", response_model=CartOut)
def add_item(
    payload: AddItemToCartRequest,
    user: UserContext = Depends(get_user_context),
    svc: CartService = Depends(get_service),
):
    return CartOut.model_validate(svc.add_item_to_cart(payload, user))


@router.patch("/items/{item_id}", response_model=CartOut)
def update_item(
    item_id: UUID,
    payload: UpdateItemQuantityIn,
    user: UserContext = Depends(get_user_context),
    svc: CartService = Depends(get_service),
):
    req = UpdateItemFromCartRequest(item_id=item_id, quantity=payload.quantity)
    return CartOut.model_validate(svc.update_item_from_cart(req, user))


@router.delete("/items/{item_id}", response_model=CartOut)
def delete_item(
    item_id: UUID,
    user: UserContext = Depends(get_user_context),
    svc: CartService = Depends(get_service),
):
    return CartOut.model_validate(svc.delete_item_from_cart(item_id, user))


@router.post("/{cart_id}/confirm", response_model=CartOut)
def confirm_cart(
    cart_id: UUID,
    user: UserContext = Depends(get_user_context),
    svc: CartService = Depends(get_service),
):
    return CartOut.model_validate(svc.confirm_cart(cart_id, user))
