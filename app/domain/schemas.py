# app/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import List
from decimal import Decimal
from datetime import datetime
from uuid import UUID


class AddItemToCartRequest(BaseModel):
    """Schema dla dodawania przekaski do koszyka."""

    snack_id: UUID = Field(..., description="ID przekaski")
    quantity: int = Field(..., gt=0, description="Ilosc do dodania (musi byc > 0)")


class UpdateItemFromCartRequest(BaseModel):
    """Schema dla zmiany ilosci pozycji w koszyku."""

    item_id: UUID = Field(..., description="ID pozycji w koszyku")
    quantity: int = Field(..., gt=0, description="Nowa ilosc (musi byc > 0)")


class UpdateItemQuantityIn(BaseModel):
    quantity: int = Field(..., gt=0, description="Nowa ilosc (musi byc > 0)")


class SnackOut(BaseModel):
    id: UUID
    name: str
    description: str | None = None
    price: Decimal
    quantity: int
    image_url: str | None = None

    model_config = ConfigDict(from_attributes=True)


class ItemOut(BaseModel):
    id: UUID
    cart_id: UUID
    snack_id: UUID
    quantity: int
    snack: SnackOut | None = None

    model_config = ConfigDict(from_attributes=True)


class CartOut(BaseModel):
    """Schema dla koszyka (response)."""

    id: UUID
    user_id: UUID
    status: str
    items: List[ItemOut]
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class ErrorOut(BaseModel):
    detail: str
