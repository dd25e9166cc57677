# app/domain/identity.py
import uuid

from fastapi import Header, HTTPException, status
from pydantic import BaseModel, ConfigDict

from app.domain.errors import InternalError


class UserContext(BaseModel):
    """Tozsamosc wywolujacego, przekazywana jawnie do kazdej operacji."""

    id: str
    username: str | None = None

    model_config = ConfigDict(frozen=True)

    def user_uuid(self) -> uuid.UUID:
        try:
            return uuid.UUID(self.id)
        except (ValueError, AttributeError, TypeError):
            raise InternalError(f"invalid user id: {self.id!r}") from None


def get_user_context(
    x_user_id: str | None = Header(default=None),
    x_username: str | None = Header(default=None),
) -> UserContext:
    # uwierzytelnianie robi gateway, tu tylko odczyt naglowka
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="missing user identity",
        )
    return UserContext(id=x_user_id, username=x_username)
