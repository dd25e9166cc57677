import os

# baza w pamieci zanim zaladuja sie ustawienia aplikacji
os.environ.setdefault("DATABASE_URL", "sqlite://")

import uuid
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api import create_app
from app.data.database import Base, get_db
from app.data.models import CartModel, CartStatus, ItemModel, SnackModel
from app.domain.identity import UserContext


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine, autoflush=False)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def user() -> UserContext:
    return UserContext(id=str(uuid.uuid4()), username="alice")


@pytest.fixture
def other_user() -> UserContext:
    return UserContext(id=str(uuid.uuid4()), username="bob")


@pytest.fixture
def make_snack(db):
    def _make(quantity: int = 5, name: str = "Salted Chips") -> SnackModel:
        snack = SnackModel(name=name, price=Decimal("2.49"), quantity=quantity)
        db.add(snack)
        db.commit()
        return snack

    return _make


@pytest.fixture
def make_cart(db):
    def _make(user_context: UserContext, status: str = CartStatus.PENDING) -> CartModel:
        cart = CartModel(user_id=uuid.UUID(user_context.id), status=status)
        db.add(cart)
        db.commit()
        return cart

    return _make


@pytest.fixture
def make_item(db):
    def _make(cart: CartModel, snack: SnackModel, quantity: int) -> ItemModel:
        item = ItemModel(cart_id=cart.id, snack_id=snack.id, quantity=quantity)
        db.add(item)
        db.commit()
        return item

    return _make


@pytest.fixture
def client(db) -> TestClient:
    app = create_app()

    def _override_get_db():
        yield db

    app.dependency_overrides[get_db] = _override_get_db
    return TestClient(app)


def auth_headers(user_context: UserContext) -> dict:
    return {"X-User-Id": user_context.id}
