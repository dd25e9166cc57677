# app/data/seed.py
from decimal import Decimal

from sqlalchemy.orm import Session

from app.data.models.snack import SnackModel
from app.repos.snack_repo import SnackRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)

SNACKS = [
    {"name": "Salted Chips", "price": Decimal("2.49"), "quantity": 50},
    {"name": "Chocolate Bar", "price": Decimal("1.99"), "quantity": 80},
    {"name": "Roasted Peanuts", "price": Decimal("3.20"), "quantity": 30},
    {"name": "Rice Crackers", "price": Decimal("2.10"), "quantity": 25},
]


def seed(db: Session) -> int:
    # tylko gdy tabela pusta
    repo = SnackRepo(db)
    if repo.list_snacks():
        return 0

    for data in SNACKS:
        repo.create_snack(SnackModel(**data))
    db.commit()

    logger.info(f"Seeded {len(SNACKS)} snacks")
    return len(SNACKS)
