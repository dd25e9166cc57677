# app/repos/snack_repo.py
from typing import List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.data.models.snack import SnackModel


class SnackRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_snack(self, snack_id: UUID, for_update: bool = False) -> SnackModel | None:
        stmt = select(SnackModel).where(SnackModel.id == snack_id)
        if for_update:
            #blokada wiersza do konca transakcji (select ... for update)
            #populate_existing: obiekt moze juz byc w sesji z wczesniejszego selectinload
            stmt = stmt.with_for_update().execution_options(populate_existing=True)
        return self.db.execute(stmt).scalar_one_or_none()

    def list_snacks(self) -> List[SnackModel]:
        return list(
            self.db.execute(select(SnackModel).order_by(SnackModel.name)).scalars().all()
        )

    def create_snack(self, snack: SnackModel) -> SnackModel:
        self.db.add(snack)
        self.db.flush()
        return snack
