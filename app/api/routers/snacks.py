# app/api/routers/snacks.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.domain.schemas import SnackOut
from app.repos.snack_repo import SnackRepo

router = APIRouter(prefix="/snacks", tags=["snacks"])


@router.get("", response_model=List[SnackOut])
def list_snacks(db: Session = Depends(get_db)):
    return [SnackOut.model_validate(s) for s in SnackRepo(db).list_snacks()]
