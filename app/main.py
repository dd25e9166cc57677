# app/main.py
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from app.api import create_app
from app.data.database import Base, SessionLocal, engine
from app.data.seed import seed
from app.utils.settings import SEED_SNACKS
from app.utils.logging import get_logger

# import modeli przed create_all, zeby byly w Base.metadata
from app.data import models  # noqa: F401

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    logger.info(f"Initializing database, tables: {list(Base.metadata.tables.keys())}")
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created")

    if SEED_SNACKS:
        db = SessionLocal()
        try:
            seed(db)
        finally:
            db.close()

    yield


app = create_app(lifespan=lifespan)

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
