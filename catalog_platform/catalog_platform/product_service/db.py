from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from typing import Generator
from sqlalchemy.orm import Session
import logging

from ..shared.config import settings
from ..shared.database import engine_options

logger = logging.getLogger(__name__)


engine = create_engine(settings.PRODUCT_DATABASE_URL, **engine_options(settings.PRODUCT_DATABASE_URL))
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
Base = declarative_base()


def init_db():
    # Import models so they register with Base before create_all
    from . import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Product database initialized")


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
