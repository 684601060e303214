import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from filmlibrary.core.config import DB_URL, DB_POOL_SIZE

logger = logging.getLogger(__name__)

engine = create_engine(DB_URL, pool_size=DB_POOL_SIZE, max_overflow=0, pool_pre_ping=True)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def ensure_schema(bind=None):
    # registers the tables on Base.metadata
    from filmlibrary.models import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
    logger.info("schema ready")
