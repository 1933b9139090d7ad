import logging
from typing import Generator

from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, sessionmaker

from house_hunter.core.base import Base
from house_hunter.core.config import settings

logger = logging.getLogger(__name__)


def _connect_args(url: str) -> dict:
    # SQLite connections are handed across the request threadpool.
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.database_url,
    pool_pre_ping=True,   # checks stale connections
    connect_args=_connect_args(settings.database_url),
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def ping_database() -> None:
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))


def init_db() -> None:
    # Register models on Base.metadata before creating tables.
    from house_hunter.models import house, user  # noqa: F401

    Base.metadata.create_all(bind=engine)


def dispose_engine() -> None:
    engine.dispose()
    logger.info("Database connection pool closed")


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
