# database.py
import logging
from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from jobsearch.config import build_sqlalchemy_db_url, settings
from jobsearch.db.postgres import mask_db_url


logger = logging.getLogger(__name__)


def _build_connect_args(db_url: str) -> dict:
    if db_url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


_db_url = build_sqlalchemy_db_url(settings)
engine = create_engine(_db_url, pool_pre_ping=True, future=True, connect_args=_build_connect_args(_db_url))
logger.info("SQLAlchemy db_url=%s", mask_db_url(_db_url))


if engine.dialect.name == "postgresql" and settings.db_statement_timeout_ms:

    @event.listens_for(engine, "connect")
    def _set_statement_timeout(dbapi_connection, connection_record) -> None:
        with dbapi_connection.cursor() as cur:
            cur.execute(f"SET statement_timeout TO {int(settings.db_statement_timeout_ms)}")


SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)
Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def dialect_name(db: Session) -> str:
    return db.get_bind().dialect.name
