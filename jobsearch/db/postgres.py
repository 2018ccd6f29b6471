from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.engine import make_url
from sqlalchemy.exc import DBAPIError, InterfaceError, OperationalError, SQLAlchemyError


class DatabaseError(RuntimeError):
    pass


class DatabaseConnectionError(DatabaseError):
    pass


class DatabaseQueryError(DatabaseError):
    pass


def mask_db_url(db_url: str) -> str:
    try:
        return str(make_url(db_url).set(password="***"))
    except Exception:
        return db_url


def _is_connection_failure(exc: SQLAlchemyError) -> bool:
    if isinstance(exc, (OperationalError, InterfaceError)):
        return True
    return isinstance(exc, DBAPIError) and bool(exc.connection_invalidated)


@contextmanager
def translate_db_errors(operation: str) -> Iterator[None]:
    """Re-raise SQLAlchemy failures as a single opaque DatabaseError subclass.

    Callers see either DatabaseConnectionError (backend unreachable, dropped connection,
    timeout) or DatabaseQueryError (anything the backend rejected). The driver error is
    kept as ``__cause__``.
    """

    try:
        yield
    except SQLAlchemyError as exc:
        if _is_connection_failure(exc):
            cause = getattr(exc, "orig", None) or exc
            raise DatabaseConnectionError(
                f"{operation} failed: database unavailable ({type(cause).__name__})"
            ) from exc
        raise DatabaseQueryError(f"{operation} failed") from exc
