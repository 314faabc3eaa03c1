"""FastAPI database dependencies."""

from collections.abc import Iterator

from sqlalchemy.orm import Session

from fieldmeta.db.session import SessionLocal


def get_db() -> Iterator[Session]:
    """Yield one session per request."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
