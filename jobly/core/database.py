import re
from typing import Any, Sequence

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Result
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from jobly.core.config import settings

_PLACEHOLDER = re.compile(r"\$(\d+)")


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,  # Verify connections before using them
        "pool_size": 10,
        "max_overflow": 20,
    }


# Create SQLAlchemy engine
engine = create_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class for models
Base = declarative_base()


def get_db():
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def execute_positional(db: Session, sql: str, values: Sequence[Any] = ()) -> Result:
    """
    Execute SQL written with ``$1, $2, ...`` placeholders.

    Placeholders are rewritten to SQLAlchemy named binds (``:p1``), so the
    clauses produced by ``jobly.helpers.sql`` run on any dialect.
    """
    params = {f"p{idx}": value for idx, value in enumerate(values, start=1)}
    return db.execute(text(_PLACEHOLDER.sub(r":p\1", sql)), params)


def init_db():
    """
    Create tables for all registered models.

    Importing jobly.models registers every table on Base.metadata.
    """
    from jobly import models  # noqa: F401
    Base.metadata.create_all(bind=engine)
