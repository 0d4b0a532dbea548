import logging

from fastapi import Depends, Request
from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, sessionmaker

from employee_api.db.base import Base

logger = logging.getLogger(__name__)


def connect(database_url: str, **engine_kwargs) -> sessionmaker:
    """
    Open the engine the process keeps for its whole lifetime, verify the
    connection and make sure the employees table exists.

    Raises whatever the driver raises when the database is unreachable;
    callers at startup treat that as fatal.
    """
    engine = create_engine(database_url, pool_pre_ping=True, **engine_kwargs)

    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))

    Base.metadata.create_all(bind=engine)
    logger.info("Connected to database (%s)", engine.url.render_as_string(hide_password=True))

    return sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )


def get_session_factory(request: Request) -> sessionmaker:
    session_factory: sessionmaker | None = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Database session factory is not configured")
    return session_factory


def get_db(session_factory: sessionmaker = Depends(get_session_factory)):
    db: Session = session_factory()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
