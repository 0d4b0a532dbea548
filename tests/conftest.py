import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from employee_api.main import app
from employee_api.db.base import Base
from employee_api.db.session import get_db, get_session_factory


@pytest.fixture()
def engine():
    """
    One in-memory SQLite database per test. StaticPool keeps a single
    connection so the threadpool used by the List handler sees the same data.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(
        bind=engine, autocommit=False, autoflush=False, expire_on_commit=False
    )


@pytest.fixture()
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(autouse=True)
def override_get_db(db_session, session_factory):
    def _get_db_override():
        yield db_session

    # List queries open their own session from the factory
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    app.dependency_overrides[get_db] = _get_db_override
    yield
    app.dependency_overrides.clear()
