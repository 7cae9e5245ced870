# database.py
import logging
from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool


logger = logging.getLogger("uvicorn.error")

Base = declarative_base()


def mask_db_url(db_url: str) -> str:
    try:
        return str(make_url(db_url).set(password="***"))
    except Exception:
        return db_url


def _engine_kwargs(db_url: str) -> dict:
    if not db_url.startswith("sqlite"):
        return {"pool_pre_ping": True}
    kwargs: dict = {"connect_args": {"check_same_thread": False}}
    # In-memory sqlite lives inside one connection; share it across sessions.
    if make_url(db_url).database in (None, "", ":memory:"):
        kwargs["poolclass"] = StaticPool
    return kwargs


class Database:
    """Store handle: one engine plus its session factory.

    Opened at application start, disposed at shutdown, and passed to the
    request-scoped services through `get_db`.
    """

    def __init__(self, db_url: str) -> None:
        self.url = db_url
        self.engine = create_engine(db_url, future=True, **_engine_kwargs(db_url))
        self._session_factory = sessionmaker(bind=self.engine, autocommit=False, autoflush=False, future=True)
        logger.info("SQLAlchemy ORM db_url=%s", mask_db_url(db_url))

    def create_all(self) -> None:
        # Importing the models registers every table on Base.metadata.
        import jobboard.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self._session_factory()

    def ping(self) -> bool:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except Exception:
            logger.warning("Database ping failed for %s", mask_db_url(self.url), exc_info=True)
            return False
        return True

    def dispose(self) -> None:
        self.engine.dispose()


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_db(request: Request) -> Generator[Session, None, None]:
    session = get_database(request).session()
    try:
        yield session
    finally:
        session.close()
