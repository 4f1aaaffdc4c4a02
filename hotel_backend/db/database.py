"""Engine and session factory for the property store.

A ``Database`` is built once per process (by the API app factory or a
script) and handed to the repository; nothing in this module keeps a global
connection.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ..exceptions import StoreUnavailable
from ..utils.logging import get_logger

LOGGER = get_logger("db.database")


class Base(DeclarativeBase):
    pass


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        options: dict = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url or url.rstrip("/") == "sqlite:":
            # a single shared connection keeps the in-memory schema alive
            options["poolclass"] = StaticPool
        return options
    return {"pool_pre_ping": True}


class Database:
    def __init__(self, url: str, echo: bool = False) -> None:
        self.url = url
        self.engine: Engine = create_engine(url, echo=echo, future=True, **_engine_options(url))
        self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)
        LOGGER.info("database_configured dialect=%s", self.engine.dialect.name)

    @contextmanager
    def session(self) -> Iterator[Session]:
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def create_schema(self) -> None:
        from . import orm  # noqa: F401  registers the mapped tables

        try:
            Base.metadata.create_all(self.engine)
        except SQLAlchemyError as exc:
            raise StoreUnavailable(f"Failed to create schema: {exc}", exc) from exc

    def ping(self) -> None:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            raise StoreUnavailable(f"Database unreachable: {exc}", exc) from exc

    def dispose(self) -> None:
        self.engine.dispose()


__all__ = ["Base", "Database"]
