"""SQLite storage for route index records.

This module provides:
- Database: Connection manager with WAL mode for concurrent access
- RouteIndexStore: Per-document replace semantics and path lookups

Records are keyed by the owning item's version id (``document_id``), so the
published and the latest version of one item are indexed independently.
Replacing a document always deletes its previous rows first.
"""

from __future__ import annotations

from collections.abc import Generator, Iterable
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog
from sqlalchemy import delete, event, text
from sqlmodel import Session, SQLModel, col, create_engine, select

from routeindex.index.models import AutoroutePartIndex

if TYPE_CHECKING:
    from sqlalchemy import Engine

logger = structlog.get_logger()

DEFAULT_BUSY_TIMEOUT_MS = 30000


class Database:
    """
    Database connection manager with WAL mode.

    Usage::

        db = Database(Path("routeindex.db"))
        db.create_all()

        with db.session() as session:
            rows = session.exec(select(AutoroutePartIndex)).all()
    """

    def __init__(self, db_path: Path, busy_timeout_ms: int = DEFAULT_BUSY_TIMEOUT_MS) -> None:
        """Initialize database with path to SQLite file."""
        self.db_path = db_path
        self._busy_timeout_ms = busy_timeout_ms
        self.engine = self._create_engine()

    def _create_engine(self) -> Engine:
        engine = create_engine(
            f"sqlite:///{self.db_path}",
            connect_args={"check_same_thread": False},
            pool_pre_ping=True,
        )
        event.listen(engine, "connect", self._configure_pragmas)
        return engine

    def _configure_pragmas(self, dbapi_conn: Any, _connection_record: Any) -> None:
        """Configure SQLite for concurrent access."""
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute(f"PRAGMA busy_timeout={int(self._busy_timeout_ms)}")
        cursor.execute("PRAGMA synchronous=NORMAL")  # Safe with WAL
        cursor.close()

    def create_all(self) -> None:
        """Create all tables from SQLModel metadata."""
        SQLModel.metadata.create_all(self.engine)

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """ORM session for reads."""
        with Session(self.engine) as session:
            yield session

    @contextmanager
    def immediate_transaction(self) -> Generator[Session, None, None]:
        """
        Session with BEGIN IMMEDIATE for serializable writes.

        The session auto-commits on successful exit and rolls back
        on exception.
        """
        with Session(self.engine) as session:
            session.execute(text("BEGIN IMMEDIATE"))
            try:
                yield session
                session.commit()
            except Exception:
                session.rollback()
                raise

    def dispose(self) -> None:
        self.engine.dispose()


class RouteIndexStore:
    """Persist and query ``AutoroutePartIndex`` rows."""

    def __init__(self, db: Database) -> None:
        self.db = db

    def replace(
        self, document_id: str, records: Iterable[AutoroutePartIndex] | None
    ) -> int:
        """Replace all rows of ``document_id``. None only deletes. Returns rows written."""
        rows = [
            AutoroutePartIndex(
                document_id=document_id,
                content_item_id=record.content_item_id,
                path=record.path,
                published=record.published,
                latest=record.latest,
                contained_content_item_id=record.contained_content_item_id,
                json_path=record.json_path,
            )
            for record in records or ()
        ]
        with self.db.immediate_transaction() as session:
            session.execute(
                delete(AutoroutePartIndex).where(
                    col(AutoroutePartIndex.document_id) == document_id
                )
            )
            session.add_all(rows)

        logger.debug("route_index_replaced", document_id=document_id, rows=len(rows))
        return len(rows)

    def remove(self, document_id: str) -> None:
        self.replace(document_id, None)

    def find_by_path(self, path: str, *, latest: bool = False) -> list[AutoroutePartIndex]:
        """Rows routed at ``path`` whose owner is published (or latest)."""
        flag = AutoroutePartIndex.latest if latest else AutoroutePartIndex.published
        statement = (
            select(AutoroutePartIndex)
            .where(col(AutoroutePartIndex.path) == path)
            .where(col(flag) == True)  # noqa: E712
            .order_by(col(AutoroutePartIndex.id))
        )
        with self.db.session() as session:
            return list(session.exec(statement).all())

    def find_by_content_item(self, content_item_id: str) -> list[AutoroutePartIndex]:
        statement = (
            select(AutoroutePartIndex)
            .where(col(AutoroutePartIndex.content_item_id) == content_item_id)
            .order_by(col(AutoroutePartIndex.id))
        )
        with self.db.session() as session:
            return list(session.exec(statement).all())
