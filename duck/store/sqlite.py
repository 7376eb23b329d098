"""SQLAlchemy-backed duck store.

Rows (``DuckRow``) and wire entities (``RubberDuck``) are separate types and
are translated field by field, so the table can change without touching the
API contract.
"""

import logging

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from duck.database import build_engine, build_session_maker, init_db
from duck.models import DuckRow
from duck.schemas import NewRubberDuck, RubberDuck
from duck.store.base import DuckStore
from duck.store.errors import DuckNotFound, StoreUnavailable

logger = logging.getLogger(__name__)


def row_to_duck(row: DuckRow) -> RubberDuck:
    """Convert a stored row to the wire entity."""
    try:
        return RubberDuck(
            id=row.id,
            name=row.name,
            color=row.color,
            size=row.size,
        )
    except ValidationError as e:
        raise StoreUnavailable(f"corrupt row {row.id}: {e}") from e


class SQLiteStore(DuckStore):
    """Duck store over a single SQL table."""

    name = "sqlite"

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.session_maker = build_session_maker(engine)

    @classmethod
    def from_url(cls, database_url: str, echo: bool = False) -> "SQLiteStore":
        return cls(build_engine(database_url, echo=echo))

    async def migrate(self) -> None:
        """Ensure the ducks table exists."""
        await init_db(self.engine)
        logger.info(f"Migrated table {DuckRow.__tablename__}")

    async def list_ducks(self) -> list[RubberDuck]:
        query = (
            select(DuckRow)
            .where(DuckRow.deleted_at.is_(None))
            .order_by(DuckRow.id)
        )
        try:
            async with self.session_maker() as session:
                result = await session.execute(query)
                rows = result.scalars().all()
        except SQLAlchemyError as e:
            raise StoreUnavailable(str(e)) from e

        return [row_to_duck(row) for row in rows]

    async def create_duck(self, duck: NewRubberDuck) -> RubberDuck:
        row = DuckRow(name=duck.name, color=duck.color, size=duck.size.value)
        try:
            async with self.session_maker() as session:
                async with session.begin():
                    session.add(row)
                    await session.flush()
                created = row_to_duck(row)
        except SQLAlchemyError as e:
            raise StoreUnavailable(str(e)) from e

        return created

    async def get_duck(self, duck_id: int) -> RubberDuck:
        query = select(DuckRow).where(
            DuckRow.id == duck_id, DuckRow.deleted_at.is_(None)
        )
        try:
            async with self.session_maker() as session:
                result = await session.execute(query)
                row = result.scalar_one_or_none()
        except OverflowError:
            # Ids past the integer column range can never be stored
            raise DuckNotFound(duck_id)
        except SQLAlchemyError as e:
            raise StoreUnavailable(str(e)) from e

        if row is None:
            raise DuckNotFound(duck_id)
        return row_to_duck(row)

    async def open(self) -> None:
        await self.migrate()

    async def close(self) -> None:
        await self.engine.dispose()
