"""Base Repository - generic CRUD over one SQLAlchemy model.

Invariants:
    - id, created_at and updated_at are assigned here, never taken from callers
    - create stamps created_at == updated_at; update refreshes updated_at only
    - Every ordering ends with id ascending so repeated reads return the same order
    - Writes commit immediately; a failed write is rolled back and raised as StoreError

Design Decisions:
    - Subclasses declare `model`, `entity` and `order_by`; filters are built by
      subclasses from explicit filter structs (core/filters.py)
    - update issues one bulk UPDATE without session synchronization, then re-reads
      with populate_existing so identity-mapped instances are never stale
"""

import logging
from typing import Any, Generic, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.db.base import Base, utcnow
from portfolio.infrastructure.database import translate_store_errors

ModelType = TypeVar("ModelType", bound=Base)

logger = logging.getLogger(__name__)

SERVER_ASSIGNED = frozenset({"id", "created_at", "updated_at"})


class BaseRepository(Generic[ModelType]):
    """Generic repository: list, get_by_id, create, update, delete."""

    model: type[ModelType]
    entity: str = "record"
    order_by: tuple = ()

    def __init__(self, db: AsyncSession):
        self.db = db

    # --- reads ----------------------------------------------------------------

    def _ordering(self) -> tuple:
        return (*self.order_by, self.model.id.asc())

    async def _select(self, *conditions: Any) -> list[ModelType]:
        query = select(self.model).where(*conditions).order_by(*self._ordering())
        async with translate_store_errors(self.db, "select", self.entity):
            result = await self.db.execute(query)
            return list(result.scalars().all())

    async def _get_one(
        self, condition: Any, refresh: bool = False,
    ) -> ModelType | None:
        query = select(self.model).where(condition)
        if refresh:
            query = query.execution_options(populate_existing=True)
        async with translate_store_errors(self.db, "select", self.entity):
            result = await self.db.execute(query)
            return result.scalar_one_or_none()

    async def list(self) -> list[ModelType]:
        """Every record, in the entity's default order."""
        return await self._select()

    async def get_by_id(self, record_id: str) -> ModelType | None:
        return await self._get_one(self.model.id == record_id)

    # --- writes ---------------------------------------------------------------

    def _has_column(self, name: str) -> bool:
        return name in self.model.__table__.columns

    def _has_updated_at(self) -> bool:
        return self._has_column("updated_at")

    def _reject_server_fields(self, data: dict[str, Any]) -> None:
        assigned = SERVER_ASSIGNED & data.keys()
        if assigned:
            raise ValueError(
                f"{self.entity} fields are server-assigned: {', '.join(sorted(assigned))}",
            )

    async def create(self, data: dict[str, Any]) -> ModelType:
        """Insert a record; the store assigns id and timestamps."""
        self._reject_server_fields(data)
        now = utcnow()
        stamps = {
            name: now for name in ("created_at", "updated_at")
            if self._has_column(name)
        }
        record = self.model(**data, **stamps)
        async with translate_store_errors(self.db, "insert", self.entity):
            self.db.add(record)
            await self.db.commit()
            await self.db.refresh(record)
        logger.info(
            f"Created {self.entity} {record.id}",
            extra={"entity": self.entity, "record_id": record.id, "operation": "insert"},
        )
        return record

    async def update(
        self, record_id: str, changes: dict[str, Any],
    ) -> ModelType | None:
        """Apply only the supplied fields and bump updated_at."""
        self._reject_server_fields(changes)
        values = dict(changes)
        if self._has_updated_at():
            values["updated_at"] = utcnow()
        if not values:
            return await self.get_by_id(record_id)
        stmt = (
            update(self.model)
            .where(self.model.id == record_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        async with translate_store_errors(self.db, "update", self.entity):
            result = await self.db.execute(stmt)
            if result.rowcount == 0:
                await self.db.rollback()
                return None
            await self.db.commit()
        logger.info(
            f"Updated {self.entity} {record_id}",
            extra={"entity": self.entity, "record_id": record_id, "operation": "update"},
        )
        return await self._get_one(self.model.id == record_id, refresh=True)

    async def delete(self, record_id: str) -> bool:
        """Hard delete. False when no row matched."""
        stmt = delete(self.model).where(self.model.id == record_id)
        async with translate_store_errors(self.db, "delete", self.entity):
            result = await self.db.execute(stmt)
            await self.db.commit()
        deleted = result.rowcount > 0
        if deleted:
            logger.info(
                f"Deleted {self.entity} {record_id}",
                extra={"entity": self.entity, "record_id": record_id, "operation": "delete"},
            )
        return deleted
