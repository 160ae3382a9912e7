"""SQLAlchemy collection provider for JSON:API viewsets."""

from __future__ import annotations

from typing import Any, Sequence

import structlog
from sqlalchemy import func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from jsonapi_pages.core.errors import ResourceNotFoundError

logger = structlog.get_logger(__name__)

# Largest value a signed 64-bit SQL integer column or OFFSET/LIMIT accepts.
MAX_SQL_INTEGER = 2**63 - 1


class SQLAlchemyDataLayer:
    """Expose a mapped model as a countable, sliceable ordered collection."""

    def __init__(
        self,
        *,
        model: Any,
        session: Session | AsyncSession,
        order_by: Sequence[Any] | None = None,
    ) -> None:
        """Store the SQLAlchemy model, session and ordering.

        Without ``order_by`` rows are ordered by primary key so that pages
        partition the table.
        """
        self.model = model
        self.session = session
        self.order_by = list(order_by) if order_by else list(inspect(model).primary_key)

    @property
    def resource_type(self) -> str:
        return getattr(self.model, "__tablename__", self.model.__name__.lower())

    async def _execute(self, statement: Any) -> Any:
        if isinstance(self.session, AsyncSession):
            return await self.session.execute(statement)
        return self.session.execute(statement)

    async def count(self) -> int:
        """Return the number of rows."""
        statement = select(func.count()).select_from(self.model)
        result = await self._execute(statement)
        return int(result.scalar_one())

    async def slice(self, offset: int, limit: int) -> list[Any]:
        """Return up to ``limit`` rows starting at ``offset``."""
        if offset < 0 or limit < 1:
            raise ValueError(f"Invalid slice offset={offset} limit={limit}.")
        if offset > MAX_SQL_INTEGER:
            return []
        limit = min(limit, MAX_SQL_INTEGER - offset)
        if limit < 1:
            return []
        statement = select(self.model).order_by(*self.order_by).offset(offset).limit(limit)
        result = await self._execute(statement)
        return list(result.scalars().all())

    async def retrieve(self, *, resource_id: str) -> Any:
        """Return a single model instance by primary key."""
        column = inspect(self.model).primary_key[0]
        try:
            key = column.type.python_type(resource_id)
        except (TypeError, ValueError, NotImplementedError):
            raise ResourceNotFoundError(self.resource_type, resource_id) from None
        statement = select(self.model).where(column == key)
        result = await self._execute(statement)
        instance = result.scalars().first()
        if instance is None:
            logger.info("resource_not_found", type=self.resource_type, id=resource_id)
            raise ResourceNotFoundError(self.resource_type, resource_id)
        return instance
