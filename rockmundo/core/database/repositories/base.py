"""
Base repository and query helpers.

Repositories stage changes on the session and flush; they never commit.
The service running a request owns the transaction, so the rows one edge
function touches are committed (or rolled back) together.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

EntityType = TypeVar("EntityType", bound=SQLModel)


class AsyncBaseRepository(Generic[EntityType]):
    """Common async data access for one SQLModel entity."""

    def __init__(self, session: AsyncSession, model: Type[EntityType]) -> None:
        """Initialize repository with async database session and SQLModel entity class.

        Args:
            session: Async session shared by every repository of the request
            model: SQLModel entity class for this repository
        """
        self.session = session
        self.model = model

    async def get_by_id(self, entity_id: str) -> Optional[EntityType]:
        """Get entity by its primary key, or None if not found."""
        return await self.session.get(self.model, entity_id)

    async def add(self, entity: EntityType) -> EntityType:
        """Stage a new or changed entity and flush it so generated values are visible.

        Args:
            entity: SQLModel instance to persist

        Returns:
            The same instance, now attached to the session
        """
        self.session.add(entity)
        await self.session.flush()
        return entity

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[EntityType]:
        """List entities with optional equality filters and pagination.

        Args:
            limit: Maximum number of records to return
            offset: Number of records to skip
            filters: Column name to value; None values are ignored

        Returns:
            List of entity instances
        """
        stmt = select(self.model)
        stmt = QueryBuilder.apply_filters(stmt, self.model, filters or {})
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())


class QueryBuilder:
    """Utility class for building SQLModel-based database queries."""

    @staticmethod
    def apply_filters(stmt, model: Type[EntityType], filters: Dict[str, Any]):
        """Apply equality filters to a select statement.

        Args:
            stmt: SQLModel select statement
            model: SQLModel entity class
            filters: Dictionary of field filters

        Returns:
            Modified select statement with filters applied
        """
        for key, value in filters.items():
            if value is not None and hasattr(model, key):
                stmt = stmt.where(getattr(model, key) == value)
        return stmt

    @staticmethod
    def apply_pagination(stmt, limit: Optional[int], offset: Optional[int]):
        """Apply pagination to a select statement.

        Args:
            stmt: SQLModel select statement
            limit: Maximum number of records
            offset: Number of records to skip

        Returns:
            Modified select statement with pagination applied
        """
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)
        return stmt
