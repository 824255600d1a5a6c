"""
Base Repository for ClickNGoAI

Generic async repository implementing CRUD operations over one table.
"""

from typing import Any, Dict, TypeVar, Generic, List, Optional, Type

from sqlalchemy import select, func, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel


# Type variables for generic repository
ModelType = TypeVar("ModelType", bound=SQLModel)


class BaseRepository(Generic[ModelType]):
    """
    Generic async repository with CRUD operations.

    Repositories flush but never commit; the session owner decides
    when the unit of work ends.

    Args:
        model: The SQLModel table class to operate on
        session: Async database session
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession):
        self._model = model
        self._session = session

    @property
    def session(self) -> AsyncSession:
        """Get the current session."""
        return self._session

    async def get_by_id(self, id: int) -> Optional[ModelType]:
        """
        Get a single record by its primary key.

        Returns:
            Model instance or None if not found
        """
        return await self._session.get(self._model, id)

    async def get_all(
        self,
        skip: int = 0,
        limit: int = 100
    ) -> List[ModelType]:
        """Get records newest first with pagination."""
        stmt = (
            select(self._model)
            .order_by(self._model.created_at.desc(), self._model.id.desc())
            .offset(skip)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def add(self, db_obj: ModelType) -> ModelType:
        """
        Insert a new record.

        Returns:
            The instance with its generated primary key
        """
        self._session.add(db_obj)
        await self._session.flush()
        await self._session.refresh(db_obj)
        return db_obj

    async def apply(self, db_obj: ModelType, values: Dict[str, Any]) -> ModelType:
        """Set ``values`` on a loaded instance and flush."""
        for field, value in values.items():
            setattr(db_obj, field, value)

        self._session.add(db_obj)
        await self._session.flush()
        await self._session.refresh(db_obj)
        return db_obj

    async def update(self, id: int, values: Dict[str, Any]) -> Optional[ModelType]:
        """
        Update an existing record.

        Returns:
            Updated model instance or None if not found
        """
        db_obj = await self.get_by_id(id)
        if not db_obj:
            return None
        return await self.apply(db_obj, values)

    async def delete(self, id: int) -> bool:
        """
        Delete a record by ID.

        Returns:
            True if deleted, False if not found
        """
        db_obj = await self.get_by_id(id)
        if not db_obj:
            return False

        await self._session.delete(db_obj)
        await self._session.flush()
        return True

    async def increment(self, id: int, column: str, amount: int = 1) -> int:
        """
        Atomically add ``amount`` to an integer column.

        Runs as a single UPDATE with an SQL expression. Loaded instances
        are not synchronized; refresh them to read the new value.
        Returns the number of matched rows.
        """
        attr = getattr(self._model, column)
        stmt = (
            update(self._model)
            .where(self._model.id == id)
            .values({column: attr + amount})
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)
        return result.rowcount

    async def count(self) -> int:
        """Get total count of records."""
        stmt = select(func.count()).select_from(self._model)
        result = await self._session.execute(stmt)
        return result.scalar_one()
