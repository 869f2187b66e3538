# app/services/crud_service.py

from typing import Any, Generic, Sequence, Type, TypeVar

from loguru import logger
from pydantic import BaseModel
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select

from app.core.exceptions import Conflict, NotFound
from app.core.ids import ensure_object_id

ModelT = TypeVar("ModelT", bound=SQLModel)


class CRUDService(Generic[ModelT]):
    """
    Data access for one table.

    ``label`` is the human name used in messages ("campus" ->
    "Invalid campus ID", "Campus not found").
    """

    def __init__(self, model: Type[ModelT], label: str, not_found: str | None = None):
        self.model = model
        self.label = label
        self.not_found = not_found or f"{label.capitalize()} not found"

    # ============================================================
    # CREATE
    # ============================================================
    async def create(self, session: AsyncSession, data: dict[str, Any]) -> ModelT:
        obj = self.model(**data)
        session.add(obj)

        try:
            await session.commit()
        except IntegrityError as e:
            await session.rollback()
            raise self._conflict(e) from e

        await session.refresh(obj)
        logger.info(f"Created {self.label} {obj.id}")
        return obj

    def _conflict(self, error: IntegrityError) -> Exception:
        msg = str(error.orig).lower()
        if "email" in msg:
            return Conflict("Email already in use")
        return Conflict(f"Failed to save {self.label}")

    # ============================================================
    # READ
    # ============================================================
    async def get(self, session: AsyncSession, obj_id: str) -> ModelT:
        obj_id = ensure_object_id(obj_id, self.label)

        obj = await session.get(self.model, obj_id)
        if not obj:
            raise NotFound(self.not_found)
        return obj

    async def find_many(self, session: AsyncSession, order_by=None, **filters) -> Sequence[ModelT]:
        query = select(self.model)
        for column, value in filters.items():
            query = query.where(getattr(self.model, column) == value)
        if order_by is not None:
            query = query.order_by(order_by)

        result = await session.execute(query)
        return result.scalars().all()

    async def find_one(self, session: AsyncSession, **filters) -> ModelT | None:
        rows = await self.find_many(session, **filters)
        return rows[0] if rows else None

    async def count(self, session: AsyncSession, **filters) -> int:
        query = select(func.count()).select_from(self.model)
        for column, value in filters.items():
            query = query.where(getattr(self.model, column) == value)

        result = await session.execute(query)
        return result.scalar_one()

    # ============================================================
    # UPDATE
    # ============================================================
    async def update(self, session: AsyncSession, obj_id: str, data: BaseModel | dict[str, Any],
                     partial: bool = False) -> ModelT:
        """
        ``partial=False`` replaces every field of the payload schema, so an
        optional field left out is cleared. ``partial=True`` writes only the
        keys the caller actually sent.
        """
        obj = await self.get(session, obj_id)

        if isinstance(data, BaseModel):
            data = data.model_dump(exclude_unset=partial)

        for key, value in data.items():
            setattr(obj, key, value)

        session.add(obj)
        try:
            await session.commit()
        except IntegrityError as e:
            await session.rollback()
            raise self._conflict(e) from e

        await session.refresh(obj)
        logger.info(f"Updated {self.label} {obj.id} ({', '.join(data) or 'no fields'})")
        return obj

    # ============================================================
    # DELETE
    # ============================================================
    async def delete(self, session: AsyncSession, obj_id: str) -> ModelT:
        obj = await self.get(session, obj_id)

        await session.delete(obj)
        await session.commit()
        logger.info(f"Deleted {self.label} {obj.id}")
        return obj
