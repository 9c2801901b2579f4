"""Shared read operations for repositories over date-keyed tables."""

from __future__ import annotations

import logging
from typing import Any, Generic, Sequence, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import RepositoryError

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class DatedRepository(Generic[RecordT]):
    """Expose ``get_all`` / ``get_by_date_range`` for one ORM model.

    Subclasses set ``model``, ``record_type`` and ``name``. Sessions are owned by
    the caller; repositories flush but never commit.
    """

    model: Type[Any]
    record_type: Type[RecordT]
    name: str

    def __init__(self, session: AsyncSession, *, log: logging.Logger | None = None) -> None:
        self._session = session
        self._logger = log or logger

    async def get_all(self) -> list[RecordT]:
        """Return every record, most recent date first."""

        statement = select(self.model).order_by(self.model.date.desc())
        return await self._fetch(statement, operation=f"{self.name}.get_all")

    async def get_by_date_range(self, start_date: str, end_date: str) -> list[RecordT]:
        """Return records whose ``date`` lies in ``[start_date, end_date]``."""

        statement = (
            select(self.model)
            .where(self.model.date >= start_date, self.model.date <= end_date)
            .order_by(self.model.date.asc())
        )
        return await self._fetch(statement, operation=f"{self.name}.get_by_date_range")

    async def _fetch(self, statement: Select, *, operation: str) -> list[RecordT]:
        try:
            result = await self._session.execute(statement)
        except SQLAlchemyError as exc:
            self._logger.exception("Failed to read %s", self.name, extra={"operation": operation})
            raise RepositoryError(f"Failed to read {self.name}", operation=operation) from exc
        return self._to_records(result.scalars().all())

    async def _add(self, instance: Any, *, operation: str) -> RecordT:
        self._session.add(instance)
        try:
            await self._session.flush()
        except SQLAlchemyError as exc:
            self._logger.exception("Failed to write %s", self.name, extra={"operation": operation})
            raise RepositoryError(f"Failed to write {self.name}", operation=operation) from exc
        return self.record_type.model_validate(instance)

    def _to_records(self, rows: Sequence[Any]) -> list[RecordT]:
        return [self.record_type.model_validate(row) for row in rows]


__all__ = ["DatedRepository"]
