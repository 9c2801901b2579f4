"""Repository for sleep entries."""

from __future__ import annotations

from ..db_models import SleepEntry
from ..schemas import SleepRecord
from .base import DatedRepository


class SleepRepository(DatedRepository[SleepRecord]):
    """Read and log nights of sleep."""

    model = SleepEntry
    record_type = SleepRecord
    name = "sleep_entries"

    async def create(
        self,
        *,
        date: str,
        bedtime: str,
        wake_time: str,
        duration_minutes: int,
        quality: int,
        notes: str | None = None,
        factors: list[str] | None = None,
    ) -> SleepRecord:
        entry = SleepEntry(
            date=date,
            bedtime=bedtime,
            wake_time=wake_time,
            duration_minutes=duration_minutes,
            quality=quality,
            notes=notes,
            factors=factors,
        )
        return await self._add(entry, operation="sleep_entries.create")


__all__ = ["SleepRepository"]
