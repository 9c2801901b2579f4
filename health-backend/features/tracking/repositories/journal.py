"""Repository for journal entries."""

from __future__ import annotations

from ..db_models import JournalEntry
from ..schemas import JournalRecord
from .base import DatedRepository


class JournalRepository(DatedRepository[JournalRecord]):
    """Read and write journal entries, including scanned handwriting."""

    model = JournalEntry
    record_type = JournalRecord
    name = "journal_entries"

    async def create(
        self,
        *,
        date: str,
        content: str,
        title: str | None = None,
        mood: int | None = None,
        tags: list[str] | None = None,
        is_scanned: bool = False,
        original_image_uri: str | None = None,
        ocr_confidence: float | None = None,
    ) -> JournalRecord:
        entry = JournalEntry(
            date=date,
            content=content,
            title=title,
            mood=mood,
            tags=tags,
            is_scanned=is_scanned,
            original_image_uri=original_image_uri,
            ocr_confidence=ocr_confidence,
        )
        return await self._add(entry, operation="journal_entries.create")


__all__ = ["JournalRepository"]
