"""Repository coverage against an in-memory SQLite database."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from core.exceptions import RepositoryError
from features.tracking.repositories import TrackingRepositories
from features.tracking.repositories.sleep import SleepRepository


pytestmark = pytest.mark.anyio


async def test_sleep_range_is_inclusive_and_ordered(repositories: TrackingRepositories) -> None:
    for day in ("2026-02-20", "2026-02-16", "2026-02-22", "2026-02-15"):
        await repositories.sleep.create(
            date=day, bedtime="22:30", wake_time="06:30", duration_minutes=480, quality=4
        )

    rows = await repositories.sleep.get_by_date_range("2026-02-16", "2026-02-22")

    assert [row.date for row in rows] == ["2026-02-16", "2026-02-20", "2026-02-22"]


async def test_get_all_returns_newest_first(repositories: TrackingRepositories) -> None:
    await repositories.exercise.create(date="2026-02-10", type="Running", duration_minutes=30)
    await repositories.exercise.create(date="2026-02-12", type="Yoga", duration_minutes=45)

    rows = await repositories.exercise.get_all()

    assert [row.type for row in rows] == ["Yoga", "Running"]
    assert rows[0].duration_minutes == 45


async def test_meal_and_journal_round_trip_optional_fields(repositories: TrackingRepositories) -> None:
    meal = await repositories.nutrition.create(
        date="2026-02-18", meal_type="lunch", total_calories=650, name="Burrito", total_protein=30
    )
    entry = await repositories.journal.create(
        date="2026-02-18", content="Felt good", mood=4, tags=["work", "gym"]
    )

    assert meal.total_calories == 650
    assert meal.total_carbs is None
    assert entry.tags == ["work", "gym"]
    assert entry.is_scanned is False


async def test_habit_completions_filter_by_habit_and_range(repositories: TrackingRepositories) -> None:
    read = await repositories.habits.create(name="Read")
    walk = await repositories.habits.create(name="Walk")

    await repositories.habits.set_completion(read.id, "2026-02-16", True)
    await repositories.habits.set_completion(read.id, "2026-02-17", False)
    await repositories.habits.set_completion(read.id, "2026-02-24", True)
    await repositories.habits.set_completion(walk.id, "2026-02-16", True)

    read_week = await repositories.habits.get_completions_for_habit(read.id, "2026-02-16", "2026-02-22")
    all_week = await repositories.habits.get_completions_for_date_range("2026-02-16", "2026-02-22")

    assert [(c.date, c.completed) for c in read_week] == [("2026-02-16", True), ("2026-02-17", False)]
    assert len(all_week) == 3


async def test_set_completion_updates_existing_row(repositories: TrackingRepositories) -> None:
    habit = await repositories.habits.create(name="Meditate")

    await repositories.habits.set_completion(habit.id, "2026-02-16", True)
    updated = await repositories.habits.set_completion(habit.id, "2026-02-16", False, notes="skipped")

    rows = await repositories.habits.get_completions_for_habit(habit.id, "2026-02-16", "2026-02-16")
    assert len(rows) == 1
    assert updated.completed is False
    assert rows[0].notes == "skipped"


async def test_read_failures_become_repository_errors() -> None:
    session = AsyncMock()
    session.execute.side_effect = OperationalError("SELECT", {}, Exception("disk I/O error"))

    repo = SleepRepository(session)

    with pytest.raises(RepositoryError) as excinfo:
        await repo.get_all()

    assert excinfo.value.operation == "sleep_entries.get_all"
