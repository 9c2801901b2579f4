from __future__ import annotations

from datetime import date

import pytest

from features.insights.schemas import Trend
from features.insights.trends import classify_trend, compute_trend_data
from tests.helpers.tracking_fakes import exercise, fake_repositories, sleep


@pytest.mark.parametrize(
    ("current", "previous", "expected"),
    [
        (111, 100, Trend.UP),
        (110, 100, Trend.STABLE),
        (90, 100, Trend.STABLE),
        (89, 100, Trend.DOWN),
        (95, 100, Trend.STABLE),
        (5, 0, Trend.UP),
        (0, 0, Trend.STABLE),
    ],
)
def test_classify_trend(current, previous, expected):
    assert classify_trend(current, previous) is expected


def test_classify_trend_with_custom_threshold():
    assert classify_trend(104, 100, threshold=0.03) is Trend.UP


@pytest.mark.anyio
async def test_trend_data_compares_this_week_with_last():
    repositories = fake_repositories(
        sleep_entries=[sleep("2026-02-17", minutes=480), sleep("2026-02-10", minutes=360)],
        exercise_sessions=[exercise("2026-02-11", 60), exercise("2026-02-18", 30)],
    )

    trends = await compute_trend_data(repositories, today=date(2026, 2, 20))

    assert trends.this_week.avg_sleep_hours == pytest.approx(8.0)
    assert trends.last_week.avg_sleep_hours == pytest.approx(6.0)
    assert trends.sleep_trend is Trend.UP
    assert trends.exercise_trend is Trend.DOWN
    assert trends.habit_trend is Trend.STABLE
