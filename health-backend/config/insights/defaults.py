"""Defaults for derived insights and AI coaching."""

from __future__ import annotations

from core.utils.env import get_env_float, get_env_int

# Weekly windows run Monday..Sunday (date.weekday() == 0 is Monday)
WEEK_START_WEEKDAY = 0
DAYS_PER_WEEK = 7

# Relative change beyond which a metric counts as trending up/down
TREND_THRESHOLD = get_env_float("INSIGHTS_TREND_THRESHOLD", 0.10)

# Daily coaching is the only cached artifact (1 hour, milliseconds)
COACHING_CACHE_TTL_MS = get_env_int("INSIGHTS_COACHING_TTL_MS", 60 * 60 * 1000)

# Look-back window used when gathering data for coaching prompts
HISTORY_DAYS = get_env_int("INSIGHTS_HISTORY_DAYS", 7)

# Ceiling for each coaching text generation call (seconds)
REQUEST_TIMEOUT = get_env_float("INSIGHTS_REQUEST_TIMEOUT", 30.0)

TEXT_MODEL = "claude-sonnet-4-20250514"

# max_tokens per artifact kind
MAX_TOKENS = {
    "coaching": 1024,
    "habits": 512,
    "sleep": 512,
    "exercise": 256,
    "mood": 512,
    "nutrition": 256,
}

# Minimum history before a remote analysis is attempted
MIN_SLEEP_ENTRIES = 3
MIN_JOURNAL_ENTRIES = 2
MIN_MEALS = 3

# Number of meals included in prompts
PROMPT_MEAL_LIMIT = 10

__all__ = [
    "WEEK_START_WEEKDAY",
    "DAYS_PER_WEEK",
    "TREND_THRESHOLD",
    "COACHING_CACHE_TTL_MS",
    "HISTORY_DAYS",
    "REQUEST_TIMEOUT",
    "TEXT_MODEL",
    "MAX_TOKENS",
    "MIN_SLEEP_ENTRIES",
    "MIN_JOURNAL_ENTRIES",
    "MIN_MEALS",
    "PROMPT_MEAL_LIMIT",
]
