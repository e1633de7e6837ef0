"""Root conftest — shared test configuration and deterministic clock."""

import os
from datetime import datetime, timedelta, timezone

import pytest

# Deterministic settings regardless of the developer's .env
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("LOG_FORMAT", "text")


class StepClock:
    """Returns a strictly increasing UTC time on every call."""

    def __init__(self, start: datetime | None = None):
        self.current = start or datetime(2026, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        value = self.current
        self.current += timedelta(seconds=1)
        return value


@pytest.fixture
def clock():
    """Clock advancing one second per call, so created_at values are distinct."""
    return StepClock()
