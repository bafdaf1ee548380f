import datetime as dt
import time
from collections.abc import Iterator

import pytest

from clinic.registry.service import Registry

SEED_DAY = dt.date(2025, 1, 10)


@pytest.fixture
def registry() -> Registry:
    return Registry()


@pytest.fixture
def seeded_registry() -> Registry:
    registry = Registry()
    registry.seed_default_appointments(today=SEED_DAY)
    return registry


@pytest.fixture
def far_east_local_time(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Pin the process-local timezone to UTC+14 (POSIX ``TZ`` syntax, no tzdata needed)."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is unavailable on this platform")
    monkeypatch.setenv("TZ", "LINT-14")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
