import datetime as dt

import pytest
from pydantic import ValidationError

from clinic.config import AppConfig, ScheduleConfig
from clinic.registry.factory import build_registry


class TestConfig:
    def test_defaults(self) -> None:
        config = AppConfig()

        assert config.clinic_timezone is None
        assert config.seed_defaults is True
        assert config.schedule.work_start_hour == 8
        assert config.schedule.work_end_hour == 18
        assert config.schedule.slot_minutes == 30

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLINIC_SEED_DEFAULTS", "false")
        monkeypatch.setenv("CLINIC_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("CLINIC_SCHEDULE_SLOT_MINUTES", "15")

        config = AppConfig()

        assert config.seed_defaults is False
        assert config.log_level == "DEBUG"
        assert config.schedule.slot_minutes == 15

    @pytest.mark.parametrize(
        "overrides",
        [
            {"work_start_hour": 18, "work_end_hour": 8},
            {"work_start_hour": 10, "work_end_hour": 10},
            {"slot_minutes": 0},
            {"work_end_hour": 25},
        ],
        ids=["reversed", "empty-day", "zero-slot", "past-midnight"],
    )
    def test_rejects_bad_schedule(self, overrides: dict[str, int]) -> None:
        with pytest.raises(ValidationError):
            ScheduleConfig(**overrides)


class TestBuildRegistry:
    def test_seeds_when_enabled(self) -> None:
        registry = build_registry(AppConfig(seed_defaults=True))

        assert len(registry.list_appointments()) == 32

    def test_skips_seed_when_disabled(self) -> None:
        registry = build_registry(AppConfig(seed_defaults=False))

        assert registry.list_appointments() == []

    def test_applies_schedule(self) -> None:
        config = AppConfig(
            seed_defaults=False,
            schedule=ScheduleConfig(work_start_hour=9, work_end_hour=12, slot_minutes=60),
        )

        registry = build_registry(config)

        times = [s.time for s in registry.available_times_for_doctor("2025-01-10", "John Smith")]
        assert times == ["09:00", "10:00", "11:00"]

    @pytest.mark.usefixtures("far_east_local_time")
    def test_today_follows_local_calendar_by_default(self) -> None:
        registry = build_registry(AppConfig(seed_defaults=False))

        assert registry.today() == dt.date.today()

    @pytest.mark.usefixtures("far_east_local_time")
    def test_seed_uses_local_today(self) -> None:
        registry = build_registry(AppConfig())

        today = dt.date.today().isoformat()
        assert registry.appointments_for_doctor("John Smith")[0].date_time.startswith(today)

    def test_explicit_timezone_is_used(self) -> None:
        registry = build_registry(AppConfig(seed_defaults=False, clinic_timezone="UTC"))

        assert registry.today() == dt.datetime.now(dt.timezone.utc).date()
