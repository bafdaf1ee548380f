from loguru import logger

from clinic.config import AppConfig
from clinic.registry.service import Registry


def build_registry(config: AppConfig) -> Registry:
    """Build the registry from config, seeding the demo schedule when enabled."""
    schedule = config.schedule
    logger.info(
        "Building registry: hours {}-{}, {} minute slots, timezone {}",
        schedule.work_start_hour,
        schedule.work_end_hour,
        schedule.slot_minutes,
        config.clinic_timezone or "local",
    )
    registry = Registry(
        work_start_hour=schedule.work_start_hour,
        work_end_hour=schedule.work_end_hour,
        slot_minutes=schedule.slot_minutes,
        clinic_timezone=config.clinic_timezone,
    )
    if config.seed_defaults:
        registry.seed_default_appointments()
    return registry
