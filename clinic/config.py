from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScheduleConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CLINIC_SCHEDULE_", env_file=".env", extra="ignore"
    )

    work_start_hour: int = Field(default=8, ge=0, le=23)
    work_end_hour: int = Field(default=18, ge=1, le=24)
    slot_minutes: int = Field(default=30, ge=1, le=60)

    @model_validator(mode="after")
    def _check_working_hours(self) -> "ScheduleConfig":
        if self.work_start_hour >= self.work_end_hour:
            raise ValueError(
                f"work_start_hour ({self.work_start_hour}) must be before "
                f"work_end_hour ({self.work_end_hour})"
            )
        return self


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CLINIC_", env_file=".env", extra="ignore")

    clinic_timezone: str | None = None
    seed_defaults: bool = True
    log_level: str = "WARNING"
    schedule: ScheduleConfig = Field(default_factory=lambda: ScheduleConfig())
