from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False)

    # namespace for all documents: artifacts/<app_id>/users/<uid>/...
    app_id: str = Field(default="fitness-tracker-prod", validation_alias="APP_ID")

    db_path: str = Field(default="data/resetfit.sqlite3", validation_alias="DB_PATH")
    database_url: str | None = Field(default=None, validation_alias="DATABASE_URL")

    # Fixed uid (skips anonymous sign-in); otherwise a uuid is kept in identity_path
    user_id: str | None = Field(default=None, validation_alias="USER_ID")
    identity_path: str = Field(default="data/identity", validation_alias="IDENTITY_PATH")

    # "today" and log date keys are taken in this zone
    tz_name: str = Field(default="UTC", validation_alias="TZ_NAME")

    calorie_target: int = Field(default=1800, validation_alias="CALORIE_TARGET")
    protein_target_g: int = Field(default=160, validation_alias="PROTEIN_TARGET_G")
    calorie_band_low: int = Field(default=1700, validation_alias="CALORIE_BAND_LOW")
    calorie_band_high: int = Field(default=1900, validation_alias="CALORIE_BAND_HIGH")

    # calendar: real weekday of today; program: program day 0 is treated as Monday
    weekday_anchor: Literal["calendar", "program"] = Field(default="calendar", validation_alias="WEEKDAY_ANCHOR")

    sync_poll_interval_s: float = Field(default=2.0, validation_alias="SYNC_POLL_INTERVAL_S")

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")


settings = Settings()
