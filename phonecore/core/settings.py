from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="phonecore", alias="APP_NAME")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    strict_calling_codes: bool = Field(default=True, alias="STRICT_CALLING_CODES")
    region_name_language: str = Field(default="en", alias="REGION_NAME_LANGUAGE")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
