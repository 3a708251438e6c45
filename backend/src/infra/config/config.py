import re
from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from infra.utils.version import get_version

_LOCALE_TAG = re.compile(r"^[a-z]{2,3}(_[A-Z]{2})?$")


class LoggingConfig(BaseModel):
    LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    JSON_FORMAT: bool = False
    LIBRARY_LOG_LEVELS: dict[str, str | int] = Field(default_factory=dict)


class LocalizationConfig(BaseModel):
    DEFAULT_LOCALE: str = "en"
    STRINGS_DIR: Optional[str] = None

    @field_validator("DEFAULT_LOCALE", mode="after")
    @classmethod
    def is_locale_valid(cls, locale: str) -> str:
        if not _LOCALE_TAG.match(locale):
            raise ValueError(f"DEFAULT_LOCALE must look like 'en' or 'en_US', got '{locale}'")

        return locale


class Config(BaseSettings):
    APP_NAME: str = "py-text-formatter"
    VERSION: str = get_version()
    ENVIRONMENT: Literal["loc", "dev", "pre", "pro"] = "dev"
    ROOT_PATH: str = "/py-text-formatter"

    HOST: str = "0.0.0.0"
    PORT: int = 8080

    LOGGING_CONFIG: LoggingConfig = LoggingConfig()
    LOCALIZATION_CONFIG: LocalizationConfig = LocalizationConfig()

    model_config = SettingsConfigDict(
        frozen=True,
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_nested_delimiter="__",
    )


@lru_cache
def get_config() -> Config:
    return Config()
