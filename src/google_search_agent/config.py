import unicodedata
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "google-search-agent"
APP_VERSION = "0.3.0"


def strip_control(value: str) -> str:
    """Trim surrounding whitespace and control characters."""
    start, end = 0, len(value)
    while start < end and _is_trimmable(value[start]):
        start += 1
    while end > start and _is_trimmable(value[end - 1]):
        end -= 1
    return value[start:end]


def _is_trimmable(ch: str) -> bool:
    return ch.isspace() or unicodedata.category(ch) == "Cc"


class Settings(BaseSettings):
    # App server config
    LISTEN_HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    # Upstream search config
    GOOGLE_SEARCH_ENDPOINT: str = "https://www.googleapis.com/customsearch/v1"
    SEARCH_TIMEOUT_SECONDS: float = 10.0

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


class GoogleCredentials(BaseSettings):
    GOOGLE_API_KEY: str = ""
    GOOGLE_CSE_ID: str = ""

    # Re-read from the environment and .env on every instantiation
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @field_validator("GOOGLE_API_KEY", "GOOGLE_CSE_ID", mode="after")
    @classmethod
    def trim(cls, v: str) -> str:
        return strip_control(v)

    @property
    def complete(self) -> bool:
        return bool(self.GOOGLE_API_KEY and self.GOOGLE_CSE_ID)


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def load_credentials() -> GoogleCredentials:
    # Read on every call so a fixed environment or .env takes effect without a restart.
    return GoogleCredentials()
