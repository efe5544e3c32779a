from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)

    # Validation
    VALIDATION_STRICT: bool = False  # Treat warnings as failures when callers don't choose

    # Reflection
    REFLECT_MAX_DEPTH: int = 100  # Open containers allowed during recursive flattening

    class Config:
        env_prefix = "COMMONS_"
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
