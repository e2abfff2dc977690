from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)

    # Compiler
    DEFAULT_AUTO_TRIM: bool = False
    MAX_SCHEMA_DEPTH: int = 64

    class Config:
        env_prefix = "RULEFORGE_"
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
