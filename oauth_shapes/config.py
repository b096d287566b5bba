from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    LOG_LEVEL: str = "WARNING"
    ENABLE_DEBUG_LOGGING: bool = False
    LOG_REJECTIONS: bool = True  # Log every rejected document at DEBUG
    MAX_DESCRIPTION_VIOLATIONS: int = 5

    class Config:
        env_file = ".env"
        env_prefix = "OAUTH_SHAPES_"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
