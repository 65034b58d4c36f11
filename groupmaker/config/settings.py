# groupmaker/config/settings.py

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    ENV: str = "development"
    LOG_LEVEL: str = "INFO"
    GROUP_SIZE_DEFAULT: int = 4
    GROUP_SIZE_MIN: int = 2
    GROUP_SIZE_MAX: int = 20
    MAX_SWAPS_DEFAULT: int = 50
    RANDOM_SEED: Optional[int] = None
    service_name: str = "groupmaker"
    export_title: str = "Groups Generated by Group Division App"

    class Config:
        env_file = ".env"

settings = Settings()
