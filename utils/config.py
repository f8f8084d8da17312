from typing import List

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    REDIS_CLOUD_URL: str = "redis://localhost:6379/0"
    REDIS_KEY_PREFIX: str = "ats"

    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000"]

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
