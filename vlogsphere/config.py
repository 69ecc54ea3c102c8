from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "VlogSphere API"
    LOG_LEVEL: str = "INFO"

    # storage
    MONGODB_URI: str = "mongodb://localhost:27017/"
    MONGODB_DB: str = "vlogsphere"
    REDIS_URL: str = "redis://127.0.0.1:6379/0"
    VLOG_CACHE_TTL: int = 60 * 60  # 1 hour

    # auth
    JWT_SECRET: str = Field(default="dev-only-change-me")
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30 * 24 * 60

    # auto-tagging
    AI_TAGGING_ENABLED: bool = False
    MIN_DESCRIPTION_LENGTH: int = 50
    AI_MAX_TAGS: int = 8

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
