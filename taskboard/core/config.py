# File: taskboard/core/config.py

import os
from functools import lru_cache
from typing import List

from pydantic import BaseModel, Field, field_validator


def _split_csv(value: str) -> List[str]:
    return [i.strip() for i in value.split(",") if i.strip()]


class Settings(BaseModel):
    PROJECT_NAME: str = "Taskboard API"
    VERSION: str = "0.1.0"

    api_prefix: str = "/api"
    environment: str = os.getenv("ENVIRONMENT", "development")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS
    backend_cors_origins: List[str] = Field(
        default_factory=lambda: _split_csv(os.getenv("BACKEND_CORS_ORIGINS", "*"))
    )

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./taskboard.db")

    # Security / auth
    secret_key: str = os.getenv("SECRET_KEY", "CHANGE_ME_IN_PRODUCTION")
    algorithm: str = os.getenv("ALGORITHM", "HS256")
    access_token_expire_minutes: int = int(
        os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24 * 30))  # 30 days
    )
    bcrypt_rounds: int = int(os.getenv("BCRYPT_ROUNDS", "10"))
    password_min_length: int = int(os.getenv("PASSWORD_MIN_LENGTH", "6"))

    default_avatar: str = "https://cdn-icons-png.flaticon.com/512/149/149071.png"

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return _split_csv(v)
        if isinstance(v, list):
            return v
        return []

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
