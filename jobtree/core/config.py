"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import List
from urllib.parse import urlparse

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_MONGO_URL_PREFIXES = ("mongodb://", "mongodb+srv://")
DEFAULT_DB_NAME = "jobtree"


class Settings(BaseSettings):
    # MongoDB
    mongo_url: str = Field("mongodb://localhost/jobtree", validation_alias="MONGO_URL")
    mongo_db: str = ""

    # Server
    host: str = "0.0.0.0"
    port: int = Field(8080, validation_alias="PORT")
    cors_origins: List[str] = ["*"]

    # Access tokens (opaque, hex encoded; 128 bytes -> 256 chars)
    access_token_bytes: int = 128
    access_token_ttl_days: int = 3650

    # Password hashing
    bcrypt_rounds: int = 12

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False

    @field_validator("mongo_url")
    @classmethod
    def validate_mongo_url(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("MONGO_URL must be set and non-empty")
        if not v.strip().startswith(VALID_MONGO_URL_PREFIXES):
            raise ValueError("MONGO_URL must be a MongoDB URL (mongodb:// or mongodb+srv://)")
        return v.strip()

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if v < 1 or v > 65535:
            raise ValueError("PORT must be between 1 and 65535")
        return v

    @field_validator("access_token_bytes")
    @classmethod
    def validate_token_bytes(cls, v: int) -> int:
        if v < 16:
            raise ValueError("access_token_bytes must be at least 16")
        return v

    @field_validator("access_token_ttl_days")
    @classmethod
    def validate_token_ttl(cls, v: int) -> int:
        if v < 1:
            raise ValueError("access_token_ttl_days must be positive")
        return v

    @field_validator("bcrypt_rounds")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        # bcrypt accepts cost factors 4..31
        if v < 4 or v > 31:
            raise ValueError("bcrypt_rounds must be between 4 and 31")
        return v

    @property
    def database_name(self) -> str:
        """Explicit mongo_db wins, else the path of MONGO_URL, else 'jobtree'."""
        if self.mongo_db:
            return self.mongo_db
        path = urlparse(self.mongo_url).path.lstrip("/")
        return path or DEFAULT_DB_NAME

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
