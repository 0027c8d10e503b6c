# movieservices/common/settings.py
from __future__ import annotations

from functools import lru_cache
from typing import List, Literal

from pydantic import BaseModel, Field, field_validator, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from movieservices.common.strings.splitters import csv_to_list, to_bool


class APIConfig(BaseModel):
    host: str = "0.0.0.0"
    prefix: str = "/v1"
    movie_info_port: int = 8080
    review_port: int = 8081

    cors_allow_origins: List[str] = Field(default_factory=lambda: ["http://localhost:3000"])
    cors_allow_methods: List[str] = Field(default_factory=lambda: ["GET", "POST", "PUT", "DELETE", "OPTIONS"])
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = False

    @field_validator("cors_allow_origins", "cors_allow_methods", "cors_allow_headers", mode="before")
    @classmethod
    def _split_csv(cls, v):
        return csv_to_list(v)

    @field_validator("cors_allow_credentials", mode="before")
    @classmethod
    def _boolify(cls, v):
        return to_bool(v)


class MongoConfig(BaseModel):
    uri: str = "mongodb://localhost:27017"
    db_name: str = "movieservices"
    movie_info_collection: str = "movieInfo"
    review_collection: str = "review"
    server_selection_timeout_ms: int = Field(5000, ge=100)
    ensure_indexes: bool = True

    @field_validator("ensure_indexes", mode="before")
    @classmethod
    def _boolify(cls, v):
        return to_bool(v, default=True)


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "movieservices"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"

    # -------- Store --------
    # "mongo" talks to MONGO__URI; "memory" keeps records in-process (local runs, tests)
    store_backend: Literal["mongo", "memory"] = "mongo"

    # -------- Sub-configs --------
    api: APIConfig = APIConfig()
    mongo: MongoConfig = MongoConfig()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("store_backend", mode="before")
    @classmethod
    def _lower_backend(cls, v):
        return str(v).strip().lower() if v is not None else v

    @computed_field  # type: ignore[misc]
    @property
    def is_dev(self) -> bool:
        return self.app_env.lower() in ("development", "test")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from movieservices.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
