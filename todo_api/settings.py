from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional
from urllib.parse import quote
import os

from dotenv import load_dotenv

load_dotenv()

STORAGE_BACKENDS = ("postgres", "memory")


@dataclass(frozen=True)
class Settings:
    database_url: Optional[str]
    db_user: str
    db_host: str
    db_name: str
    db_password: str
    db_port: int
    db_pool_min_size: int
    db_pool_max_size: int
    db_command_timeout: float
    db_create_schema: bool
    storage_backend: str
    allowed_origins: List[str]
    host: str
    port: int
    log_level: str
    environment: str
    reload: bool

    def __post_init__(self) -> None:
        if self.storage_backend not in STORAGE_BACKENDS:
            raise ValueError(
                f"STORAGE_BACKEND must be one of {list(STORAGE_BACKENDS)}, "
                f"got {self.storage_backend!r}"
            )
        if self.db_pool_min_size < 0 or self.db_pool_max_size < 1:
            raise ValueError("DB_POOL_MIN_SIZE must be >= 0 and DB_POOL_MAX_SIZE >= 1")
        if self.db_pool_min_size > self.db_pool_max_size:
            raise ValueError("DB_POOL_MIN_SIZE cannot exceed DB_POOL_MAX_SIZE")
        if self.db_command_timeout <= 0:
            raise ValueError("DB_COMMAND_TIMEOUT must be positive")

    @property
    def dsn(self) -> str:
        """Connection string for asyncpg; DATABASE_URL wins over the split settings."""
        if self.database_url:
            return self.database_url
        credentials = quote(self.db_user, safe="")
        if self.db_password:
            credentials = f"{credentials}:{quote(self.db_password, safe='')}"
        return f"postgresql://{credentials}@{self.db_host}:{self.db_port}/{self.db_name}"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


def parse_allowed_origins(raw_value: Optional[str]) -> List[str]:
    if raw_value is None:
        return ["*"]
    return [origin.strip() for origin in raw_value.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings(
        database_url=os.getenv("DATABASE_URL") or None,
        db_user=os.getenv("DB_USER", "postgres"),
        db_host=os.getenv("DB_HOST", "localhost"),
        db_name=os.getenv("DB_NAME", "todo"),
        db_password=os.getenv("PASSWORD", ""),
        db_port=int(os.getenv("DB_PORT", "5432")),
        db_pool_min_size=int(os.getenv("DB_POOL_MIN_SIZE", "1")),
        db_pool_max_size=int(os.getenv("DB_POOL_MAX_SIZE", "5")),
        db_command_timeout=float(os.getenv("DB_COMMAND_TIMEOUT", "10")),
        db_create_schema=_env_bool("DB_CREATE_SCHEMA", "true"),
        storage_backend=os.getenv("STORAGE_BACKEND", "postgres").strip().lower(),
        allowed_origins=parse_allowed_origins(os.getenv("ALLOWED_ORIGINS")),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "5000")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        environment=os.getenv("ENVIRONMENT", "").lower(),
        reload=_env_bool("RELOAD", "false"),
    )
