"""Database access for todo persistence.

Smoke check:
  - Start PostgreSQL, export DATABASE_URL (or PASSWORD for the local defaults).
  - Start the app, POST /api/Todo/, restart the server, then GET /api/Todo/.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import asyncpg

from .settings import Settings

logger = logging.getLogger(__name__)

TODO_TABLE_DDL = """
CREATE TABLE IF NOT EXISTS todo (
    id SERIAL PRIMARY KEY,
    content TEXT,
    status INTEGER
);
"""


class Database:
    """Thin wrapper around an asyncpg pool exposing parameterized queries."""

    def __init__(self, pool: asyncpg.Pool) -> None:
        self._pool = pool

    @classmethod
    async def create(
        cls,
        dsn: str,
        *,
        min_size: int = 1,
        max_size: int = 5,
        command_timeout: Optional[float] = None,
    ) -> "Database":
        pool = await asyncpg.create_pool(
            dsn=dsn,
            min_size=min_size,
            max_size=max_size,
            command_timeout=command_timeout,
        )
        logger.info("Database pool created (min_size=%s, max_size=%s)", min_size, max_size)
        return cls(pool)

    @property
    def pool(self) -> asyncpg.Pool:
        return self._pool

    async def ensure_schema(self) -> None:
        async with self._pool.acquire() as conn:
            await conn.execute(TODO_TABLE_DDL)
        logger.info("Table todo is ready")

    async def fetch(self, query: str, *args: Any) -> List[asyncpg.Record]:
        async with self._pool.acquire() as conn:
            return await conn.fetch(query, *args)

    async def execute(self, query: str, *args: Any) -> str:
        async with self._pool.acquire() as conn:
            return await conn.execute(query, *args)

    async def ping(self) -> bool:
        async with self._pool.acquire() as conn:
            return await conn.fetchval("SELECT 1;") == 1

    async def close(self) -> None:
        await self._pool.close()
        logger.info("Database pool closed")


async def connect(settings: Settings) -> Database:
    database = await Database.create(
        settings.dsn,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
        command_timeout=settings.db_command_timeout,
    )
    if settings.db_create_schema:
        try:
            await database.ensure_schema()
        except Exception:
            await database.close()
            raise
    return database
