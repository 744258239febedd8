"""
Async database access helpers (raw SQL) using asyncpg.

The pool is created by the FastAPI lifespan (see `api/main.py`), stored on
`app.state.db_pool` and handed to repositories explicitly. Every helper here
acquires one connection for the duration of a single statement and releases
it on every exit path.

Driver failures are translated into `core.errors` types so routes never see
asyncpg exceptions.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

from . import errors, settings

logger = logging.getLogger(__name__)


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    url = settings.database_url()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _sanitize_database_url(url)


async def create_pool() -> asyncpg.Pool:
    return await asyncpg.create_pool(
        dsn=database_url(),
        min_size=settings.pool_min_size(),
        max_size=settings.pool_max_size(),
        command_timeout=settings.command_timeout_s(),
    )


async def close_pool(pool: asyncpg.Pool | None) -> None:
    if pool is None:
        return None
    await pool.close()


@asynccontextmanager
async def connection(pool: asyncpg.Pool) -> AsyncIterator[asyncpg.Connection]:
    """
    Scoped acquisition of one pooled connection.

    Order matters: DataError and IntegrityConstraintViolationError are both
    PostgresError subclasses. asyncio.TimeoutError (command_timeout) is only
    an OSError from Python 3.11 on.
    """
    try:
        async with pool.acquire() as conn:
            yield conn
    except asyncpg.DataError as exc:
        raise errors.ValidationError(f"Invalid value: {exc}") from exc
    except asyncpg.ForeignKeyViolationError as exc:
        raise errors.ConstraintViolation("Referenced genre does not exist.") from exc
    except asyncpg.IntegrityConstraintViolationError as exc:
        raise errors.ConstraintViolation(f"Constraint violated: {exc.__class__.__name__}") from exc
    except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError) as exc:
        logger.exception("db_failure error=%s", exc.__class__.__name__)
        raise errors.StorageError("Database error.") from exc


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(pool: asyncpg.Pool, sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    async with connection(pool) as conn:
        row = await conn.fetchrow(sql, *args)
    return _record_to_dict(row) if row is not None else None


async def fetch_all(pool: asyncpg.Pool, sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    async with connection(pool) as conn:
        rows = await conn.fetch(sql, *args)
    return [_record_to_dict(r) for r in rows]


async def execute(pool: asyncpg.Pool, sql: str, *args: Any) -> str:
    """
    Run a statement (INSERT/UPDATE/DELETE/DDL) and return the command tag,
    e.g. "DELETE 1".
    """
    async with connection(pool) as conn:
        return await conn.execute(sql, *args)


def affected_rows(status: str) -> int:
    # Command tags end with the row count ("DELETE 3", "INSERT 0 1").
    tail = (status or "").rsplit(" ", 1)[-1]
    return int(tail) if tail.isdigit() else 0


async def ping(pool: asyncpg.Pool) -> bool:
    try:
        row = await fetch_one(pool, "SELECT 1 AS ok")
    except errors.StorageError:
        return False
    return row is not None
