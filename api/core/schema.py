"""
Table definitions for the catalog.

`ensure_schema` is idempotent and runs on startup when DB_INIT_SCHEMA is on.
It is not a migration tool: existing tables are left as they are.
gen_random_uuid() is built in from PostgreSQL 13.
"""

from __future__ import annotations

import logging

import asyncpg

from . import db

logger = logging.getLogger(__name__)

GENRES_DDL = """
CREATE TABLE IF NOT EXISTS genres (
  genre_id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
  genre_name TEXT NOT NULL
)
"""

SONGS_DDL = """
CREATE TABLE IF NOT EXISTS songs (
  song_id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
  title TEXT NOT NULL,
  artist TEXT NOT NULL,
  genre_id UUID REFERENCES genres (genre_id) ON DELETE SET NULL,
  release_year INTEGER,
  audio_file_path TEXT
)
"""

# genres first: songs references it.
STATEMENTS: tuple[str, ...] = (GENRES_DDL, SONGS_DDL)


async def ensure_schema(pool: asyncpg.Pool) -> None:
    for statement in STATEMENTS:
        await db.execute(pool, statement)
    logger.info("schema_ready tables=genres,songs")
