"""
Genre persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

import asyncpg

from core import db, errors


async def list_genres(pool: asyncpg.Pool) -> list[dict[str, Any]]:
    return await db.fetch_all(
        pool,
        """
        SELECT genre_id, genre_name
        FROM genres
        """,
    )


async def create_genre(pool: asyncpg.Pool, *, genre_name: str) -> dict[str, Any]:
    row = await db.fetch_one(
        pool,
        """
        INSERT INTO genres (genre_name)
        VALUES ($1)
        RETURNING genre_id, genre_name
        """,
        genre_name,
    )
    if row is None:
        raise errors.StorageError("Failed to create genre.")
    return row
