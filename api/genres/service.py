"""
Genre business logic.
"""

from __future__ import annotations

import logging

import asyncpg

from . import repository, schemas

logger = logging.getLogger(__name__)


def _to_genre(row: dict) -> schemas.Genre:
    return schemas.Genre(
        genre_id=row["genre_id"],
        genre_name=str(row["genre_name"]),
    )


async def list_genres(pool: asyncpg.Pool) -> list[schemas.Genre]:
    rows = await repository.list_genres(pool)
    return [_to_genre(row) for row in rows]


async def create_genre(pool: asyncpg.Pool, payload: schemas.CreateGenreRequest) -> schemas.Genre:
    row = await repository.create_genre(pool, genre_name=payload.genre_name)
    genre = _to_genre(row)
    logger.info("genre_created genre_id=%s", genre.genre_id)
    return genre
