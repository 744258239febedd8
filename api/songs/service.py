"""
Song business logic.

Thin orchestration between the API schemas and the repository: one
repository call per operation, rows mapped to `SongView`.
"""

from __future__ import annotations

import logging
from uuid import UUID

import asyncpg

from . import repository, schemas

logger = logging.getLogger(__name__)


def _to_song_view(row: dict) -> schemas.SongView:
    return schemas.SongView(
        song_id=row["song_id"],
        title=str(row["title"]),
        artist=str(row["artist"]),
        genre_id=row.get("genre_id"),
        genre_name=row.get("genre_name"),
        release_year=row.get("release_year"),
        audio_file_path=row.get("audio_file_path"),
    )


async def list_songs(pool: asyncpg.Pool) -> list[schemas.SongView]:
    rows = await repository.list_songs(pool)
    return [_to_song_view(row) for row in rows]


async def create_song(pool: asyncpg.Pool, payload: schemas.CreateSongRequest) -> schemas.SongView:
    row = await repository.create_song(
        pool,
        title=payload.title,
        artist=payload.artist,
        genre_id=payload.genre_id,
        release_year=payload.release_year,
        audio_file_path=payload.audio_file_path,
    )
    song = _to_song_view(row)
    logger.info("song_created song_id=%s genre_id=%s", song.song_id, song.genre_id)
    return song


async def get_song(pool: asyncpg.Pool, song_id: UUID) -> schemas.SongView:
    row = await repository.get_song(pool, song_id)
    return _to_song_view(row)


async def update_song(
    pool: asyncpg.Pool,
    song_id: UUID,
    payload: schemas.UpdateSongRequest,
) -> schemas.SongView:
    changes = payload.changes()
    row = await repository.update_song(pool, song_id, changes)
    logger.info("song_updated song_id=%s fields=%s", song_id, ",".join(changes) or "-")
    return _to_song_view(row)


async def delete_song(pool: asyncpg.Pool, song_id: UUID) -> None:
    deleted = await repository.delete_song(pool, song_id)
    logger.info("song_deleted song_id=%s existed=%s", song_id, deleted)
