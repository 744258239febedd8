"""
Song persistence (raw SQL).

Every read and write returns the song view: song columns plus `genre_name`
from a LEFT JOIN on genres. Writes use a data-modifying CTE so the view is
produced by the same statement.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

import asyncpg

from core import db, errors

# Column order of the partial-update statement; each field binds a
# "present" flag followed by its value.
UPDATE_FIELDS: tuple[str, ...] = (
    "title",
    "artist",
    "genre_id",
    "release_year",
    "audio_file_path",
)

LIST_SONGS_SQL = """
SELECT s.song_id, s.title, s.artist, s.genre_id,
       g.genre_name, s.release_year, s.audio_file_path
FROM songs s
LEFT JOIN genres g ON g.genre_id = s.genre_id
"""

GET_SONG_SQL = """
SELECT s.song_id, s.title, s.artist, s.genre_id,
       g.genre_name, s.release_year, s.audio_file_path
FROM songs s
LEFT JOIN genres g ON g.genre_id = s.genre_id
WHERE s.song_id = $1
"""

CREATE_SONG_SQL = """
WITH inserted AS (
    INSERT INTO songs (title, artist, genre_id, release_year, audio_file_path)
    VALUES ($1, $2, $3, $4, $5)
    RETURNING song_id, title, artist, genre_id, release_year, audio_file_path
)
SELECT i.song_id, i.title, i.artist, i.genre_id,
       g.genre_name, i.release_year, i.audio_file_path
FROM inserted i
LEFT JOIN genres g ON g.genre_id = i.genre_id
"""

UPDATE_SONG_SQL = """
WITH updated AS (
    UPDATE songs
    SET title = CASE WHEN $2::boolean THEN $3::text ELSE title END,
        artist = CASE WHEN $4::boolean THEN $5::text ELSE artist END,
        genre_id = CASE WHEN $6::boolean THEN $7::uuid ELSE genre_id END,
        release_year = CASE WHEN $8::boolean THEN $9::integer ELSE release_year END,
        audio_file_path = CASE WHEN $10::boolean THEN $11::text ELSE audio_file_path END
    WHERE song_id = $1
    RETURNING song_id, title, artist, genre_id, release_year, audio_file_path
)
SELECT u.song_id, u.title, u.artist, u.genre_id,
       g.genre_name, u.release_year, u.audio_file_path
FROM updated u
LEFT JOIN genres g ON g.genre_id = u.genre_id
"""

DELETE_SONG_SQL = """
DELETE FROM songs
WHERE song_id = $1
"""


def update_args(song_id: UUID, changes: dict[str, Any]) -> list[Any]:
    """
    Positional arguments for UPDATE_SONG_SQL.

    Fields missing from `changes` bind (False, None) and keep the stored
    value; present fields bind (True, value), even when value is None.
    """
    unknown = set(changes) - set(UPDATE_FIELDS)
    if unknown:
        raise errors.ValidationError(f"Unknown song fields: {', '.join(sorted(unknown))}")

    args: list[Any] = [song_id]
    for name in UPDATE_FIELDS:
        present = name in changes
        args.append(present)
        args.append(changes[name] if present else None)
    return args


async def list_songs(pool: asyncpg.Pool) -> list[dict[str, Any]]:
    # No ORDER BY: callers must not rely on row order.
    return await db.fetch_all(pool, LIST_SONGS_SQL)


async def create_song(
    pool: asyncpg.Pool,
    *,
    title: str,
    artist: str,
    genre_id: UUID | None = None,
    release_year: int | None = None,
    audio_file_path: str | None = None,
) -> dict[str, Any]:
    row = await db.fetch_one(
        pool,
        CREATE_SONG_SQL,
        title,
        artist,
        genre_id,
        release_year,
        audio_file_path,
    )
    if row is None:
        raise errors.StorageError("Failed to create song.")
    return row


async def get_song(pool: asyncpg.Pool, song_id: UUID) -> dict[str, Any]:
    row = await db.fetch_one(pool, GET_SONG_SQL, song_id)
    if row is None:
        raise errors.NotFound("Song not found.")
    return row


async def update_song(pool: asyncpg.Pool, song_id: UUID, changes: dict[str, Any]) -> dict[str, Any]:
    row = await db.fetch_one(pool, UPDATE_SONG_SQL, *update_args(song_id, changes))
    if row is None:
        raise errors.NotFound("Song not found.")
    return row


async def delete_song(pool: asyncpg.Pool, song_id: UUID) -> bool:
    """
    Delete a song if it exists. Returns whether a row was removed; a missing
    song is not an error.
    """
    status = await db.execute(pool, DELETE_SONG_SQL, song_id)
    return db.affected_rows(status) > 0
