"""
Song API endpoints.
"""

from __future__ import annotations

from uuid import UUID

import asyncpg
from fastapi import APIRouter, Depends, Response, status

from core.dependencies import get_pool

from . import schemas, service

router = APIRouter()


@router.get("/songs", response_model=list[schemas.SongView])
async def list_songs(pool: asyncpg.Pool = Depends(get_pool)) -> list[schemas.SongView]:
    return await service.list_songs(pool)


@router.post("/songs", response_model=schemas.SongView)
async def create_song(
    request: schemas.CreateSongRequest,
    pool: asyncpg.Pool = Depends(get_pool),
) -> schemas.SongView:
    return await service.create_song(pool, request)


@router.get("/songs/{song_id}", response_model=schemas.SongView)
async def get_song(
    song_id: UUID,
    pool: asyncpg.Pool = Depends(get_pool),
) -> schemas.SongView:
    return await service.get_song(pool, song_id)


@router.put("/songs/{song_id}", response_model=schemas.SongView)
async def update_song(
    song_id: UUID,
    request: schemas.UpdateSongRequest,
    pool: asyncpg.Pool = Depends(get_pool),
) -> schemas.SongView:
    return await service.update_song(pool, song_id, request)


@router.delete("/songs/{song_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_song(
    song_id: UUID,
    pool: asyncpg.Pool = Depends(get_pool),
) -> Response:
    """
    Idempotent: deleting an unknown song also returns 204.
    """
    await service.delete_song(pool, song_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
