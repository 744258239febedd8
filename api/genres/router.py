"""
Genre API endpoints.

Genres can only be created and listed.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends

from core.dependencies import get_pool

from . import schemas, service

router = APIRouter()


@router.get("/genres", response_model=list[schemas.Genre])
async def list_genres(pool: asyncpg.Pool = Depends(get_pool)) -> list[schemas.Genre]:
    return await service.list_genres(pool)


@router.post("/genres", response_model=schemas.Genre)
async def create_genre(
    request: schemas.CreateGenreRequest,
    pool: asyncpg.Pool = Depends(get_pool),
) -> schemas.Genre:
    return await service.create_genre(pool, request)
