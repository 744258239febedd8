"""
Genre API schemas (request/response models).
"""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, StrictStr


class CreateGenreRequest(BaseModel):
    genre_name: StrictStr


class Genre(BaseModel):
    genre_id: UUID
    genre_name: str
