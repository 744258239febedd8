"""
Song API schemas (request/response models).

Request fields use strict primitive types: "1999" is not a release year and
42 is not a title.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from pydantic import BaseModel, StrictInt, StrictStr, model_validator

from .repository import UPDATE_FIELDS

NON_NULLABLE_FIELDS = frozenset({"title", "artist"})


class CreateSongRequest(BaseModel):
    title: StrictStr
    artist: StrictStr
    genre_id: UUID | None = None
    release_year: StrictInt | None = None
    audio_file_path: StrictStr | None = None


class UpdateSongRequest(BaseModel):
    """
    Partial update.

    A field left out of the payload keeps its stored value. An explicit null
    clears genre_id, release_year or audio_file_path; title and artist
    cannot be cleared.
    """

    title: StrictStr | None = None
    artist: StrictStr | None = None
    genre_id: UUID | None = None
    release_year: StrictInt | None = None
    audio_file_path: StrictStr | None = None

    @model_validator(mode="after")
    def _reject_null_required_fields(self) -> "UpdateSongRequest":
        for name in sorted(NON_NULLABLE_FIELDS & self.model_fields_set):
            if getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null.")
        return self

    def changes(self) -> dict[str, Any]:
        """
        Only the fields present in the payload, explicit nulls included.
        """
        return {name: getattr(self, name) for name in UPDATE_FIELDS if name in self.model_fields_set}


class SongView(BaseModel):
    song_id: UUID
    title: str
    artist: str
    genre_id: UUID | None = None
    genre_name: str | None = None
    release_year: int | None = None
    audio_file_path: str | None = None
