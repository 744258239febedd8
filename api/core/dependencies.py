"""
Shared FastAPI dependencies.
"""

from __future__ import annotations

import asyncpg
from fastapi import Request


def get_pool(request: Request) -> asyncpg.Pool:
    pool = getattr(request.app.state, "db_pool", None)
    if pool is None:
        raise RuntimeError("DB pool is not initialized. The app lifespan creates it on startup.")
    return pool
