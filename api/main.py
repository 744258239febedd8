import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core import db, schema, settings
from core.dependencies import get_pool
from core.error_handlers import register_error_handlers
from genres import router as genres_router
from songs import router as songs_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pool per process, handed to routes through core.dependencies.get_pool.
    pool = await db.create_pool()
    app.state.db_pool = pool
    try:
        if settings.init_schema_enabled():
            await schema.ensure_schema(pool)
        yield
    finally:
        app.state.db_pool = None
        await db.close_pool(pool)


def create_app() -> FastAPI:
    app = FastAPI(title="song-catalog", lifespan=lifespan)

    origins = settings.cors_allow_origins()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Browsers reject credentialed requests against a wildcard origin.
        allow_credentials="*" not in origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(songs_router.router, tags=["songs"])
    app.include_router(genres_router.router, tags=["genres"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/health/db")
    async def health_db(pool=Depends(get_pool)) -> JSONResponse:
        if await db.ping(pool):
            return JSONResponse(status_code=200, content={"status": "ok"})
        return JSONResponse(status_code=503, content={"status": "unavailable"})

    @app.get("/")
    def root() -> dict:
        return {"message": "song catalog api"}

    return app


app = create_app()


def serve() -> None:
    logging.basicConfig(
        level=settings.log_level(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logger.info("server_starting host=%s port=%s", settings.host(), settings.port())
    uvicorn.run(app, host=settings.host(), port=settings.port())


if __name__ == "__main__":
    serve()
