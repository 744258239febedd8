"""
Exception handlers that turn catalog errors into JSON responses.

Body shape matches FastAPI's HTTPException: {"detail": ...}.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from . import errors

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(errors.CatalogError, catalog_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)


async def catalog_error_handler(request: Request, exc: errors.CatalogError) -> JSONResponse:
    status_code = errors.http_status_for(exc)
    if status_code >= 500:
        logger.error("request_failed path=%s error=%s", request.url.path, type(exc).__name__)
    else:
        logger.warning(
            "request_rejected path=%s error=%s message=%s",
            request.url.path,
            type(exc).__name__,
            exc.message,
        )
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


async def request_validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    # Malformed bodies and path ids are ValidationError, not FastAPI's default 422.
    logger.warning("request_rejected path=%s error=ValidationError", request.url.path)
    return JSONResponse(
        status_code=errors.HTTP_STATUS[errors.ValidationError],
        content={"detail": jsonable_encoder(exc.errors())},
    )
