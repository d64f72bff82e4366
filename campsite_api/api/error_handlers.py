"""
Exception Handlers
==================

Maps typed domain errors to JSON responses. Store failures are logged with
their traceback and answered with a generic 500; stack traces never reach
clients.
"""
import logging
from typing import Dict

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from campsite_api.domain.exceptions import CampsiteApiError, ErrorKind

logger = logging.getLogger(__name__)

STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.UNSUPPORTED: status.HTTP_403_FORBIDDEN,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
}


async def campsite_api_error_handler(request: Request, exc: CampsiteApiError) -> JSONResponse:
    status_code = STATUS_BY_KIND.get(exc.kind, status.HTTP_400_BAD_REQUEST)
    headers = {"WWW-Authenticate": "Bearer"} if exc.kind is ErrorKind.UNAUTHENTICATED else None
    logger.info(f"{request.method} {request.url.path} -> {status_code} {exc.kind.value}: {exc.message}")
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "error": exc.kind.value},
        headers=headers,
    )


async def store_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    logger.error(f"Store failure on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal Server Error", "error": ErrorKind.STORE_FAILURE.value},
    )


def register_exception_handlers(application: FastAPI) -> None:
    application.add_exception_handler(CampsiteApiError, campsite_api_error_handler)
    application.add_exception_handler(PyMongoError, store_error_handler)
