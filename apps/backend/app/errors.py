"""Translate domain errors into HTTP responses."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
import logging

from crm_shared.utils.errors import (
    CaseStoreError,
    CrmError,
    DuplicateCaseNumber,
    NotFound,
    StoreUnavailable,
)

logger = logging.getLogger(__name__)


async def store_unavailable_handler(request: Request, exc: StoreUnavailable):
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"error": exc.message},
    )


async def not_found_handler(request: Request, exc: NotFound):
    # absence is a result, not an error: the body is a JSON null
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=None)


async def duplicate_case_number_handler(request: Request, exc: DuplicateCaseNumber):
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"error": exc.message},
    )


async def case_store_error_handler(request: Request, exc: CaseStoreError):
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": exc.message},
    )


async def crm_error_handler(request: Request, exc: CrmError):
    logger.error(f"[api] Unhandled {type(exc).__name__} on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(StoreUnavailable, store_unavailable_handler)
    app.add_exception_handler(NotFound, not_found_handler)
    app.add_exception_handler(DuplicateCaseNumber, duplicate_case_number_handler)
    app.add_exception_handler(CaseStoreError, case_store_error_handler)
    app.add_exception_handler(CrmError, crm_error_handler)
