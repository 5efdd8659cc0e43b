#!/usr/bin/env python3
"""
Error handlers for the web application.

Domain errors (core.exceptions.TrustSignalError) render as structured JSON
bodies with the status code the error declares. Every body carries
success=False, error and type.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.orm.exc import StaleDataError

from core.exceptions import TrustSignalError

logger = logging.getLogger(__name__)


def _error_body(error, error_type: str) -> dict:
    return {"success": False, "error": error, "type": error_type}


async def trust_signal_exception_handler(
    request: Request,
    exc: TrustSignalError
) -> JSONResponse:
    """
    Handle domain errors from the verification gate and resume pipeline.

    Client errors are expected traffic (wrong codes, bad uploads) and are
    logged at INFO.
    """
    if exc.status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.info(f"{exc.__class__.__name__} in {request.url.path}: {exc}")

    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def stale_data_exception_handler(
    request: Request,
    exc: StaleDataError
) -> JSONResponse:
    """A verification record was changed by another process mid-request."""
    logger.warning(f"Concurrent update rejected in {request.url.path}: {exc}")

    return JSONResponse(
        status_code=409,
        content=_error_body("Concurrent update, please retry", "ConcurrentUpdate")
    )


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """Handle FastAPI HTTP exceptions with the same body shape."""
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.detail, "HTTPException")
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    logger.exception(f"Unexpected error in {request.url.path}")

    return JSONResponse(
        status_code=500,
        content=_error_body("Internal server error", "InternalError")
    )


def register_exception_handlers(app) -> None:
    app.add_exception_handler(TrustSignalError, trust_signal_exception_handler)
    app.add_exception_handler(StaleDataError, stale_data_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
