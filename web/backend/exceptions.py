#!/usr/bin/env python3
"""
Custom exceptions and error handlers for the web application.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class JobNotFoundException(ServiceException):
    """Raised when a job is not found."""
    pass


class CandidateNotFoundException(ServiceException):
    """Raised when a candidate profile is not found."""
    pass


class EmployerNotFoundException(ServiceException):
    """Raised when an employer is not found."""
    pass


class InvalidRequestException(ServiceException):
    """Raised when request parameters are inconsistent."""
    pass


NOT_FOUND_EXCEPTIONS = (JobNotFoundException, CandidateNotFoundException, EmployerNotFoundException)


def _error_body(error, error_type: str) -> dict:
    return {
        "success": False,
        "error": error,
        "type": error_type
    }


async def service_exception_handler(
    request: Request,
    exc: ServiceException
) -> JSONResponse:
    """
    Handle service layer exceptions.

    Args:
        request: The FastAPI request.
        exc: The service exception.

    Returns:
        JSONResponse with error details.
    """
    status_code = 500
    if isinstance(exc, NOT_FOUND_EXCEPTIONS):
        status_code = 404
    elif isinstance(exc, InvalidRequestException):
        status_code = 400

    if status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.info(f"{exc.__class__.__name__} in {request.url.path}: {exc}")

    return JSONResponse(
        status_code=status_code,
        content=_error_body(str(exc), exc.__class__.__name__)
    )


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """Handle FastAPI HTTP exceptions with consistent format."""
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.detail, "HTTPException")
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation errors with consistent format."""
    return JSONResponse(
        status_code=422,
        content=_error_body(
            [{"loc": list(e.get("loc", ())), "msg": e.get("msg")} for e in exc.errors()],
            "ValidationError"
        )
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error in {request.url.path}")

    return JSONResponse(
        status_code=500,
        content=_error_body("Internal server error", "InternalError")
    )
