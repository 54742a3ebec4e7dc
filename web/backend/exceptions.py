#!/usr/bin/env python3
"""
Custom exceptions and error handlers for the web application.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse

from compatibility.exceptions import CompatibilityError, UnsupportedCategoryError

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class InvalidPolicyException(ServiceException):
    """Raised when a ranking policy is invalid."""
    pass


def _error_response(status_code: int, error: str, error_type: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": error,
            "type": error_type
        }
    )


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
    logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)

    status_code = 500
    if isinstance(exc, InvalidPolicyException):
        status_code = 400

    return _error_response(status_code, str(exc), exc.__class__.__name__)


async def compatibility_exception_handler(
    request: Request,
    exc: CompatibilityError
) -> JSONResponse:
    """
    Handle engine exceptions.

    An unsupported category is the caller's mistake (400); any other
    configuration error is a deployment problem (500).
    """
    if isinstance(exc, UnsupportedCategoryError):
        logger.info(f"Rejected request to {request.url.path}: {exc}")
        status_code = 400
    else:
        logger.error(f"Engine error in {request.url.path}: {exc}", exc_info=True)
        status_code = 500

    return _error_response(status_code, str(exc), exc.__class__.__name__)


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle FastAPI HTTP exceptions with consistent format.

    Args:
        request: The FastAPI request.
        exc: The HTTP exception.

    Returns:
        JSONResponse with error details.
    """
    return _error_response(exc.status_code, exc.detail, "HTTPException")


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.

    Args:
        request: The FastAPI request.
        exc: The exception.

    Returns:
        JSONResponse with error details.
    """
    logger.exception(f"Unexpected error in {request.url.path}")

    return _error_response(500, "Internal server error", "InternalError")
