"""
Custom exceptions and error handlers for consistent error responses.

Provides the pricing error taxonomy and global exception handlers that
render failures in the same shape the pricing endpoints use.
"""

import logging

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from typing import Any, Dict

logger = logging.getLogger(__name__)

BAD_REQUEST_MESSAGE = "Bad request"


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, error_code: str, status_code: int = 500, details: Dict[str, Any] = None):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class PricingError(AppException):
    """Base class for pricing request failures. Always a client error."""

    message = "Bad request"
    error_code = "ERR_PRICING"

    def __init__(self, details: Dict[str, Any] = None):
        super().__init__(
            message=type(self).message,
            error_code=type(self).error_code,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details
        )


class MissingInputError(PricingError):
    """A required field is absent, empty or zero."""
    message = "Missing required input data"
    error_code = "ERR_PRICING_MISSING_INPUT"


class InvalidDistanceError(PricingError):
    """Distance is not numeric, or the organization id is not a string."""
    message = "Invalid distance value"
    error_code = "ERR_PRICING_INVALID_DISTANCE"


class InvalidNumericValuesError(PricingError):
    message = "Invalid numeric values"
    error_code = "ERR_PRICING_INVALID_NUMERIC"


class InvalidItemTypeError(PricingError):
    message = "Invalid item type"
    error_code = "ERR_PRICING_INVALID_ITEM_TYPE"


class OrganizationNotFoundError(PricingError):
    message = "Organization not found"
    error_code = "ERR_PRICING_ORGANIZATION_NOT_FOUND"


class ItemNotFoundError(PricingError):
    message = "Item not found"
    error_code = "ERR_PRICING_ITEM_NOT_FOUND"


class PricingNotFoundError(PricingError):
    message = "Pricing data not found for the given parameters"
    error_code = "ERR_PRICING_RULE_NOT_FOUND"


def failure_payload(error: str, message: str = BAD_REQUEST_MESSAGE, details: Dict[str, Any] = None) -> dict:
    """Build the uniform failure body returned by every pricing endpoint."""
    payload = {"success": False, "error": error, "message": message}
    if details:
        payload["details"] = details
    return payload


# Global Exception Handlers

async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handler for custom application exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content=failure_payload(exc.message, details=exc.details)
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handler for FastAPI HTTPException with standardized format."""
    return JSONResponse(
        status_code=exc.status_code,
        content=failure_payload(str(exc.detail), message=BAD_REQUEST_MESSAGE if exc.status_code < 500 else "Internal server error"),
        headers=getattr(exc, "headers", None)
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are client errors: 400, not 422."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=failure_payload(
            "Invalid request body",
            details={"errors": jsonable_errors(exc)}
        )
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handler for unhandled exceptions."""
    logger.exception("Unhandled exception: %s", type(exc).__name__)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=failure_payload("Internal server error", message="Internal server error")
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    # ctx may carry exception instances that JSON cannot encode
    return [
        {key: value for key, value in error.items() if key in ("type", "loc", "msg")}
        for error in exc.errors()
    ]
