# Standard library imports
import logging
from http import HTTPStatus
from uuid import UUID

# External package imports
from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# Local application imports
from ...application.dto.device_dto import ErrorResponse
from ...domain.exceptions import (
    BusinessRuleViolationError,
    DeviceAlreadyExistsError,
    DeviceError,
    DeviceNotFoundError,
    DeviceValidationError,
    InvalidDeviceIdError,
)

logger = logging.getLogger(__name__)


def parse_device_id(raw_device_id: str) -> UUID:
    """
    Convert a path parameter into a device UUID

    Raises:
        InvalidDeviceIdError: If the value is not a valid UUID
    """
    try:
        return UUID(raw_device_id)
    except (ValueError, TypeError):
        raise InvalidDeviceIdError(raw_device_id) from None


def _http_error(status_code: int, body: ErrorResponse) -> HTTPException:
    return HTTPException(status_code=status_code, detail=body.model_dump(exclude_none=True))


def to_http_exception(exception: Exception) -> HTTPException:
    """
    Map a device error onto an HTTP error response

    NotFound -> 404, AlreadyExists -> 409, validation -> 400 (with field),
    business rule -> 422, anything else -> 500 without internal details.
    """
    match exception:
        case DeviceNotFoundError():
            return _http_error(
                status.HTTP_404_NOT_FOUND,
                ErrorResponse(error=exception.error_code, message=exception.message),
            )
        case DeviceAlreadyExistsError():
            return _http_error(
                status.HTTP_409_CONFLICT,
                ErrorResponse(error=exception.error_code, message=exception.message),
            )
        case DeviceValidationError():
            return _http_error(
                status.HTTP_400_BAD_REQUEST,
                ErrorResponse(
                    error=exception.error_code,
                    message=exception.reason,
                    field=exception.field,
                ),
            )
        case BusinessRuleViolationError():
            return _http_error(
                HTTPStatus.UNPROCESSABLE_ENTITY,
                ErrorResponse(error=exception.error_code, message=exception.message),
            )
        case _:
            logger.error(f"Unexpected error handling device request: {exception}", exc_info=exception)
            return _http_error(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                ErrorResponse(error=DeviceError.error_code, message="An unexpected error occurred"),
            )


async def request_validation_exception_handler(
    request: Request,
    exception: RequestValidationError,
) -> JSONResponse:
    """
    Report malformed request bodies and query parameters as 400 validation errors.

    422 is reserved for business rule violations.
    """
    errors = exception.errors()
    field = None
    message = "invalid request"
    if errors:
        first = errors[0]
        location = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(location) or None
        message = first.get("msg", message)

    body = ErrorResponse(error=DeviceValidationError.error_code, message=message, field=field)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": body.model_dump(exclude_none=True)},
    )
