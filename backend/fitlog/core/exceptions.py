"""
Domain exceptions and their HTTP mapping.
"""
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from fitlog.core.logging import get_logger

logger = get_logger(__name__)


class FitlogError(Exception):
    """Base class for application errors."""
    
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SnapshotUnavailableError(FitlogError):
    """The workout snapshot could not be read from storage."""
    
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class MalformedRecordError(FitlogError):
    """A stored workout carries a date that is not a YYYY-MM-DD calendar date."""
    
    def __init__(self, record_id: int | None, value: object):
        super().__init__(f"Workout {record_id} has malformed date {value!r}")
        self.record_id = record_id
        self.value = value


class WorkoutNotFoundError(FitlogError):
    """No workout exists with the requested id."""
    
    status_code = status.HTTP_404_NOT_FOUND
    
    def __init__(self, workout_id: int):
        super().__init__("Workout not found")
        self.workout_id = workout_id


async def fitlog_error_handler(request: Request, exc: FitlogError) -> JSONResponse:
    """Render a FitlogError as {"error": message}."""
    if exc.status_code >= 500:
        logger.error(
            "Request failed",
            path=request.url.path,
            error_type=type(exc).__name__,
            error=exc.message,
        )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def _describe_validation_errors(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into "field: message; ..." text."""
    parts = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error.get("loc", ()) if loc not in ("body", "query", "path"))
        parts.append(f"{field or 'body'}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Invalid request"


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request validation failures as 400 {"error": message}."""
    message = _describe_validation_errors(exc)
    logger.warning(
        "Request rejected",
        path=request.url.path,
        error_type=type(exc).__name__,
        error=message,
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(FitlogError, fitlog_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
