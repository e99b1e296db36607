"""Exception handlers turning failures into `{message, field?}` responses."""

import fastapi
import structlog
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from components.core.schemas import ErrorMessage

logger = structlog.get_logger(__name__)


def _error_field(loc) -> str | None:
    # loc looks like ("body", "name") or ("path", "debt_id")
    parts = [str(part) for part in loc if part not in ("body", "path", "query")]
    return parts[-1] if parts else None


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {"msg": "Invalid request", "loc": ()}
    field = _error_field(first.get("loc", ()))
    message = first.get("msg", "Invalid request")
    logger.info(
        "request_validation_failed",
        path=request.url.path,
        method=request.method,
        field=field,
        error=message,
    )
    body = ErrorMessage(message=message, field=field)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=body.model_dump(exclude_none=True),
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorMessage(message=str(exc.detail)).model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "unhandled_error", path=request.url.path, method=request.method
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal Server Error"},
    )


def register_exception_handlers(app: fastapi.FastAPI) -> None:
    """Attach the error handlers to the application."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
