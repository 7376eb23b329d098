import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from duck.schemas import Error

logger = logging.getLogger(__name__)


class StoreFailure(HTTPException):
    """Exception raised when the store cannot serve a request"""

    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail
        )


class DuckMissing(HTTPException):
    """Exception raised when a duck id is unknown"""

    def __init__(self, duck_id: int):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"duck '{duck_id}' not found"
        )


def error_response(code: int, message: str, headers: Optional[dict[str, str]] = None) -> JSONResponse:
    return JSONResponse(
        status_code=code,
        content=Error(code=code, message=message).model_dump(),
        headers=headers,
    )


def describe_validation_error(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into one readable line."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg')}")
    return "; ".join(parts)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    message = describe_validation_error(exc)
    logger.info(f"Rejected {request.method} {request.url.path}: {message}")
    return error_response(status.HTTP_400_BAD_REQUEST, f"bad request: {message}")


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return error_response(
        exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None)
    )


def register_error_handlers(app: FastAPI) -> None:
    """Give every error response the same {code, message} body."""
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
