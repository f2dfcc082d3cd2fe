"""Translate errors into {"error": {"message", "status"}} JSON responses."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from jobboard.core.errors import AppError, BadRequestError, NotFoundError, UnauthorizedError
from jobboard.core.logging import get_logger
from jobboard.schemas.schemas import ErrorBody, ErrorResponse

logger = get_logger(__name__)


def status_for(exc: AppError) -> int:
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, UnauthorizedError):
        return status.HTTP_401_UNAUTHORIZED
    if isinstance(exc, BadRequestError):
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def validation_messages(errors) -> list:
    """pydantic error dicts -> ["body.salary: Input should be ...", ...]"""
    return [
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" if err.get("loc") else err["msg"]
        for err in errors
    ]


def error_response(message, status_code: int) -> JSONResponse:
    body = ErrorResponse(error=ErrorBody(message=message, status=status_code))
    return JSONResponse(status_code=status_code, content=body.model_dump())


def register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return error_response(exc.message, status_for(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return error_response(validation_messages(exc.errors()), status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.detail, exc.status_code)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return error_response("Internal Server Error", status.HTTP_500_INTERNAL_SERVER_ERROR)
