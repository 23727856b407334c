from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

INTERNAL_ERROR_MESSAGE = "Internal server error"
COORDS_MESSAGE = "lat and lng must be numbers"
ACCURACY_MESSAGE = "accuracy must be a number or null"
BODY_MESSAGE = "Request body must be a JSON object"


class AppError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgument(AppError):
    status_code = 400


class InternalError(AppError):
    status_code = 500

    def __init__(self, message: str = INTERNAL_ERROR_MESSAGE):
        super().__init__(message)


def _error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def validation_message(errors: list[dict]) -> str:
    """
    Collapse pydantic's error list into the single message the client sees.
    Coordinates win over accuracy; anything else is a malformed body.
    Locations may carry FastAPI's leading "body" segment or start at the field.
    """
    fields = set()
    for err in errors:
        loc = tuple(err.get("loc", ()))
        if loc[:1] == ("body",):
            loc = loc[1:]
        if loc:
            fields.add(loc[0])

    if fields & {"lat", "lng"}:
        return COORDS_MESSAGE
    if "accuracy" in fields:
        return ACCURACY_MESSAGE
    return BODY_MESSAGE


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return _error_response(exc.status_code, exc.message)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = validation_message(list(exc.errors()))
    logger.warning(f"Rejected {request.method} {request.url.path}: {message}")
    return _error_response(InvalidArgument.status_code, message)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error(f"Unhandled error on {request.method} {request.url.path}")
    return _error_response(InternalError.status_code, INTERNAL_ERROR_MESSAGE)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
