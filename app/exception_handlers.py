from fastapi import Request
from fastapi.responses import JSONResponse

from app.client.api_client import ApiError
from app.exceptions import (
    AppError,
    DecodeError,
    NotFoundError,
    UnauthorizedError,
    UnsupportedFormatError,
)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={"error": exc.code, "message": exc.message},
    )


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=404,
        content={"error": exc.code, "message": exc.message},
    )


async def unauthorized_handler(request: Request, exc: UnauthorizedError) -> JSONResponse:
    return JSONResponse(
        status_code=401,
        content={"error": exc.code, "message": exc.message},
    )


async def decode_error_handler(request: Request, exc: DecodeError) -> JSONResponse:
    status_code = 415 if isinstance(exc, UnsupportedFormatError) else 422
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.code, "message": exc.message},
    )


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(
        status_code=502,
        content={"error": exc.code, "message": exc.message, "upstream_status": exc.status_code},
    )


def register_exception_handlers(app):
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(UnauthorizedError, unauthorized_handler)
    app.add_exception_handler(DecodeError, decode_error_handler)
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(AppError, app_error_handler)
