import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from app.utils.response import message_response

logger = logging.getLogger(__name__)

MISSING_CREDENTIALS_MESSAGE = "Username and password are required"


class AppException(Exception):
    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class StoreUnavailableError(AppException):
    """The user store could not answer a lookup."""

    def __init__(self, message: str = "User store unavailable"):
        super().__init__(message, status_code=503)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=message_response(exc.message),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Field errors only; submitted values may contain a password.
        logger.debug(
            "Rejected %s %s: %s",
            request.method,
            request.url.path,
            [".".join(str(p) for p in err.get("loc", ())) for err in exc.errors()],
        )
        return JSONResponse(
            status_code=400,
            content=message_response(MISSING_CREDENTIALS_MESSAGE),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=message_response("Internal server error"),
        )
