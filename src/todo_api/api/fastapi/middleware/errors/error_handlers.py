from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

from .exceptions import ApiError

logger = logging.getLogger(__name__)


def _http_extra(request: Request, status_code: int) -> dict:
    return {"http_method": request.method, "path": request.url.path, "status_code": status_code}


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        msg = err.get("msg", "Invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "Invalid request"


def register_error_handlers(app: FastAPI) -> None:
    """Render every error the app produces as ``{"message": ...}``."""

    @app.exception_handler(ApiError)
    async def _api_error(request: Request, exc: ApiError):
        if exc.status_code >= 500:
            logger.error(
                "%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message,
                exc_info=exc.__cause__,
                extra=_http_extra(request, exc.status_code),
            )
        else:
            logger.warning(
                "%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message,
                extra=_http_extra(request, exc.status_code),
            )
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError):
        message = _validation_message(exc)
        logger.warning(
            "%s %s -> 400: %s", request.method, request.url.path, message,
            extra=_http_extra(request, 400),
        )
        return JSONResponse(status_code=400, content={"message": message})

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )
