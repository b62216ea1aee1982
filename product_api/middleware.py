"""
Request pipeline pieces: request logging, bearer-token check, error stage.

Starlette runs the middleware added last first, so ``create_app`` adds the
error handler before the logger to get logger -> error handler -> route.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import Header, Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from .errors import InternalError, UnauthorizedError, ValidationError, error_response

logger = logging.getLogger("product_api.request")
error_logger = logging.getLogger("product_api.errors")


class RequestLoggerMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        timestamp = datetime.now(timezone.utc).isoformat()
        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"
        logger.info("[%s] %s %s", timestamp, request.method, path)
        return await call_next(request)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except ValidationError as exc:
            error_logger.warning("Error: %s", exc.message)
            return error_response(exc)
        except Exception as exc:
            error_logger.error("Error: %s", exc, exc_info=True)
            return error_response(InternalError())


async def require_bearer_token(authorization: Optional[str] = Header(None)) -> str:
    # any token is accepted, only the scheme prefix is checked
    if not authorization or not authorization.startswith("Bearer "):
        raise UnauthorizedError()
    return authorization[len("Bearer "):]


async def unauthorized_handler(request: Request, exc: UnauthorizedError) -> JSONResponse:
    return error_response(exc)
