"""
Error taxonomy shared by every feature package.

Domain failures are explicit and separable from other runtime errors; the
HTTP layer maps them to responses in one place (see `register_error_handlers`).
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ContentError(RuntimeError):
    code = "Error"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Request failed."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_response(self) -> dict:
        return {"detail": self.message, "code": self.code}


class UnauthorizedError(ContentError):
    code = "Unauthorized"
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "401 Unauthorized"


class ForbiddenError(ContentError):
    code = "Forbidden"
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "403 Forbidden"


class NotFoundError(ContentError):
    code = "Not Found"
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "404 Not Found"


# Raised when a batch function breaks the positional contract.
class BatchLoadError(RuntimeError):
    pass


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ContentError)
    async def content_error_handler(request: Request, exc: ContentError) -> JSONResponse:
        logger.warning("content_error code=%s path=%s detail=%s", exc.code, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_response())
