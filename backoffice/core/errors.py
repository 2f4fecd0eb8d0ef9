# backoffice/core/errors.py
"""
Project exception hierarchy and the FastAPI handlers that render it.

Services keep raising HTTPException for request-level problems (404, 409,
validation). The classes here cover failures of the external collaborators
(Object Store) that should reach the admin as a one-line message.
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class BackofficeError(Exception):
    """Base exception for the back-office API."""

    def __init__(
        self,
        message: str,
        code: str = "BACKOFFICE_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"detail": self.message, "code": self.code}
        if self.details:
            result["details"] = self.details
        return result


class StorageError(BackofficeError):
    """Raised when the Object Store rejects an upload."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(
            message=message,
            code="STORAGE_ERROR",
            status_code=502,
            details={"path": path} if path else None,
        )


async def backoffice_error_handler(request: Request, exc: BackofficeError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BackofficeError, backoffice_error_handler)
