"""
Typed action errors and the handlers that render them.

Every failure reaches the caller as
``{"success": false, "error": {"code": ..., "message": ...}}``.
"""
import logging

from fastapi import HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

ERROR_STATUS_CODES = {
    "BAD_REQUEST": status.HTTP_400_BAD_REQUEST,
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
}


class ActionError(HTTPException):
    """HTTPException carrying a stable error code alongside its message."""

    def __init__(self, code: str, message: str, headers: dict | None = None):
        if code not in ERROR_STATUS_CODES:
            raise ValueError(f"Unknown action error code: {code}")
        super().__init__(
            status_code=ERROR_STATUS_CODES[code],
            detail=message,
            headers=headers,
        )
        self.code = code
        self.message = message


def error_body(code: str, message: str, **extra) -> dict:
    error = {"code": code, "message": message}
    error.update(extra)
    return {"success": False, "error": error}


def action_error_response(exc: ActionError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.code, exc.message),
        headers=exc.headers,
    )


async def action_error_handler(request: Request, exc: ActionError) -> JSONResponse:
    return action_error_response(exc)


def validation_error_response(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed or incomplete input as BAD_REQUEST."""
    issues = [
        {
            "path": [part for part in error.get("loc", ()) if part != "body"],
            "message": error.get("msg", ""),
        }
        for error in exc.errors()
    ]
    logger.info(f"Rejected input for {request.url.path}: {len(issues)} issue(s)")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder(
            error_body("BAD_REQUEST", "Invalid input.", issues=issues)
        ),
    )
