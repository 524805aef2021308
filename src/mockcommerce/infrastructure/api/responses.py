"""Uniform JSON envelope: ``{success, data?, message?, code?, errors?}``."""

from __future__ import annotations

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


class ApiError(Exception):
    """Raised by the API layer for failures that never reach the business layer
    (bad path ids, missing credentials, role or ownership violations)."""

    def __init__(self, status_code: int, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.code = code


def envelope(
    data: Any = None,
    *,
    message: str | None = None,
    code: str | None = None,
    errors: Any = None,
    status_code: int = 200,
) -> JSONResponse:
    body: dict[str, Any] = {"success": 200 <= status_code < 300}
    if data is not None:
        body["data"] = data
    if message is not None:
        body["message"] = message
    if code is not None:
        body["code"] = code
    if errors is not None:
        body["errors"] = errors
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))
