"""Error response schemas.

All error responses use the same envelope: {"error": {"code": "...", "message": "..."}}.
Exception handlers in main.py construct these from domain exceptions.
``code`` is the rejection kind, e.g. "price_below_minimum" or "intention_not_found".
"""

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """Inner error object with a machine-readable code and human-readable message."""

    code: str
    message: str


class ErrorResponse(BaseModel):
    """Top-level error envelope returned by all error responses."""

    error: ErrorDetail


class MessageResponse(BaseModel):
    """Plain acknowledgement for operations that leave nothing to return."""

    message: str


def error_body(code: str, message: str) -> dict[str, object]:
    """Build the standard error envelope as a dict for JSONResponse."""
    return ErrorResponse(error=ErrorDetail(code=code, message=message)).model_dump()
