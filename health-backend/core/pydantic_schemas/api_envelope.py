"""JSON envelope returned by every endpoint."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel


class Envelope(BaseModel):
    code: int
    success: bool
    message: str
    data: Optional[Any] = None
    meta: Optional[Dict[str, Any]] = None


def _envelope(code: int, message: str, data: Any, meta: Dict[str, Any] | None) -> Dict[str, Any]:
    return Envelope(code=code, success=code < 400, message=message, data=data, meta=meta).model_dump()


def ok(message: str, data: Any = None, meta: Dict[str, Any] | None = None) -> Dict[str, Any]:
    return _envelope(200, message, data, meta)


def error(code: int, message: str, data: Any = None) -> Dict[str, Any]:
    if code < 400:
        raise ValueError(f"Error envelope needs a 4xx/5xx code, got {code}")
    return _envelope(code, message, data, None)


def error_from_exception(code: int, exc: Exception, **context: Any) -> Dict[str, Any]:
    """Build an error envelope from a service exception.

    ``message`` comes from the exception; non-empty ``context`` values (field,
    operation, provider, ...) are collected into ``data``.
    """

    message = getattr(exc, "message", None) or str(exc) or exc.__class__.__name__
    data = {key: value for key, value in context.items() if value not in (None, [], {})}
    return error(code, message, data=data or None)


__all__ = ["Envelope", "ok", "error", "error_from_exception"]
