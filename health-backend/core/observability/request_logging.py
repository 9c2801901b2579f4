"""HTTP request logging middleware."""
from __future__ import annotations

import json
import logging
from typing import Any, Mapping

from fastapi import FastAPI, Request

_PAYLOAD_PREVIEW_LIMIT = 2048
# Health checks are not logged
_QUIET_PATHS = ("/health",)
_SENSITIVE_PAYLOAD_KEYS = {"api_key", "apikey", "authorization", "claude_key", "token"}
# Image paths can be long and carry user directory names
_PATH_PAYLOAD_KEYS = {"image_uri"}
_PATH_PREVIEW_LENGTH = 48


def _format_client_address(client: tuple[str, int] | None) -> str:
    if not client:
        return "unknown"
    host, port = client
    return f"{host}:{port}" if port is not None else host


def _truncate(text: str, limit: int) -> str:
    return f"{text[:limit]}... ({len(text)} chars)" if len(text) > limit else text


def _redact_payload(value: Any, *, depth: int = 6) -> Any:
    if depth <= 0:
        return "<max depth reached>"

    if isinstance(value, Mapping):
        redacted: dict[Any, Any] = {}
        for key, item in value.items():
            lowered = str(key).lower()
            if lowered in _SENSITIVE_PAYLOAD_KEYS:
                redacted[key] = "***"
            elif lowered in _PATH_PAYLOAD_KEYS and isinstance(item, str):
                redacted[key] = _truncate(item, _PATH_PREVIEW_LENGTH)
            else:
                redacted[key] = _redact_payload(item, depth=depth - 1)
        return redacted

    if isinstance(value, list):
        return [_redact_payload(item, depth=depth - 1) for item in value]

    return value


def render_payload_preview(body: bytes) -> str:
    """Return a redacted, length-limited preview of a request body."""

    if not body:
        return "<empty>"

    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError:
        return f"<binary {len(body)} bytes>"

    try:
        rendered = json.dumps(_redact_payload(json.loads(text)), ensure_ascii=False, separators=(",", ":"))
    except json.JSONDecodeError:
        rendered = " ".join(text.split())

    return _truncate(rendered, _PAYLOAD_PREVIEW_LIMIT)


def register_http_request_logging(app: FastAPI, *, logger_name: str = "core.http") -> None:
    """Attach middleware that logs every HTTP request."""

    if getattr(app.state, "_http_request_logging_installed", False):  # pragma: no cover - idempotence
        return

    logger = logging.getLogger(logger_name)

    @app.middleware("http")
    async def _log_request(request: Request, call_next):  # type: ignore[override]
        path = request.url.path
        if path in _QUIET_PATHS:
            return await call_next(request)

        client = request.client
        client_addr = _format_client_address((client.host, client.port) if client else None)
        logger.info("HTTP %s %s from %s", request.method, path, client_addr)

        body = await request.body()
        if body:
            request._body = body  # type: ignore[attr-defined]  # downstream handlers re-read it
        if request.url.query or body:
            logger.debug(
                "HTTP %s %s query=%s body=%s",
                request.method,
                path,
                request.url.query or "<none>",
                render_payload_preview(body),
            )

        return await call_next(request)

    app.state._http_request_logging_installed = True


__all__ = ["register_http_request_logging", "render_payload_preview"]
