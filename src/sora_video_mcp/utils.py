# SPDX-License-Identifier: MIT
"""Utility functions for request building and result formatting."""

import json
from collections.abc import Mapping
from datetime import datetime, timezone

from openai import APIError, OpenAIError

from .types import VideoParams


def parse_size(size: str) -> tuple[int, int]:
    """Parse a ``"WIDTHxHEIGHT"`` string.

    Raises:
        ValueError: If the string is not two positive integers joined by ``x``
    """
    parts = size.lower().split("x")
    if len(parts) != 2 or not all(p.strip().isdigit() for p in parts):
        raise ValueError(f"Invalid size '{size}'. Use WIDTHxHEIGHT, e.g. '1920x1080'")
    return int(parts[0]), int(parts[1])


def size_to_params(size: str) -> VideoParams:
    """Map a size string onto width/height params, longer edge as width.

    Portrait outputs such as 720x1280 are checked against the same limits
    as their landscape counterpart.
    """
    first, second = parse_size(size)
    return {"width": max(first, second), "height": min(first, second)}


def format_megabytes(size_bytes: int) -> str:
    return f"{size_bytes / 1024 / 1024:.2f} MB"


def format_timestamp(ts: int | None) -> str | None:
    """Render a unix timestamp as ISO-8601 UTC."""
    if ts is None:
        return None
    return datetime.fromtimestamp(ts, tz=timezone.utc).isoformat()


def format_warnings(warnings: list[str] | None) -> str:
    if not warnings:
        return ""
    return "\n\nPrompt warnings:\n" + "\n".join(f"- {w}" for w in warnings)


def _error_body(exc: OpenAIError) -> object | None:
    return exc.body if isinstance(exc, APIError) else None


def api_error_message(exc: OpenAIError) -> str:
    """Extract the upstream ``error.message`` if present, else the exception text."""
    body = _error_body(exc)
    if isinstance(body, Mapping):
        inner = body.get("error", body)
        if isinstance(inner, Mapping) and inner.get("message"):
            return str(inner["message"])
    message = getattr(exc, "message", None)
    return message or str(exc)


def api_error_details(exc: OpenAIError) -> str:
    """Pretty JSON dump of the upstream error body, or an empty string."""
    body = _error_body(exc)
    if body is None:
        return ""
    try:
        return json.dumps(body, indent=2)
    except (TypeError, ValueError):
        return str(body)
