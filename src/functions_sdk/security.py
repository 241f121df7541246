"""URL validation and header redaction helpers."""

from __future__ import annotations

from typing import Mapping
from urllib.parse import urlparse

from .exceptions import FunctionsValidationError


SENSITIVE_HEADERS = {
    "authorization",
    "apikey",
    "x-api-key",
    "cookie",
}


def sanitize_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Return headers with sensitive values redacted for logging."""
    redacted: dict[str, str] = {}
    for key, value in headers.items():
        if key.lower() in SENSITIVE_HEADERS:
            redacted[key] = "[REDACTED]"
        else:
            redacted[key] = value
    return redacted


def validate_base_url(url: str) -> None:
    """Reject base URLs that are not absolute http(s) URLs."""
    if "\x00" in url:
        raise ValueError("Invalid base url")
    parsed = urlparse(url)
    if not parsed.scheme or not parsed.netloc:
        raise ValueError("base url must include scheme and host")
    if parsed.scheme not in {"http", "https"}:
        raise ValueError(f"Unsupported base url scheme: {parsed.scheme}")


def validate_function_name(name: str) -> str:
    """Ensure the function name is usable as a single URL path segment."""
    if not isinstance(name, str) or not name:
        raise FunctionsValidationError("function name must be a non-empty string")
    if "://" in name:
        raise FunctionsValidationError("Full URLs are not allowed as function name")
    if "/" in name or "\x00" in name:
        raise FunctionsValidationError("Invalid function name characters")
    if name in {".", ".."}:
        raise FunctionsValidationError("function name must not be a dot segment")
    return name
