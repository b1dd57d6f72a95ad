"""
get-details logging utilities.

Provides configurable logging for registry HTTP traffic and page hydration.
"""

import logging
from typing import Any

_sdk_logger = logging.getLogger("getdetails")
_http_logger = logging.getLogger("getdetails.http")
_page_logger = logging.getLogger("getdetails.page")

# Response bodies are trimmed to this many characters in debug output
_BODY_PREVIEW_LENGTH = 200


def configure_logging(
    level: int = logging.INFO,
    http_level: int | None = None,
    page_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure get-details logging.

    Args:
        level: Default log level for all loggers (default: INFO)
        http_level: Log level for HTTP request/response logging (default: same as level)
        page_level: Log level for element processing (default: same as level)
        handler: Custom handler to use (default: StreamHandler to stderr)
        format_string: Custom format string (default: includes timestamp, level, logger name)

    Example:
        ```python
        import logging
        from getdetails.logging import configure_logging

        # Show every registry request
        configure_logging(level=logging.INFO, http_level=logging.DEBUG)
        ```
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string)

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)

    _sdk_logger.setLevel(level)
    _sdk_logger.addHandler(handler)

    _http_logger.setLevel(http_level if http_level is not None else level)
    _page_logger.setLevel(page_level if page_level is not None else level)


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a get-details logger.

    Args:
        name: Logger name suffix (e.g., "http", "page"). If None, returns the main logger.

    Returns:
        Logger instance
    """
    if name is None:
        return _sdk_logger
    return logging.getLogger(f"getdetails.{name}")


def preview(body: Any) -> str:
    """Render a response body for debug output, truncated."""
    text = repr(body)
    if len(text) <= _BODY_PREVIEW_LENGTH:
        return text
    return f"{text[:_BODY_PREVIEW_LENGTH]}..."


def log_http_request(method: str, url: str) -> None:
    """Log an outgoing registry request at DEBUG level."""
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    _http_logger.debug(f"{method} {url}")


def log_http_response(
    status_code: int,
    url: str,
    body: Any = None,
    elapsed_ms: float | None = None,
) -> None:
    """
    Log a registry response at DEBUG level.

    Args:
        status_code: HTTP status code
        url: Request URL
        body: Decoded response body (optional)
        elapsed_ms: Request duration in milliseconds (optional)
    """
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"Response {status_code} from {url}"]

    if elapsed_ms is not None:
        log_parts.append(f"elapsed={elapsed_ms:.2f}ms")

    if body is not None:
        log_parts.append(f"body={preview(body)}")

    _http_logger.debug(" | ".join(log_parts))


__all__ = [
    "configure_logging",
    "get_logger",
    "preview",
    "log_http_request",
    "log_http_response",
]
