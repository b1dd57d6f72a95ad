"""get-details exception classes."""


class GetDetailsError(Exception):
    """Base exception for all get-details errors."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class ConfigError(GetDetailsError):
    """Raised when an attribute string or the settings are invalid."""

    def __init__(self, message: str, code: str = "CONFIG_ERROR") -> None:
        super().__init__(code, message)


class UnsupportedSourceError(ConfigError):
    """Raised when no adapter is registered under the requested source name."""

    def __init__(self, source: str) -> None:
        self.source = source
        super().__init__(f"Unsupported source: {source}", code="UNSUPPORTED_SOURCE")


class FetchError(GetDetailsError):
    """Raised on transport, HTTP status or JSON decode failures."""

    def __init__(
        self,
        code: str,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(code, message)
        self.url = url
        self.status_code = status_code


class NoTargetError(GetDetailsError):
    """Raised when target resolution yields no elements."""

    def __init__(self, selector: str) -> None:
        self.selector = selector
        super().__init__("NO_TARGET", f"No target elements found for {selector!r}")
