"""Exceptions for the yalepy library."""


class YaleError(Exception):
    """Base exception for yalepy."""


class YalePreconditionError(YaleError):
    """Raised when an authenticated call is made without an access token."""


class YaleDecodeError(YaleError):
    """Raised when a response body does not have the expected shape."""

    def __init__(self, message: str, path: str = "$") -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class YaleApiError(YaleError):
    """Raised when the API answers with a 4xx and a structured error body."""

    def __init__(
        self,
        message: str,
        status_code: int,
        error: str,
        description: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error = error
        self.description = description


class YaleUnhandledStatusError(YaleError):
    """Raised for any HTTP status that is neither 200 nor 4xx."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Unhandled HTTP status code: {status_code}")
        self.status_code = status_code


class YaleDomainError(YaleError):
    """Raised when a well-formed response reports an application failure."""


class YaleConnectionError(YaleError):
    """Raised when unable to connect to the Yale API."""
