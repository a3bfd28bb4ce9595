"""Typed exceptions raised inside the fetch path.

They never cross the public ``track`` boundary: the fetcher catches
them and returns a ``service_unavailable`` record instead.
"""


class CorreiosError(Exception):
    """Base exception for carrier protocol errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class AuthHandshakeError(CorreiosError):
    """The login exchange did not yield an access token."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class PayloadError(CorreiosError):
    """The carrier body did not match the expected schema."""
