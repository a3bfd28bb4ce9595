"""Error handling for sro_correios.

This package provides:
- The TrackingError kinds surfaced on failed records
- An error registry with display metadata
- Internal exceptions for the fetch path
"""

from sro_correios.errors.domain import (
    AuthHandshakeError,
    CorreiosError,
    PayloadError,
)
from sro_correios.errors.registry import (
    ERROR_REGISTRY,
    ErrorCode,
    TrackingError,
    get_error,
)

__all__ = [
    # Registry
    "TrackingError",
    "ErrorCode",
    "ERROR_REGISTRY",
    "get_error",
    # Exceptions
    "CorreiosError",
    "AuthHandshakeError",
    "PayloadError",
]
