"""Error code registry for tracking lookups.

Every failed lookup surfaces as data inside a ``TrackingRecord``; this
module defines the closed set of error kinds and their display metadata:
- invalid_code: structural check failed, no network call made
- not_found: carrier answered but has no history for the code
- service_unavailable: transport, status, parse or handshake failure
"""

from dataclasses import dataclass
from enum import Enum


class TrackingError(str, Enum):
    """Error kinds carried by failed tracking records."""

    INVALID_CODE = "invalid_code"
    NOT_FOUND = "not_found"
    SERVICE_UNAVAILABLE = "service_unavailable"


@dataclass(frozen=True)
class ErrorCode:
    """Definition of an error kind with display metadata.

    Attributes:
        code: The TrackingError this entry describes.
        title: Short title for display.
        message_template: Message with a {code} placeholder.
    """

    code: TrackingError
    title: str
    message_template: str

    def format(self, shipment_code: str) -> str:
        """Render the message for one shipment code."""
        return self.message_template.format(code=shipment_code)


ERROR_REGISTRY: dict[TrackingError, ErrorCode] = {
    TrackingError.INVALID_CODE: ErrorCode(
        code=TrackingError.INVALID_CODE,
        title="Invalid Shipment Code",
        message_template=(
            "'{code}' is not a valid shipment code. Expected two letters, "
            "nine digits and two letters (e.g. AB123456789BR)."
        ),
    ),
    TrackingError.NOT_FOUND: ErrorCode(
        code=TrackingError.NOT_FOUND,
        title="Shipment Not Found",
        message_template="The carrier has no tracking history for '{code}'.",
    ),
    TrackingError.SERVICE_UNAVAILABLE: ErrorCode(
        code=TrackingError.SERVICE_UNAVAILABLE,
        title="Tracking Service Unavailable",
        message_template="The tracking service could not be reached for '{code}'.",
    ),
}


def get_error(code: TrackingError | str) -> ErrorCode | None:
    """Get error definition by kind.

    Args:
        code: A TrackingError or its string value.

    Returns:
        ErrorCode if found, None otherwise.
    """
    try:
        return ERROR_REGISTRY.get(TrackingError(code))
    except ValueError:
        return None
