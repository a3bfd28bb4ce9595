"""Normalized tracking data models.

These are the public result types returned by ``SroCorreios.track``.
A ``TrackingRecord`` carries either the success fields (category,
events, delivered/posted/updated) or the failure fields (is_invalid,
error), never both.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from sro_correios.errors.registry import TrackingError, get_error
from sro_correios.services.constants import DELIVERED_PHRASE


@dataclass(frozen=True)
class Category:
    """Carrier postal-service classification for display."""

    name: str
    description: str


@dataclass(frozen=True)
class ParsedLocation:
    """Locality/origin pair resolved from a carrier facility."""

    locality: str | None
    origin: str


@dataclass(frozen=True)
class TrackingEvent:
    """One milestone in a shipment's handling history.

    Attributes:
        locality: "City / UF" for domestic facilities, None for countries.
        status: Carrier wording, untranslated.
        origin: Display label of the facility that recorded the event.
        destination: Origin label of the routing destination, if reported.
        tracked_at: Carrier timestamp, no timezone conversion applied.
        status_code: Carrier event code (e.g. "BDE"), if reported.
    """

    locality: str | None
    status: str
    origin: str
    destination: str | None
    tracked_at: datetime
    status_code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize with ISO-8601 timestamps."""
        return {
            "locality": self.locality,
            "status": self.status,
            "origin": self.origin,
            "destination": self.destination,
            "tracked_at": self.tracked_at.isoformat(),
            "status_code": self.status_code,
        }


@dataclass(frozen=True)
class TrackingRecord:
    """Tracking result for one shipment code."""

    code: str
    category: Category | None = None
    events: list[TrackingEvent] | None = None
    is_delivered: bool | None = None
    posted_at: datetime | None = None
    updated_at: datetime | None = None
    is_invalid: bool | None = None
    error: TrackingError | None = None

    @classmethod
    def success(
        cls,
        code: str,
        category: Category,
        events: list[TrackingEvent],
    ) -> "TrackingRecord":
        """Build a successful record from newest-first events.

        Raises:
            ValueError: If events is empty.
        """
        if not events:
            raise ValueError(f"Successful record for {code} needs at least one event")
        newest, oldest = events[0], events[-1]
        return cls(
            code=code,
            category=category,
            events=list(events),
            is_delivered=DELIVERED_PHRASE in newest.status,
            posted_at=oldest.tracked_at,
            updated_at=newest.tracked_at,
        )

    @classmethod
    def failure(cls, code: str, error: TrackingError) -> "TrackingRecord":
        """Build a failure record carrying only the error kind."""
        return cls(code=code, is_invalid=True, error=error)

    @property
    def ok(self) -> bool:
        """True when the lookup succeeded."""
        return not self.is_invalid

    def describe(self) -> str:
        """Human-readable message for a failed record; empty on success."""
        if not self.is_invalid or self.error is None:
            return ""
        return get_error(self.error).format(self.code)

    def to_dict(self) -> dict[str, Any]:
        """Serialize, omitting the field group that is not populated."""
        if self.is_invalid:
            return {
                "code": self.code,
                "is_invalid": True,
                "error": self.error.value if self.error else None,
            }
        return {
            "code": self.code,
            "category": {
                "name": self.category.name,
                "description": self.category.description,
            } if self.category else None,
            "is_delivered": self.is_delivered,
            "posted_at": self.posted_at.isoformat() if self.posted_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
            "events": [event.to_dict() for event in self.events or []],
        }


@dataclass(frozen=True)
class AuthToken:
    """Short-lived credential from one login exchange."""

    value: str = field(repr=False)


@dataclass(frozen=True)
class SignedLoginRequest:
    """Login body for the handshake: token constant, timestamp, digest."""

    request_token: str = field(repr=False)
    data: str
    sign: str = field(repr=False)

    def to_payload(self) -> dict[str, str]:
        """Return the JSON body expected by the login endpoint."""
        return {
            "requestToken": self.request_token,
            "data": self.data,
            "sign": self.sign,
        }
