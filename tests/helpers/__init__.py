"""Test helpers for sro_correios tests."""

from tests.helpers.payloads import (
    LOGIN_URL,
    TRACKING_URL,
    FakeTransport,
    delivered_payload,
    make_country,
    make_event,
    make_payload,
    make_unit,
    tracking_handler,
)

__all__ = [
    "LOGIN_URL",
    "TRACKING_URL",
    "FakeTransport",
    "delivered_payload",
    "make_country",
    "make_event",
    "make_payload",
    "make_unit",
    "tracking_handler",
]
