"""Unit tests for sro_correios/errors/registry.py."""

import pytest

from sro_correios.errors.registry import ERROR_REGISTRY, TrackingError, get_error


@pytest.mark.parametrize(
    "code,title",
    [
        (TrackingError.INVALID_CODE, "Invalid Shipment Code"),
        (TrackingError.NOT_FOUND, "Shipment Not Found"),
        (TrackingError.SERVICE_UNAVAILABLE, "Tracking Service Unavailable"),
    ],
)
def test_error_kinds_registered(code, title):
    """Every error kind must be registered."""
    error = get_error(code)
    assert error is not None, f"{code} not found in registry"
    assert error.title == title


def test_registry_covers_all_kinds():
    assert set(ERROR_REGISTRY) == set(TrackingError)


def test_lookup_by_string_value():
    assert get_error("not_found").code == TrackingError.NOT_FOUND


def test_unknown_code_returns_none():
    assert get_error("E-9999") is None


def test_wire_values():
    """Error kinds serialize to the documented snake_case strings."""
    assert [e.value for e in TrackingError] == ["invalid_code", "not_found", "service_unavailable"]


def test_format_includes_code():
    message = get_error(TrackingError.INVALID_CODE).format("AB12")
    assert "'AB12'" in message
