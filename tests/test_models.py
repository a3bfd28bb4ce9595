"""Tests for the normalized tracking data models."""

from datetime import datetime

import pytest

from sro_correios.errors.registry import TrackingError
from sro_correios.models import Category, TrackingEvent, TrackingRecord


def _event(status: str, day: int) -> TrackingEvent:
    return TrackingEvent(
        locality="Sao Paulo / SP",
        status=status,
        origin="Unidade - Sao Paulo / SP",
        destination=None,
        tracked_at=datetime(2022, 1, day, 12, 0),
    )


class TestTrackingRecord:
    """Tests for TrackingRecord constructors and serialization."""

    def test_success_derivations(self):
        events = [_event("Objeto entregue ao destinatário", 3), _event("Objeto postado", 1)]
        record = TrackingRecord.success("AB123456789BR", Category("Sedex", "Sedex SP"), events)

        assert record.is_delivered is True
        assert record.posted_at == datetime(2022, 1, 1, 12, 0)
        assert record.updated_at == datetime(2022, 1, 3, 12, 0)
        assert record.is_invalid is None
        assert record.error is None
        assert record.ok is True

    def test_delivered_is_substring_of_newest_only(self):
        """An older delivered event does not mark the record delivered."""
        events = [_event("Objeto em trânsito", 3), _event("Objeto entregue ao destinatário", 1)]
        record = TrackingRecord.success("AB123456789BR", Category("a", "b"), events)
        assert record.is_delivered is False

    def test_success_requires_events(self):
        with pytest.raises(ValueError, match="at least one event"):
            TrackingRecord.success("AB123456789BR", Category("a", "b"), [])

    def test_failure_shape(self):
        record = TrackingRecord.failure("bad", TrackingError.INVALID_CODE)
        assert record.is_invalid is True
        assert record.ok is False
        assert record.category is None
        assert record.events is None
        assert record.is_delivered is None

    def test_failure_to_dict(self):
        record = TrackingRecord.failure("bad", TrackingError.INVALID_CODE)
        assert record.to_dict() == {"code": "bad", "is_invalid": True, "error": "invalid_code"}

    def test_failure_describe(self):
        record = TrackingRecord.failure("AB123456789BR", TrackingError.NOT_FOUND)
        assert record.describe() == "The carrier has no tracking history for 'AB123456789BR'."

    def test_success_describe_is_empty(self):
        record = TrackingRecord.success(
            "AB123456789BR", Category("a", "b"), [_event("Objeto postado", 1)]
        )
        assert record.describe() == ""

    def test_success_to_dict(self):
        record = TrackingRecord.success(
            "AB123456789BR", Category("Sedex", "Sedex SP"), [_event("Objeto postado", 1)]
        )
        data = record.to_dict()
        assert data["category"] == {"name": "Sedex", "description": "Sedex SP"}
        assert data["posted_at"] == "2022-01-01T12:00:00"
        assert data["events"][0]["tracked_at"] == "2022-01-01T12:00:00"
        assert "error" not in data
