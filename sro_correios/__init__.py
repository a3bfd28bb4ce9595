"""Client library for Correios SRO parcel tracking.

Queries the carrier's tracking service and returns normalized, typed
tracking records.

Example:
    import asyncio
    from sro_correios import track

    records = asyncio.run(track("AB123456789BR", "CD987654321BR"))
"""

import asyncio
from collections.abc import Iterable

from sro_correios.config import CorreiosConfig, load_config
from sro_correios.errors import TrackingError
from sro_correios.models import Category, TrackingEvent, TrackingRecord
from sro_correios.services.codes import is_valid_order_code
from sro_correios.services.constants import ProtocolVariant
from sro_correios.services.tracker import SroCorreios


async def track(
    *codes: str | Iterable[str],
    variant: ProtocolVariant | str | None = None,
    config: CorreiosConfig | None = None,
) -> list[TrackingRecord]:
    """Track shipment codes with a fresh client.

    Returns one record per input code, in input order.
    """
    return await SroCorreios(variant=variant, config=config).track(*codes)


def track_sync(
    *codes: str | Iterable[str],
    variant: ProtocolVariant | str | None = None,
    config: CorreiosConfig | None = None,
) -> list[TrackingRecord]:
    """Blocking wrapper around ``track`` for code without an event loop."""
    return asyncio.run(track(*codes, variant=variant, config=config))


__all__ = [
    "SroCorreios",
    "ProtocolVariant",
    "CorreiosConfig",
    "load_config",
    "TrackingRecord",
    "TrackingEvent",
    "Category",
    "TrackingError",
    "is_valid_order_code",
    "track",
    "track_sync",
]
