"""Response normalization for Correios SRO payloads.

Turns one validated ``CorreiosResponse`` into one ``TrackingRecord``.
All functions here are pure and never raise on a schema-valid payload.

Example:
    payload = CorreiosResponse.model_validate(resp.json())
    record = normalize_response(payload, "AB123456789BR")
"""

import logging

from sro_correios.errors.registry import TrackingError
from sro_correios.models import Category, ParsedLocation, TrackingEvent, TrackingRecord
from sro_correios.schemas import CorreiosEvent, CorreiosResponse, CorreiosUnit, PostalType
from sro_correios.services.constants import (
    INTERNATIONAL_UNIT_TYPE,
    UNFLAGGED_DESCRIPTION_MARKERS,
    UNKNOWN_CATEGORY_DESCRIPTION,
    UNKNOWN_CATEGORY_NAME,
)
from sro_correios.utils.text import capitalize_words, upper_first_two_char_word

logger = logging.getLogger(__name__)


# ── Location resolution ───────────────────────────────────────────────


def resolve_location(unit: CorreiosUnit) -> ParsedLocation:
    """Map a carrier facility to a (locality, origin) pair.

    Country placeholders have no locality and use the country name as
    origin. Every other facility is domestic: "City / UF" locality and
    "Tipo - City / UF" origin.
    """
    if unit.tipo == INTERNATIONAL_UNIT_TYPE:
        return _resolve_international(unit)
    return _resolve_domestic(unit)


def _resolve_international(unit: CorreiosUnit) -> ParsedLocation:
    return ParsedLocation(
        locality=None,
        origin=capitalize_words(unit.nome or unit.tipo or ""),
    )


def _resolve_domestic(unit: CorreiosUnit) -> ParsedLocation:
    address = unit.endereco
    if address is None or not address.cidade:
        # No address to build a locality from; fall back to the facility label
        return ParsedLocation(locality=None, origin=unit.tipo or unit.nome or "")

    city = capitalize_words(address.cidade)
    locality = f"{city} / {address.uf}" if address.uf else city
    origin = f"{unit.tipo} - {locality}" if unit.tipo else locality
    return ParsedLocation(locality=locality, origin=origin)


# ── Category normalization ────────────────────────────────────────────


def normalize_category(postal_type: PostalType | None) -> Category:
    """Map the carrier's postal classification to a display category.

    Absent classification yields the unknown/unidentified sentinels. The
    first standalone two-letter word in the description is treated as an
    embedded service abbreviation and upper-cased, unless the description
    is already flagged as unidentified or international.
    """
    if postal_type is None:
        return Category(
            name=UNKNOWN_CATEGORY_NAME,
            description=UNKNOWN_CATEGORY_DESCRIPTION,
        )

    name = capitalize_words(postal_type.categoria or UNKNOWN_CATEGORY_NAME)
    description = capitalize_words(postal_type.descricao or UNKNOWN_CATEGORY_DESCRIPTION)

    lowered = description.lower()
    if not any(marker in lowered for marker in UNFLAGGED_DESCRIPTION_MARKERS):
        description = upper_first_two_char_word(description)

    return Category(name=name, description=description)


# ── Response normalization ────────────────────────────────────────────


def _normalize_event(event: CorreiosEvent) -> TrackingEvent:
    location = resolve_location(event.unidade)

    destination = None
    if event.unidadeDestino is not None:
        destination = resolve_location(event.unidadeDestino).origin

    return TrackingEvent(
        locality=location.locality,
        status=event.descricao,
        origin=location.origin,
        destination=destination,
        tracked_at=event.dtHrCriado,
        status_code=event.codigo,
    )


def normalize_response(payload: CorreiosResponse, code: str) -> TrackingRecord:
    """Normalize one carrier payload into one tracking record.

    Args:
        payload: Validated carrier response for a single code.
        code: The shipment code as the caller supplied it.

    Returns:
        A success record, or a ``not_found`` failure when the carrier
        reports a message or no events.
    """
    obj = payload.objetos[0]

    if obj.mensagem is not None or not obj.eventos:
        logger.debug("Carrier has no history for %s: %s", code, obj.mensagem)
        return TrackingRecord.failure(code, TrackingError.NOT_FOUND)

    # Carrier orders events newest-first; keep that order
    events = [_normalize_event(event) for event in obj.eventos]

    return TrackingRecord.success(
        code=code,
        category=normalize_category(obj.tipoPostal),
        events=events,
    )
