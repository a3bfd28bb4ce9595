"""Batched tracking client for the Correios SRO service.

Wraps httpx.AsyncClient. ``track`` flattens the input codes, splits them
into groups of ``parallel_tracks`` and fetches each group concurrently;
a group starts only after the previous one fully resolved. Every code
yields exactly one ``TrackingRecord`` at its input position. Failures
are returned as data and never raised.

Example:
    async with SroCorreios(variant=ProtocolVariant.HANDSHAKE) as sro:
        records = await sro.track("AB123456789BR", ["CD987654321BR"])
"""

import asyncio
import logging
import math
import random
from collections.abc import Iterable

import httpx
from pydantic import ValidationError

from sro_correios.config import CorreiosConfig
from sro_correios.errors.domain import CorreiosError, PayloadError
from sro_correios.errors.registry import TrackingError, get_error
from sro_correios.models import TrackingRecord
from sro_correios.schemas import CorreiosResponse
from sro_correios.services.auth import AuthStrategy, auth_for_variant
from sro_correios.services.codes import flatten_codes, is_valid_order_code, partition
from sro_correios.services.constants import ProtocolVariant
from sro_correios.services.normalizer import normalize_response

logger = logging.getLogger(__name__)


class SroCorreios:
    """Tracking client for one protocol variant."""

    def __init__(
        self,
        variant: ProtocolVariant | str | None = None,
        config: CorreiosConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            variant: Protocol variant; defaults to ``config.variant``.
            config: Endpoint, credential and batching configuration.
            transport: Optional httpx transport (used by tests).
        """
        self._config = config or CorreiosConfig()
        self._variant = ProtocolVariant(variant or self._config.variant)
        self._auth: AuthStrategy = auth_for_variant(self._variant, self._config)
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def variant(self) -> ProtocolVariant:
        return self._variant

    @staticmethod
    def is_valid_order_code(code: object) -> bool:
        """Return True if code is a well-formed shipment code."""
        return is_valid_order_code(code)

    def _build_client(self) -> httpx.AsyncClient:
        kwargs = {}
        if self._config.timeout is not None:
            kwargs["timeout"] = self._config.timeout
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return httpx.AsyncClient(**kwargs)

    async def __aenter__(self) -> "SroCorreios":
        """Open the shared httpx client."""
        self._client = self._build_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Close the shared httpx client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def user_agent(self) -> str:
        """Pick a user-agent string uniformly at random."""
        return random.choice(self._config.user_agents)

    def _tracking_uri(self, code: str) -> str:
        return self._config.tracking_url + code

    # ── Batch orchestration ───────────────────────────────────────────

    async def track(self, *codes: str | Iterable[str]) -> list[TrackingRecord]:
        """Track one or more shipment codes.

        Accepts codes as positional strings, lists, or a mix of both.

        Returns:
            One record per input code, in input order (duplicates are
            fetched independently).
        """
        flat_codes = flatten_codes(*codes)
        if not flat_codes:
            return []

        if self._client is not None:
            return await self._track_all(self._client, flat_codes)

        async with self._build_client() as client:
            return await self._track_all(client, flat_codes)

    async def _track_all(
        self,
        client: httpx.AsyncClient,
        codes: list[str],
    ) -> list[TrackingRecord]:
        size = self._config.parallel_tracks
        logger.info(
            "Tracking %d code(s) in %d group(s) via %s",
            len(codes), math.ceil(len(codes) / size), self._variant.value,
        )

        records: list[TrackingRecord] = []
        for index, group in enumerate(partition(codes, size)):
            logger.debug("Dispatching group %d with %d code(s)", index, len(group))
            results = await asyncio.gather(
                *(self.fetch_one(code, client=client) for code in group)
            )
            records.extend(results)

        failed = sum(1 for record in records if record.is_invalid)
        logger.info(
            "Tracking complete: %d succeeded, %d failed",
            len(records) - failed, failed,
        )
        return records

    # ── Single fetch ──────────────────────────────────────────────────

    async def fetch_one(
        self,
        code: str,
        client: httpx.AsyncClient | None = None,
    ) -> TrackingRecord:
        """Fetch and normalize tracking data for one code. Never raises.

        Args:
            code: Shipment code, used verbatim.
            client: Open httpx client; the shared client when omitted.

        Returns:
            Normalized record, or a failure record (invalid_code,
            not_found, service_unavailable).
        """
        if not is_valid_order_code(code):
            return self._failure(code, TrackingError.INVALID_CODE)

        if client is None:
            if self._client is None:
                async with self._build_client() as own_client:
                    return await self.fetch_one(code, client=own_client)
            client = self._client

        try:
            payload = await self._request(client, code)
            record = normalize_response(payload, code)
        except (httpx.HTTPError, CorreiosError) as e:
            return self._failure(code, TrackingError.SERVICE_UNAVAILABLE, e)
        except Exception as e:
            logger.exception("Unexpected error tracking %s", code)
            return self._failure(code, TrackingError.SERVICE_UNAVAILABLE, e)

        if record.is_invalid:
            return self._failure(code, record.error)
        return record

    async def _request(self, client: httpx.AsyncClient, code: str) -> CorreiosResponse:
        """Issue the tracking request and validate the body.

        Raises:
            httpx.HTTPError: On transport failure or non-2xx status.
            CorreiosError: On handshake failure or malformed body.
        """
        headers = {
            "User-Agent": self.user_agent,
            "Content-Type": "application/json",
        }
        headers.update(await self._auth.authorize(client, headers))

        resp = await client.get(self._tracking_uri(code), headers=headers)
        resp.raise_for_status()

        try:
            return CorreiosResponse.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            raise PayloadError(f"Unexpected tracking body for {code}: {e}") from e

    def _failure(
        self,
        code: str,
        error: TrackingError,
        cause: Exception | None = None,
    ) -> TrackingRecord:
        record = TrackingRecord.failure(code, error)
        if cause is not None:
            logger.warning("%s for %s: %s", get_error(error).title, code, cause)
        else:
            logger.warning("%s", record.describe())
        return record
