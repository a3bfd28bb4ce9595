"""Authentication strategies for the carrier's protocol variants.

``NoAuth`` sends tracking requests as-is. ``HandshakeAuth`` signs a
login request, exchanges it for a one-shot access token and attaches the
token to the tracking request. A fresh token is obtained for every code.

The signature is an MD5 hex digest of request token + timestamp. The
carrier validates it server-side, so the algorithm is fixed.

Example:
    auth = auth_for_variant(ProtocolVariant.HANDSHAKE, config)
    headers.update(await auth.authorize(client, headers))
"""

import hashlib
import logging
from datetime import datetime
from typing import Protocol
from zoneinfo import ZoneInfo

import httpx
from pydantic import ValidationError

from sro_correios.config import CorreiosConfig
from sro_correios.errors.domain import AuthHandshakeError
from sro_correios.models import AuthToken, SignedLoginRequest
from sro_correios.schemas import LoginResponse
from sro_correios.services.constants import (
    APP_CHECK_HEADER,
    LOGIN_DATE_FORMAT,
    LOGIN_TIMEZONE,
    ProtocolVariant,
)
from sro_correios.utils.redaction import redact_for_logging

logger = logging.getLogger(__name__)


def sign_login(request_token: str, data: str) -> str:
    """Return the MD5 hex digest of request_token + data."""
    return hashlib.md5((request_token + data).encode("utf-8")).hexdigest()


def build_login_request(
    request_token: str,
    now: datetime | None = None,
) -> SignedLoginRequest:
    """Build the signed login body for the current carrier-local time.

    Args:
        request_token: Decoded request-token constant.
        now: Override for the current time. Aware datetimes are converted
            to the carrier's timezone; naive ones are used as-is.

    Returns:
        SignedLoginRequest with a ``dd/mm/YYYY HH:MM:SS`` timestamp.
    """
    tz = ZoneInfo(LOGIN_TIMEZONE)
    if now is None:
        now = datetime.now(tz)
    elif now.tzinfo is not None:
        now = now.astimezone(tz)

    data = now.strftime(LOGIN_DATE_FORMAT)
    return SignedLoginRequest(
        request_token=request_token,
        data=data,
        sign=sign_login(request_token, data),
    )


class AuthStrategy(Protocol):
    """Supplies the extra headers a tracking request needs."""

    async def authorize(
        self,
        client: httpx.AsyncClient,
        headers: dict[str, str],
    ) -> dict[str, str]:
        ...


class NoAuth:
    """Legacy variant: tracking requests need no credentials."""

    async def authorize(
        self,
        client: httpx.AsyncClient,
        headers: dict[str, str],
    ) -> dict[str, str]:
        return {}


class HandshakeAuth:
    """Token variant: login before every tracking request."""

    def __init__(self, login_url: str, request_token: str) -> None:
        """Initialize with handshake endpoint material.

        Args:
            login_url: Decoded login endpoint URL.
            request_token: Decoded request-token constant.
        """
        self._login_url = login_url
        self._request_token = request_token

    async def login(
        self,
        client: httpx.AsyncClient,
        headers: dict[str, str],
    ) -> AuthToken:
        """Exchange a signed login request for an access token.

        Args:
            client: Open httpx client.
            headers: Base headers (user agent, content type) to send.

        Returns:
            AuthToken valid for one tracking request.

        Raises:
            AuthHandshakeError: On non-2xx status or a body without token.
            httpx.HTTPError: On transport failure.
        """
        login_request = build_login_request(self._request_token)
        payload = login_request.to_payload()
        logger.debug("Logging in at %s with %s", self._login_url, redact_for_logging(payload))

        resp = await client.post(self._login_url, json=payload, headers=headers)
        if resp.status_code >= 400:
            raise AuthHandshakeError(
                f"Login rejected with HTTP {resp.status_code}",
                status_code=resp.status_code,
            )

        try:
            body = LoginResponse.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            raise AuthHandshakeError(f"Malformed login response: {e}") from e

        return AuthToken(value=body.token)

    async def authorize(
        self,
        client: httpx.AsyncClient,
        headers: dict[str, str],
    ) -> dict[str, str]:
        token = await self.login(client, headers)
        return {APP_CHECK_HEADER: token.value}


def auth_for_variant(variant: ProtocolVariant, config: CorreiosConfig) -> AuthStrategy:
    """Return the auth strategy for a protocol variant."""
    if variant == ProtocolVariant.HANDSHAKE:
        return HandshakeAuth(
            login_url=config.login_url,
            request_token=config.request_token,
        )
    return NoAuth()
