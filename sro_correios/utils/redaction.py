"""Secret redaction for safe logging.

The handshake exchanges a request token, a digest and an access token;
none of them may reach log output. Keys are matched case-insensitively
by substring, so ``requestToken`` and ``app-check-token`` both match
``token``. Nested dicts and lists of dicts are walked.
"""

# Substrings of the handshake keys that carry secrets
_HANDSHAKE_SECRET_KEYS = frozenset({"token", "sign"})

# Keys whose entire value is replaced; request headers carry the access token
_CONTAINER_KEYS = frozenset({"headers"})

_REDACTED = "***REDACTED***"


def _redact_value(value, secret_keys: frozenset[str]):
    if isinstance(value, dict):
        return redact_for_logging(value, secret_keys)
    if isinstance(value, list):
        return [_redact_value(item, secret_keys) for item in value]
    return value


def redact_for_logging(
    obj: dict,
    secret_keys: frozenset[str] = _HANDSHAKE_SECRET_KEYS,
) -> dict:
    """Return a copy of obj with handshake secrets replaced.

    Args:
        obj: Dict to redact (not mutated).
        secret_keys: Key substrings whose values are replaced.

    Returns:
        New dict with secret values replaced by '***REDACTED***'.
    """
    redacted = {}
    for key, value in obj.items():
        lowered = key.lower()
        if lowered in _CONTAINER_KEYS or any(part in lowered for part in secret_keys):
            redacted[key] = _REDACTED
        else:
            redacted[key] = _redact_value(value, secret_keys)
    return redacted
