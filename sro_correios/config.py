"""Client configuration with YAML loading and env var overrides.

Defaults come from the encoded constant table, so ``CorreiosConfig()``
is ready to use. ``load_config`` reads (priority order):
1. an explicit path
2. ./sro_correios.yaml (working directory)
3. ~/.sro_correios/config.yaml (user home)

Environment variables override YAML: SRO_CORREIOS_<FIELD>.
${VAR} references in YAML values resolve from environment at load time.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from sro_correios.services.constants import (
    ENCODED_LOGIN_URL,
    ENCODED_REQUEST_TOKEN,
    ENCODED_TRACKING_URL,
    ENCODED_USER_AGENTS,
    PARALLEL_TRACKS,
    ProtocolVariant,
    decode,
)

logger = logging.getLogger(__name__)

_ENV_PREFIX = "SRO_CORREIOS_"
_ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")


def resolve_env_vars(value: str) -> str:
    """Resolve ${VAR} references in a string from environment variables.

    Missing env vars resolve to empty string.
    """
    def _replace(match: re.Match) -> str:
        return os.environ.get(match.group(1), "")

    return _ENV_VAR_PATTERN.sub(_replace, value)


def _resolve_env_vars_recursive(data: Any) -> Any:
    if isinstance(data, str):
        return resolve_env_vars(data)
    elif isinstance(data, dict):
        return {k: _resolve_env_vars_recursive(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [_resolve_env_vars_recursive(item) for item in data]
    return data


class CorreiosConfig(BaseModel):
    """Configuration for the SRO tracking client."""

    variant: ProtocolVariant = ProtocolVariant.NO_AUTH
    tracking_url: str = Field(default_factory=lambda: decode(ENCODED_TRACKING_URL))
    login_url: str = Field(default_factory=lambda: decode(ENCODED_LOGIN_URL))
    request_token: str = Field(
        default_factory=lambda: decode(ENCODED_REQUEST_TOKEN),
        repr=False,
    )
    user_agents: tuple[str, ...] = Field(
        default_factory=lambda: tuple(decode(ua) for ua in ENCODED_USER_AGENTS),
        min_length=1,
    )
    parallel_tracks: int = Field(PARALLEL_TRACKS, ge=1)
    # None keeps the transport's own default timeout
    timeout: float | None = Field(None, gt=0)


def _find_config_file() -> Path | None:
    candidates = [
        Path.cwd() / "sro_correios.yaml",
        Path.cwd() / "sro_correios.yml",
        Path.home() / ".sro_correios" / "config.yaml",
        Path.home() / ".sro_correios" / "config.yml",
    ]
    for candidate in candidates:
        if candidate.exists():
            return candidate
    return None


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Apply SRO_CORREIOS_<FIELD> env var overrides to config data.

    ``SRO_CORREIOS_USER_AGENTS`` is split on ``|`` since user-agent
    strings contain commas.
    """
    known_fields = set(CorreiosConfig.model_fields)
    for key, value in os.environ.items():
        if not key.startswith(_ENV_PREFIX):
            continue
        field_name = key[len(_ENV_PREFIX):].lower()
        if field_name not in known_fields:
            continue
        if field_name == "user_agents":
            data[field_name] = [ua.strip() for ua in value.split("|") if ua.strip()]
        else:
            # Pydantic coerces numeric strings for int/float fields
            data[field_name] = value
    return data


def load_config(config_path: str | None = None) -> CorreiosConfig:
    """Load client configuration from YAML with env var resolution.

    Args:
        config_path: Explicit path to config file. If None, searches
            standard locations (cwd, then ~/.sro_correios/).

    Returns:
        Validated CorreiosConfig. Built from defaults plus env overrides
        when no config file is found.

    Raises:
        FileNotFoundError: If an explicit config_path does not exist.
    """
    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        path = _find_config_file()

    raw_data: dict[str, Any] = {}
    if path is not None:
        logger.info("Loading config from %s", path)
        with open(path) as f:
            raw_data = yaml.safe_load(f) or {}

    data = _resolve_env_vars_recursive(raw_data)
    data = _apply_env_overrides(data)

    return CorreiosConfig(**data)
