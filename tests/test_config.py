"""Tests for client configuration loading and validation."""

import os

import pytest
import yaml
from pydantic import ValidationError

from sro_correios.config import CorreiosConfig, load_config, resolve_env_vars
from sro_correios.services.constants import ProtocolVariant


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    """Isolate from real env overrides and config files."""
    for key in list(os.environ):
        if key.startswith("SRO_CORREIOS_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))


class TestCorreiosConfig:
    """Tests for CorreiosConfig defaults and validation."""

    def test_defaults_decode_constants(self):
        cfg = CorreiosConfig()
        assert cfg.tracking_url == "https://proxyapp.correios.com.br/v1/sro-rastro/"
        assert cfg.login_url == "https://proxyapp.correios.com.br/v3/app-validation"
        assert cfg.request_token
        assert len(cfg.user_agents) == 5
        assert all(ua.startswith("Mozilla/5.0") for ua in cfg.user_agents)
        assert cfg.parallel_tracks == 10
        assert cfg.timeout is None
        assert cfg.variant == ProtocolVariant.NO_AUTH

    def test_request_token_hidden_from_repr(self):
        cfg = CorreiosConfig(request_token="very-secret")
        assert "very-secret" not in repr(cfg)

    @pytest.mark.parametrize("field,value", [
        ("parallel_tracks", 0),
        ("timeout", 0),
        ("user_agents", ()),
    ])
    def test_rejects_invalid_values(self, field, value):
        with pytest.raises(ValidationError):
            CorreiosConfig(**{field: value})


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults_without_file(self):
        assert load_config() == CorreiosConfig()

    def test_missing_explicit_path_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_loads_yaml_with_env_refs(self, tmp_path, monkeypatch):
        monkeypatch.setenv("MY_SRO_TOKEN", "from-env")
        path = tmp_path / "custom.yaml"
        path.write_text(yaml.safe_dump({
            "variant": "handshake",
            "request_token": "${MY_SRO_TOKEN}",
            "parallel_tracks": 5,
        }))

        cfg = load_config(str(path))

        assert cfg.variant == ProtocolVariant.HANDSHAKE
        assert cfg.request_token == "from-env"
        assert cfg.parallel_tracks == 5

    def test_finds_file_in_cwd(self, tmp_path):
        (tmp_path / "sro_correios.yaml").write_text("timeout: 12.5\n")
        assert load_config().timeout == 12.5

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        (tmp_path / "sro_correios.yaml").write_text("parallel_tracks: 4\n")
        monkeypatch.setenv("SRO_CORREIOS_PARALLEL_TRACKS", "7")
        monkeypatch.setenv("SRO_CORREIOS_USER_AGENTS", "UA one, x | UA two")
        monkeypatch.setenv("SRO_CORREIOS_UNKNOWN_FIELD", "ignored")

        cfg = load_config()

        assert cfg.parallel_tracks == 7
        assert cfg.user_agents == ("UA one, x", "UA two")


class TestResolveEnvVars:

    def test_missing_var_resolves_empty(self, monkeypatch):
        monkeypatch.delenv("SRO_NOT_SET", raising=False)
        assert resolve_env_vars("a${SRO_NOT_SET}b") == "ab"
