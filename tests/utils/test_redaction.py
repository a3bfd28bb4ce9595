"""Tests for secret redaction utility."""

from sro_correios.utils.redaction import redact_for_logging


class TestRedactForLogging:

    def test_redacts_login_payload(self):
        data = {"requestToken": "tok", "data": "10/01/2022 10:00:00", "sign": "abc"}
        result = redact_for_logging(data)
        assert result["requestToken"] == "***REDACTED***"
        assert result["sign"] == "***REDACTED***"
        assert result["data"] == "10/01/2022 10:00:00"

    def test_redacts_header_container(self):
        result = redact_for_logging({"headers": {"app-check-token": "t"}, "url": "u"})
        assert result["headers"] == "***REDACTED***"
        assert result["url"] == "u"

    def test_handles_nested_dict(self):
        result = redact_for_logging({"outer": {"token": "t", "name": "x"}})
        assert result["outer"]["token"] == "***REDACTED***"
        assert result["outer"]["name"] == "x"

    def test_handles_list_of_dicts(self):
        result = redact_for_logging({"items": [{"token": "t", "n": 1}, "plain"]})
        assert result["items"][0]["token"] == "***REDACTED***"
        assert result["items"][1] == "plain"

    def test_does_not_mutate_input(self):
        data = {"sign": "abc"}
        redact_for_logging(data)
        assert data == {"sign": "abc"}

    def test_empty_dict(self):
        assert redact_for_logging({}) == {}

    def test_redacts_access_token_header_key(self):
        result = redact_for_logging({"app-check-token": "t", "User-Agent": "UA-1"})
        assert result == {"app-check-token": "***REDACTED***", "User-Agent": "UA-1"}

    def test_login_timestamp_and_url_pass_through(self):
        data = {"url": "https://sro.test/v3/app-validation", "data": "10/01/2022 10:00:00"}
        assert redact_for_logging(data) == data
