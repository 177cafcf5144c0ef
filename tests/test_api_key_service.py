"""Tests for key redaction, request attribution and key generation."""
import string

import pytest

from app.adapters.outbound.security.api_key_generator import API_KEY_ALPHABET, ApiKeyGenerator
from app.domain.services.api_key_service import ApiKeyService


class TestRedact:

    def test_long_key_shows_eight_characters(self):
        assert ApiKeyService.redact("AbCdEfGh12345678XYZ") == "AbCdEfGh..."

    def test_short_key_never_reveals_more_than_half(self):
        assert ApiKeyService.redact("abcdef") == "abc..."
        assert ApiKeyService.redact("a") == "..."

    def test_missing_key(self):
        assert ApiKeyService.redact(None) == ""
        assert ApiKeyService.redact("") == ""


class TestRequestSummary:

    def test_known_client(self):
        summary = ApiKeyService.build_request_summary("Acme Mobile", "AbCdEfGh12345678")
        assert summary == "Client: Acme Mobile | API Key: AbCdEfGh..."

    def test_unknown_client_without_key(self):
        assert ApiKeyService.build_request_summary(None, None) == "Client: UNKNOWN"

    def test_raw_key_never_in_summary(self):
        key = "Zz" * 16
        assert key not in ApiKeyService.build_request_summary(None, key)


class TestResolveClientIp:

    def test_forwarded_for_wins(self):
        headers = {"X-Forwarded-For": "10.0.0.1", "Proxy-Client-IP": "10.0.0.2"}
        assert ApiKeyService.resolve_client_ip(headers, "127.0.0.1") == "10.0.0.1"

    def test_unknown_values_are_skipped(self):
        headers = {
            "X-Forwarded-For": "unknown",
            "Proxy-Client-IP": "UNKNOWN",
            "WL-Proxy-Client-IP": "10.0.0.3",
        }
        assert ApiKeyService.resolve_client_ip(headers, "127.0.0.1") == "10.0.0.3"

    def test_empty_values_are_skipped(self):
        headers = {"X-Forwarded-For": "", "Proxy-Client-IP": "   "}
        assert ApiKeyService.resolve_client_ip(headers, "127.0.0.1") == "127.0.0.1"

    def test_falls_back_to_remote_address(self):
        assert ApiKeyService.resolve_client_ip({}, "192.168.1.9") == "192.168.1.9"
        assert ApiKeyService.resolve_client_ip({}, None) is None


class TestApiKeyGenerator:

    def test_alphabet_is_alphanumeric(self):
        assert set(API_KEY_ALPHABET) == set(string.ascii_letters + string.digits)

    def test_default_length(self):
        key = ApiKeyGenerator.generate()
        assert len(key) == 32
        assert set(key) <= set(API_KEY_ALPHABET)

    @pytest.mark.parametrize("length", [8, 64])
    def test_custom_length(self, length):
        assert len(ApiKeyGenerator.generate(length)) == length

    def test_keys_differ(self):
        assert len({ApiKeyGenerator.generate() for _ in range(50)}) == 50
