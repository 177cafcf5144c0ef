# app/adapters/outbound/security/__init__.py

from app.adapters.outbound.security.api_key_generator import ApiKeyGenerator, API_KEY_ALPHABET

__all__ = ["ApiKeyGenerator", "API_KEY_ALPHABET"]
