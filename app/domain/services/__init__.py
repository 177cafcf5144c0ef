# app/domain/services/__init__.py

from app.domain.services.api_key_service import ApiKeyService, CLIENT_IP_HEADERS

__all__ = ["ApiKeyService", "CLIENT_IP_HEADERS"]
