# app/domain/services/api_key_service.py

from typing import Mapping, Optional, Sequence

from app.domain.models.client_domain_model import UNKNOWN_CLIENT


# Headers consulted, in order, before falling back to the transport peer
CLIENT_IP_HEADERS: Sequence[str] = (
    "X-Forwarded-For",
    "Proxy-Client-IP",
    "WL-Proxy-Client-IP",
)

KEY_PREFIX_LENGTH = 8


class ApiKeyService:
    """
    Domain service for the pure parts of API-key handling:
    redaction of presented keys and request attribution.
    """

    @staticmethod
    def redact(api_key: Optional[str]) -> str:
        """
        Return a short, non-reversible prefix of a key for traceability.

        Never more than half of the key is revealed, so very short keys
        are not echoed back in full.

        Args:
            api_key: Key as presented by the caller

        Returns:
            Prefix followed by "...", or an empty string if no key was given
        """
        if not api_key:
            return ""
        visible = min(KEY_PREFIX_LENGTH, len(api_key) // 2)
        return f"{api_key[:visible]}..."

    @staticmethod
    def build_request_summary(client_name: Optional[str], api_key: Optional[str]) -> str:
        """
        Build the redacted request summary stored with each audit entry.

        Args:
            client_name: Name of the resolved client, if any
            api_key: Raw presented key, if any

        Returns:
            Summary like "Client: acme | API Key: AbCd1234..."
        """
        summary = f"Client: {client_name or UNKNOWN_CLIENT}"
        if api_key:
            summary += f" | API Key: {ApiKeyService.redact(api_key)}"
        return summary

    @staticmethod
    def resolve_client_ip(headers: Mapping[str, str], remote_addr: Optional[str]) -> Optional[str]:
        """
        Resolve the caller IP through the proxy header chain.

        The first value that is non-empty and not "unknown" (any case) wins;
        the transport-level address is the last resort.
        """
        for header in CLIENT_IP_HEADERS:
            value = headers.get(header)
            if value and value.strip() and value.strip().lower() != "unknown":
                return value.strip()
        return remote_addr
