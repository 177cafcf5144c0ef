# app/adapters/outbound/security/api_key_generator.py

import secrets
import string

from app.adapters.configuration.config import settings

# Alfabeto uniforme: A-Z, a-z, 0-9
API_KEY_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits


class ApiKeyGenerator:
    """
    Geração de API keys com fonte aleatória criptograficamente segura.

    A unicidade contra a base é garantida pelo repositório e pela
    constraint UNIQUE, não pelo gerador.
    """

    @classmethod
    def generate(cls, length: int = None) -> str:
        """
        Gera uma chave de tamanho fixo com caracteres alfanuméricos.
        """
        length = length or settings.API_KEY_LENGTH
        return "".join(secrets.choice(API_KEY_ALPHABET) for _ in range(length))


if __name__ == "__main__":
    print("🔐 Gerador de API key")
    print(ApiKeyGenerator.generate())

# Como usar:
# python -m app.adapters.outbound.security.api_key_generator
