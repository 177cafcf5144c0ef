# app/shared/utils/input_validation.py

from typing import Optional, Tuple


class InputValidator:
    """
    Classe para validação de entradas do usuário,
    complementando as validações do Pydantic.
    """

    MAX_NAME_LENGTH = 100

    @classmethod
    def validate_name(cls, name: str) -> Tuple[bool, Optional[str]]:
        """
        Valida o nome de um client: não vazio e com no máximo 100 caracteres.

        Args:
            name: String a ser validada

        Returns:
            Tupla (válido, mensagem_erro)
        """
        if not name or not name.strip():
            return False, "Nome não pode estar vazio"

        if len(name.strip()) > cls.MAX_NAME_LENGTH:
            return False, f"Nome é muito longo (máximo {cls.MAX_NAME_LENGTH} caracteres)"

        return True, None
