# logitrack/shared/utils/input_validation.py

import re
from typing import Optional, Tuple


class InputValidator:
    """
    Classe para validação e sanitização de entradas do usuário,
    complementando as validações do Pydantic.
    """

    # Constantes para limites
    MAX_NAME_LENGTH = 100
    MAX_PASSWORD_LENGTH = 72  # Limite seguro para bcrypt
    MIN_PASSWORD_LENGTH = 6
    MAX_EMAIL_LENGTH = 255
    MAX_STRING_INPUT_LENGTH = 1000  # Limite geral para strings

    # Letras (inclusive acentuadas), números, espaços, hífens, apóstrofes, pontos e &
    NAME_PATTERN = re.compile(r"^[A-Za-zÀ-ÖØ-öø-ÿ0-9\s\-'\.&/]+$")
    EMAIL_PATTERN = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$')
    # Caracteres potencialmente perigosos em entrada comum
    DANGEROUS_CHARS = re.compile(r'[<>"{}\[\]]')

    @classmethod
    def validate_name(cls, name: str) -> Tuple[bool, Optional[str]]:
        """
        Valida um nome de pessoa ou empresa.

        Args:
            name: String a ser validada

        Returns:
            Tupla (válido, mensagem_erro)
        """
        if not name or not name.strip():
            return False, "Nome não pode estar vazio"

        if len(name) > cls.MAX_NAME_LENGTH:
            return False, f"Nome é muito longo (máximo {cls.MAX_NAME_LENGTH} caracteres)"

        if cls.DANGEROUS_CHARS.search(name):
            return False, "Nome contém caracteres não permitidos"

        if not cls.NAME_PATTERN.match(name):
            return False, "Nome contém caracteres inválidos"

        return True, None

    @classmethod
    def sanitize_name(cls, name: str) -> str:
        """
        Sanitiza um nome removendo espaços extras e limitando o tamanho.
        """
        sanitized = re.sub(r'\s+', ' ', name.strip())
        return sanitized[:cls.MAX_NAME_LENGTH]

    @classmethod
    def validate_password(cls, password: str) -> Tuple[bool, Optional[str]]:
        if not password:
            return False, "Senha não pode estar vazia"

        if len(password) < cls.MIN_PASSWORD_LENGTH:
            return False, f"Senha deve ter pelo menos {cls.MIN_PASSWORD_LENGTH} caracteres"

        if len(password.encode("utf-8")) > cls.MAX_PASSWORD_LENGTH:
            return False, f"Senha é muito longa (máximo {cls.MAX_PASSWORD_LENGTH} bytes)"

        return True, None

    @classmethod
    def validate_email(cls, email: str) -> Tuple[bool, Optional[str]]:
        if not email:
            return False, "Email não pode estar vazio"

        if len(email) > cls.MAX_EMAIL_LENGTH:
            return False, f"Email é muito longo (máximo {cls.MAX_EMAIL_LENGTH} caracteres)"

        if not cls.EMAIL_PATTERN.match(email):
            return False, "Formato de email inválido"

        return True, None

    @staticmethod
    def validate_cnpj(cnpj: Optional[str]) -> Tuple[bool, Optional[str]]:
        """CNPJ é opcional; quando informado precisa ter 14 dígitos."""
        if not cnpj:
            return True, None
        digits = re.sub(r'\D', '', cnpj)
        if len(digits) != 14:
            return False, "CNPJ deve ter 14 dígitos"
        return True, None
