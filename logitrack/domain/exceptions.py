# logitrack/domain/exceptions.py

"""
Exceções de domínio da aplicação.

Este módulo define exceções específicas do domínio, independentes do
framework HTTP. Cada exceção carrega um ``internal_code`` que o middleware
de exceções converte no status HTTP apropriado.
"""

from typing import Any, Dict, Optional


class DomainException(Exception):
    """
    Exceção base para todas as exceções do LogiTrack.
    """

    def __init__(self, detail: Any = None, internal_code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(detail)
        self.detail = detail
        self.internal_code = internal_code
        self.details = details or {}

    def __str__(self) -> str:
        return str(self.detail)


class ResourceNotFoundException(DomainException):
    """Recurso não encontrado."""

    def __init__(self, detail: str = "Recurso não encontrado", resource_id: Any = None):
        resource_info = f" (ID: {resource_id})" if resource_id is not None else ""
        super().__init__(
            detail=f"{detail}{resource_info}",
            internal_code="RESOURCE_NOT_FOUND"
        )
        self.resource_id = resource_id


class ResourceAlreadyExistsException(DomainException):
    """Recurso já existe."""

    def __init__(self, detail: str = "Recurso já existe", resource_id: Any = None):
        resource_info = f" (ID: {resource_id})" if resource_id is not None else ""
        super().__init__(
            detail=f"{detail}{resource_info}",
            internal_code="RESOURCE_ALREADY_EXISTS"
        )


class PermissionDeniedException(DomainException):
    """Permissão negada."""

    def __init__(self, detail: str = "Permissão negada", permission: Optional[str] = None):
        permission_info = f" (Permissão necessária: {permission})" if permission else ""
        super().__init__(
            detail=f"{detail}{permission_info}",
            internal_code="PERMISSION_DENIED"
        )


class InvalidCredentialsException(DomainException):
    """Credenciais inválidas."""

    def __init__(self, detail: str = "Credenciais inválidas"):
        super().__init__(detail=detail, internal_code="INVALID_CREDENTIALS")


class DatabaseOperationException(DomainException):
    """Erro na operação de armazenamento (qualquer backend)."""

    def __init__(self, detail: str = "Erro ao executar operação no banco de dados",
                 original_error: Optional[Exception] = None):
        error_info = f": {str(original_error)}" if original_error else ""
        super().__init__(
            detail=f"{detail}{error_info}",
            internal_code="DATABASE_OPERATION_ERROR"
        )
        self.original_error = original_error


class InvalidInputException(DomainException):
    """Dados de entrada inválidos."""

    def __init__(self, detail: str = "Dados de entrada inválidos", fields: Optional[Dict[str, str]] = None):
        field_errors = ""
        if fields:
            field_errors = ": " + ", ".join([f"{field}: {error}" for field, error in fields.items()])

        super().__init__(
            detail=f"{detail}{field_errors}",
            internal_code="INVALID_INPUT",
            details=fields
        )
        self.fields = fields or {}


class ResourceInactiveException(DomainException):
    """Recurso encontrado, mas está inativo (ex.: usuário bloqueado)."""

    def __init__(self, detail: str = "Recurso está inativo", resource_id: Any = None):
        resource_info = f" (ID: {resource_id})" if resource_id is not None else ""
        super().__init__(
            detail=f"{detail}{resource_info}",
            internal_code="RESOURCE_INACTIVE"
        )
