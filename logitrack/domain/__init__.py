# logitrack/domain/__init__.py

"""
Módulo principal para componentes do domínio da aplicação.

Este módulo exporta as exceções do domínio.
"""

from logitrack.domain.exceptions import (
    DomainException,
    ResourceNotFoundException,
    ResourceAlreadyExistsException,
    ResourceInactiveException,
    PermissionDeniedException,
    InvalidCredentialsException,
    DatabaseOperationException,
    InvalidInputException,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "ResourceAlreadyExistsException",
    "ResourceInactiveException",
    "PermissionDeniedException",
    "InvalidCredentialsException",
    "DatabaseOperationException",
    "InvalidInputException",
]
