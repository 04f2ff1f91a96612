# logitrack/application/dtos/user_dto.py

"""
Schemas para dados de usuário.

Este módulo define os dtos Pydantic para validação e serialização
dos dados relacionados a usuários: registro, login, perfil e token.
"""

from typing import Optional

from pydantic import EmailStr, Field, field_validator

from logitrack.application.dtos.base_dto import CustomBaseModel
from logitrack.domain.models import UserRole, UserStatus
from logitrack.shared.utils.input_validation import InputValidator


def _check(result):
    is_valid, error_msg = result
    if not is_valid:
        raise ValueError(error_msg)


class UserCreate(CustomBaseModel):
    """
    Schema para registro de um novo usuário.
    """
    name: str = Field(..., description="Nome completo do usuário")
    email: EmailStr = Field(..., description="Email do usuário. Deve ser único.")
    password: str = Field(..., description="Senha, com no mínimo 6 caracteres.")
    phone: str = Field("", description="Telefone de contato")

    @field_validator("name")
    def validate_name(cls, v):
        _check(InputValidator.validate_name(v))
        return InputValidator.sanitize_name(v)

    @field_validator("email")
    def validate_email_security(cls, v):
        _check(InputValidator.validate_email(v))
        return v.lower()

    @field_validator("password")
    def validate_password_security(cls, v):
        _check(InputValidator.validate_password(v))
        return v


class UserLogin(CustomBaseModel):
    email: EmailStr
    password: str


class UserSelfUpdate(CustomBaseModel):
    """
    Schema para o próprio usuário atualizar o perfil.

    Não permite alterar papel nem status.
    """
    name: Optional[str] = None
    phone: Optional[str] = None
    password: Optional[str] = None
    company_name: Optional[str] = None
    company_address: Optional[str] = None
    company_cnpj: Optional[str] = None

    @field_validator("name")
    def validate_name(cls, v):
        if v is None:
            return v
        _check(InputValidator.validate_name(v))
        return InputValidator.sanitize_name(v)

    @field_validator("password")
    def validate_password_security(cls, v):
        if v is None:
            return v
        _check(InputValidator.validate_password(v))
        return v

    @field_validator("company_cnpj")
    def validate_company_cnpj(cls, v):
        _check(InputValidator.validate_cnpj(v))
        return v


class UserOutput(CustomBaseModel):
    """
    Schema para retorno de dados de usuário, sem a senha.
    """
    id: str
    name: str
    email: str
    phone: str = ""
    role: UserRole
    status: UserStatus
    company_name: Optional[str] = None
    company_address: Optional[str] = None
    company_cnpj: Optional[str] = None


class TokenData(CustomBaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserOutput
