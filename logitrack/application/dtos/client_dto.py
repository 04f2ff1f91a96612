# logitrack/application/dtos/client_dto.py

"""
Schemas para dados de clientes da transportadora.
"""

from typing import Optional

from pydantic import Field, field_validator

from logitrack.application.dtos.base_dto import CustomBaseModel
from logitrack.shared.utils.input_validation import InputValidator


class ClientBase(CustomBaseModel):
    email: str = Field("", description="Email de contato")
    phone: str = Field("", description="Telefone")
    category: str = Field("", description="Categoria (sugestões: Varejo, Serviços, Logística...)")
    address: Optional[str] = None
    contact_person: Optional[str] = None
    cnpj: Optional[str] = None

    @field_validator("cnpj")
    def validate_cnpj(cls, v):
        is_valid, error_msg = InputValidator.validate_cnpj(v)
        if not is_valid:
            raise ValueError(error_msg)
        return v


class ClientCreate(ClientBase):
    name: str = Field(..., description="Nome ou razão social do cliente")

    @field_validator("name")
    def validate_name(cls, v):
        is_valid, error_msg = InputValidator.validate_name(v)
        if not is_valid:
            raise ValueError(error_msg)
        return InputValidator.sanitize_name(v)


class ClientUpdate(CustomBaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    category: Optional[str] = None
    address: Optional[str] = None
    contact_person: Optional[str] = None
    cnpj: Optional[str] = None

    @field_validator("name")
    def validate_name(cls, v):
        if v is None:
            return v
        is_valid, error_msg = InputValidator.validate_name(v)
        if not is_valid:
            raise ValueError(error_msg)
        return InputValidator.sanitize_name(v)


class ClientOutput(ClientBase):
    id: str
    owner_id: str
    name: str
    created_at: str
    deleted_at: Optional[str] = None
    service_count: int = Field(0, description="Quantidade de corridas do cliente")
