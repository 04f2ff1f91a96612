# logitrack/domain/models/client_domain_model.py

from typing import Optional

from logitrack.domain.models.base_domain_model import DomainModel

# Sugestões exibidas no cadastro; a categoria não é restrita a esta lista.
CLIENT_CATEGORIES = [
    "Varejo", "Serviços", "Logística", "Saúde", "Tecnologia",
    "Construção", "Educação", "Automotivo", "Eventos", "Outros",
]


class Client(DomainModel):
    """Domain model for a customer of the courier company."""
    id: str
    owner_id: str  # immutable after creation
    name: str
    email: str = ""
    phone: str = ""
    category: str = ""
    created_at: str
    address: Optional[str] = None
    contact_person: Optional[str] = None
    cnpj: Optional[str] = None
    deleted_at: Optional[str] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
