# logitrack/adapters/outbound/persistence/sql/models/client_model.py

"""
Modelo de cliente da transportadora.
"""

from sqlalchemy import Column, String

from logitrack.adapters.outbound.persistence.sql.models.base_model import Base


class Client(Base):
    """
    Cliente atendido pelas corridas (tabela ``clients``).

    ``owner_id`` é a fronteira de isolamento entre contas; ``deleted_at``
    marca a exclusão lógica.
    """
    __tablename__ = "clients"

    id = Column(String(64), primary_key=True)
    owner_id = Column(String(64), nullable=False, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, default="")
    phone = Column(String, nullable=False, default="")
    category = Column(String, nullable=False, default="")
    created_at = Column(String(40), nullable=False)
    address = Column(String, nullable=True)
    contact_person = Column(String, nullable=True)
    cnpj = Column(String(32), nullable=True)
    deleted_at = Column(String(40), nullable=True)

    def __repr__(self) -> str:
        return f"<Client(name={self.name}, owner_id={self.owner_id})>"
