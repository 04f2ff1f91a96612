# logitrack/adapters/outbound/persistence/sql/models/user_model.py

"""
Modelo de usuário.
"""

from sqlalchemy import Column, String

from logitrack.adapters.outbound.persistence.sql.models.base_model import Base


class User(Base):
    """
    Usuário do sistema (tabela ``users``).

    Attributes:
        id: Identificador único
        email: Email de login, único entre os usuários
        password: Hash bcrypt da senha
        role: ADMIN ou USER
        status: ACTIVE ou BLOCKED
    """
    __tablename__ = "users"

    id = Column(String(64), primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=False, index=True)
    password = Column(String, nullable=False)
    phone = Column(String, nullable=False, default="")
    role = Column(String(16), nullable=False, default="USER")
    status = Column(String(16), nullable=False, default="ACTIVE")
    company_name = Column(String, nullable=True)
    company_address = Column(String, nullable=True)
    company_cnpj = Column(String, nullable=True)

    def __repr__(self) -> str:
        return f"<User(email={self.email}, role={self.role})>"
