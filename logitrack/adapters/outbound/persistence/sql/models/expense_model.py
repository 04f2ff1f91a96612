# logitrack/adapters/outbound/persistence/sql/models/expense_model.py

from sqlalchemy import Column, String, Float

from logitrack.adapters.outbound.persistence.sql.models.base_model import Base


class Expense(Base):
    """Despesa operacional (tabela ``expenses``)."""
    __tablename__ = "expenses"

    id = Column(String(64), primary_key=True)
    owner_id = Column(String(64), nullable=False, index=True)
    category = Column(String(16), nullable=False)
    amount = Column(Float, nullable=False)
    date = Column(String(40), nullable=False, index=True)
    description = Column(String, nullable=True)
