# logitrack/adapters/outbound/persistence/sql/models/service_log_model.py

from sqlalchemy import Column, String, JSON

from logitrack.adapters.outbound.persistence.sql.models.base_model import Base


class ServiceLog(Base):
    """
    Entrada do histórico de alterações de uma corrida (tabela ``service_logs``).

    ``changes`` guarda o mapeamento ``{rótulo: {old, new}}`` como JSON.
    """
    __tablename__ = "service_logs"

    id = Column(String(64), primary_key=True)
    service_id = Column(String(64), nullable=False, index=True)
    user_name = Column(String, nullable=False)
    action = Column(String(16), nullable=False)
    changes = Column(JSON, nullable=False, default=dict)
    created_at = Column(String(40), nullable=False)
