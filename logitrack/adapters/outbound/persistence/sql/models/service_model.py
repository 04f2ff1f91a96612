# logitrack/adapters/outbound/persistence/sql/models/service_model.py

"""
Modelo de corrida (serviço de entrega).
"""

from sqlalchemy import Column, String, Float, Boolean, JSON, Text

from logitrack.adapters.outbound.persistence.sql.models.base_model import Base


class Service(Base):
    """
    Corrida registrada por um usuário (tabela ``services``).

    Os endereços de coleta e entrega são listas ordenadas guardadas como JSON.
    ``date`` guarda ``YYYY-MM-DD`` ou um datetime ISO.
    """
    __tablename__ = "services"

    id = Column(String(64), primary_key=True)
    owner_id = Column(String(64), nullable=False, index=True)
    client_id = Column(String(64), nullable=False, index=True)
    pickup_addresses = Column(JSON, nullable=False)
    delivery_addresses = Column(JSON, nullable=False)
    cost = Column(Float, nullable=False, default=0.0)
    driver_fee = Column(Float, nullable=False, default=0.0)
    requester_name = Column(String, nullable=False, default="")
    date = Column(String(40), nullable=False, index=True)
    paid = Column(Boolean, nullable=False, default=False)
    payment_method = Column(String(16), nullable=True)
    status = Column(String(16), nullable=True)
    waiting_time = Column(Float, nullable=True)
    extra_fee = Column(Float, nullable=True)
    manual_order_id = Column(String, nullable=True)
    notes = Column(Text, nullable=True)
    image_url = Column(String, nullable=True)
    deleted_at = Column(String(40), nullable=True)

    def __repr__(self) -> str:
        return f"<Service(id={self.id}, date={self.date}, cost={self.cost})>"
