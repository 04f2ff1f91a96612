# logitrack/shared/utils/identity.py

"""
Geradores de identificadores e relógio padrão.

Use cases e adapters recebem estas funções por injeção, o que permite
substituí-las nos testes.
"""

import uuid
from datetime import datetime, timezone


def new_id() -> str:
    """Return a globally unique identifier."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
