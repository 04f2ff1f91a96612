# logitrack/domain/models/actor.py

from dataclasses import dataclass
from typing import Optional

SYSTEM_ACTOR_NAME = "System"


@dataclass(frozen=True)
class Actor:
    """Who is performing an operation, used for audit attribution."""
    name: str
    id: Optional[str] = None

    @classmethod
    def system(cls) -> "Actor":
        return cls(name=SYSTEM_ACTOR_NAME)
