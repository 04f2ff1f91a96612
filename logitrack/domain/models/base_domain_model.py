# logitrack/domain/models/base_domain_model.py

"""
Modelo base das entidades de domínio.

Os atributos Python seguem snake_case; a forma serializada das entidades
(armazenamento local e API) usa camelCase, gerada pelos aliases.
"""

from typing import Any, Dict, Type, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

RecordType = TypeVar("RecordType", bound="DomainModel")


class DomainModel(BaseModel):
    """
    Base para todas as entidades persistidas.

    Aceita tanto o nome do atributo quanto o alias camelCase na entrada.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_record(self) -> Dict[str, Any]:
        """Serializa para a forma camelCase, omitindo campos sem valor."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_record(cls: Type[RecordType], data: Dict[str, Any]) -> RecordType:
        """Reconstrói a entidade a partir da forma camelCase."""
        return cls.model_validate(data)
