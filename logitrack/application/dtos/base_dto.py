# logitrack/application/dtos/base_dto.py

"""
Classe base para dtos personalizados.

Este módulo define a classe base CustomBaseModel que estende
o BaseModel do Pydantic com funcionalidades adicionais comuns
a todos os dtos da aplicação.
"""

from typing import Any, ClassVar, Dict, FrozenSet

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CustomBaseModel(BaseModel):
    """
    Modelo base personalizado para todos os dtos da aplicação.

    Os campos trafegam em camelCase na API (aliases) e aceitam também o
    nome snake_case na entrada.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    # Campos opcionais que um null explícito limpa na atualização parcial
    clearable_fields: ClassVar[FrozenSet[str]] = frozenset()

    def to_payload(self) -> Dict[str, Any]:
        """
        Retorna apenas os campos informados pelo cliente.

        Usado nas atualizações parciais. Um None só é mantido para os campos
        em ``clearable_fields``; nos demais ele é ignorado.
        """
        d = self.model_dump(exclude_unset=True)
        return {k: v for k, v in d.items() if v is not None or k in self.clearable_fields}
