"""
Portaria - Base Schemas
Modelos de visao (camelCase na API) e de entrada
"""
from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class ViewModel(BaseModel):
    """
    Registro ja traduzido para a visao. Atributos em snake_case,
    serializados em camelCase (model_dump(by_alias=True)).

    Campos nulos/ausentes na linha recebida caem no default do campo
    ("" para textos, 0 para numeros).
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data):
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class InputModel(BaseModel):
    """Payload vindo dos formularios (aceita camelCase ou snake_case)"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True
    )
