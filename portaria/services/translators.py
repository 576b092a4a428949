"""
Portaria - Field Translators
Conversao entre a linha do backend (snake_case, colunas anulaveis) e o
modelo de visao (camelCase na API), nos dois sentidos.

Leitura: nunca levanta excecao; nulos viram "" (ou 0).
Escrita: emite apenas as colunas que a colecao persiste.
"""
import logging
import re
from typing import Any, Dict, Iterable, Optional, Type

from pydantic import BaseModel, ValidationError

from portaria.schemas import ViewModel, ReceivedItem

logger = logging.getLogger(__name__)

# Codigo de recebimento guardado dentro de observations (nao ha coluna propria).
# Ambiguo se o texto original ja contiver "Cód: <n>": a primeira ocorrencia vence.
RECEIVED_CODE_PATTERN = re.compile(r"Cód: (\d+)")
RECEIVED_CODE_STRIP_PATTERN = re.compile(r"\|? ?Cód: \d+")


def encode_received_code(observations: Optional[str], code: str) -> str:
    """Anexa o codigo as observacoes: "<obs> | Cód: <code>" ou "Cód: <code>" """
    if observations:
        return f"{observations} | Cód: {code}"
    return f"Cód: {code}"


def extract_received_code(observations: Optional[str]) -> Optional[str]:
    if not observations:
        return None
    match = RECEIVED_CODE_PATTERN.search(observations)
    return match.group(1) if match else None


def strip_received_code(observations: Optional[str]) -> str:
    """Observacoes sem o codigo embutido (forma exibida no cartao)"""
    if not observations:
        return ""
    return RECEIVED_CODE_STRIP_PATTERN.sub("", observations, count=1).strip()


def model_from_row(model_cls: Type[ViewModel], row: Dict[str, Any]) -> ViewModel:
    """Traduz uma linha do backend no modelo de visao, sem nunca falhar"""
    try:
        return model_cls.model_validate(row)
    except ValidationError as e:
        # Valor fora do dominio (status desconhecido, tipo errado): mantem o
        # registro visivel com os valores crus em vez de derrubar a carga
        logger.warning(f"{model_cls.__name__} {row.get('id')}: linha fora do formato ({e.error_count()} erro(s))")
        known = {
            k: v for k, v in row.items()
            if k in model_cls.model_fields and v is not None
        }
        return model_cls.model_construct(**known)


def row_from_model(data: BaseModel, columns: Iterable[str], **overrides) -> Dict[str, Any]:
    """Monta o payload de escrita apenas com as colunas persistidas"""
    values = data.model_dump(mode="json")
    values.update(overrides)
    return {column: values[column] for column in columns if column in values}


def received_item_from_row(row: Dict[str, Any]) -> ReceivedItem:
    item = model_from_row(ReceivedItem, row)
    code = extract_received_code(item.observations) or row.get("received_code")
    return item.model_copy(update={"received_code": code})


def received_item_to_row(data: BaseModel, columns: Iterable[str], **overrides) -> Dict[str, Any]:
    """received_code nao tem coluna: vai embutido em observations"""
    code = getattr(data, "received_code", None)
    row = row_from_model(data, columns, **overrides)
    if code:
        row["observations"] = encode_received_code(row.get("observations"), code)
    row.pop("received_code", None)
    return row
