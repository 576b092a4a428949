"""
Portaria - Collections Registry
Enum fechado das colecoes e tabela colecao -> {tabela, ordenacao, tradutores}
"""
import enum
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Dict, Iterable, List, Tuple

from portaria.schemas import (
    Resident,
    Package,
    Company,
    Employee,
    Occurrence,
    BorrowedMaterial,
    Visitor,
    TimeRecord,
    DeliveryDriver,
    DeliveryVisit,
)
from .translators import model_from_row, row_from_model, received_item_from_row, received_item_to_row

ALL_SCOPE = "all"


class Collection(str, enum.Enum):
    """Escopos de atualizacao (um por colecao)"""
    RESIDENTS = "residents"
    PACKAGES = "packages"
    COMPANIES = "companies"
    EMPLOYEES = "employees"
    OCCURRENCES = "occurrences"
    RECEIVED_ITEMS = "received_items"
    MATERIALS = "materials"
    VISITORS = "visitors"
    TIME_RECORDS = "time_records"
    DELIVERY_DRIVERS = "delivery_drivers"
    DELIVERY_VISITS = "delivery_visits"


class UnknownCollection(ValueError):
    pass


@dataclass(frozen=True)
class CollectionSpec:
    collection: Collection
    table: str
    # Logs transacionais: created_at desc. Cadastros: sem ordenacao
    order_desc: bool
    columns: Tuple[str, ...]
    from_row: Callable[[Dict[str, Any]], Any]
    to_row: Callable[..., Dict[str, Any]]

    def write_row(self, data, **overrides) -> Dict[str, Any]:
        return self.to_row(data, self.columns, **overrides)


def _spec(collection, table, model_cls, columns, order_desc, from_row=None, to_row=row_from_model):
    return CollectionSpec(
        collection=collection,
        table=table,
        order_desc=order_desc,
        columns=tuple(columns),
        from_row=from_row or partial(model_from_row, model_cls),
        to_row=to_row,
    )


COLLECTIONS: Dict[Collection, CollectionSpec] = {
    spec.collection: spec for spec in (
        _spec(Collection.RESIDENTS, "residents", Resident,
              ["name", "unit", "block", "phone"], order_desc=False),
        _spec(Collection.PACKAGES, "packages", Package,
              ["unit", "block", "recipient_name", "type", "sender", "tracking_code",
               "withdrawal_code", "received_at", "status", "description", "observations",
               "picked_up_by", "picked_up_at"], order_desc=True),
        _spec(Collection.COMPANIES, "companies", Company,
              ["name", "cnpj", "phone", "observations"], order_desc=False),
        _spec(Collection.EMPLOYEES, "employees", Employee,
              ["name", "cpf", "role", "shift", "status", "entry_time", "exit_time", "phone",
               "email", "admission_date", "photo_url", "observations"], order_desc=False),
        _spec(Collection.OCCURRENCES, "occurrences", Occurrence,
              ["outgoing_employee_name", "incoming_employee_name", "description", "timestamp"],
              order_desc=True),
        _spec(Collection.RECEIVED_ITEMS, "received_items", None,
              ["operation_type", "unit", "block", "recipient_name", "resident_id", "left_by",
               "document", "description", "shift", "observations", "received_at", "status",
               "picked_up_by", "picked_up_at"], order_desc=True,
              from_row=received_item_from_row, to_row=received_item_to_row),
        _spec(Collection.MATERIALS, "borrowed_materials", BorrowedMaterial,
              ["material_name", "borrower_type", "borrower_name", "unit", "block", "document",
               "phone", "loan_date", "return_date", "status", "observations"], order_desc=True),
        _spec(Collection.VISITORS, "visitors", Visitor,
              ["name", "document", "phone", "unit", "block", "resident_name", "resident_id",
               "entry_time", "exit_time", "status", "observations"], order_desc=True),
        _spec(Collection.TIME_RECORDS, "time_records", TimeRecord,
              ["employee_id", "employee_name", "date", "shift", "entry_time", "exit_time",
               "type", "observations"], order_desc=True),
        _spec(Collection.DELIVERY_DRIVERS, "delivery_drivers", DeliveryDriver,
              ["name", "company_id", "company_name", "phone", "cpf", "rg", "status",
               "observations"], order_desc=False),
        _spec(Collection.DELIVERY_VISITS, "delivery_visits", DeliveryVisit,
              ["driver_id", "driver_name", "company_name", "entry_time", "package_count",
               "shift", "observations"], order_desc=True),
    )
}


def resolve_scopes(scopes: Iterable[Any]) -> List[Collection]:
    """
    Expande "all", remove duplicados e mantem a ordem do registro.
    Levanta UnknownCollection para nomes fora do enum.
    """
    requested = set()
    for scope in scopes:
        if scope == ALL_SCOPE:
            return list(Collection)
        try:
            requested.add(Collection(scope))
        except ValueError:
            raise UnknownCollection(f"Colecao desconhecida: {scope}") from None
    return [c for c in Collection if c in requested]
