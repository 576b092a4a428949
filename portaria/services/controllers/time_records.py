"""
Portaria - Time Records Controller
Folha de ponto: filtros por turno e funcionario, exportacao CSV e limpeza total
"""
import logging

from portaria.core.constants import NIL_UUID
from portaria.services.collections import Collection
from portaria.services.exports import time_records_csv
from .base import ALL_FILTER, CrudController

logger = logging.getLogger(__name__)


class TimeRecordsController(CrudController):
    collection = Collection.TIME_RECORDS
    search_fields = ("employee_name", "observations")
    save_error = "Erro ao salvar registro"
    clear_error = "Erro ao limpar tudo"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.shift_filter = ALL_FILTER
        self.employee_filter = ALL_FILTER

    def filtered(self) -> list:
        return [
            record for record in self.items
            if self.matches_search(record)
            and (self.shift_filter == ALL_FILTER or record.shift == self.shift_filter)
            and (self.employee_filter == ALL_FILTER or record.employee_id == self.employee_filter)
        ]

    def clear_filters(self):
        self.search_term = ""
        self.shift_filter = ALL_FILTER
        self.employee_filter = ALL_FILTER

    async def save(self, data, **overrides) -> bool:
        employee = next(
            (e for e in self.store.snapshot(Collection.EMPLOYEES) if e.id == data.employee_id),
            None
        )
        if employee is None:
            # Funcionario nao existe mais: a gravacao e abandonada em silencio
            logger.warning(f"Registro de ponto ignorado: funcionario {data.employee_id} nao encontrado")
            return False
        return await super().save(data, employee_name=employee.name, **overrides)

    async def clear_all(self) -> bool:
        builder = self.query().delete().neq("id", NIL_UUID)
        return await self._write(builder, self.clear_error)

    def export_csv(self) -> str:
        return time_records_csv(self.filtered())
