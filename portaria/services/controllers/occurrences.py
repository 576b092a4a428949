"""
Portaria - Occurrences Controller
Ocorrencias de passagem de turno
"""
from portaria.core.timestamps import occurrence_stamp
from portaria.services.collections import Collection
from .base import CrudController


class OccurrencesController(CrudController):
    collection = Collection.OCCURRENCES
    search_fields = ("description", "outgoing_employee_name", "incoming_employee_name")
    save_error = "Erro ao registrar ocorrência"

    async def create(self, data, **overrides) -> bool:
        return await super().create(data, timestamp=occurrence_stamp(self.clock()), **overrides)
