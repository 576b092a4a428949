"""
Portaria - Visitors Controller
"""
from portaria.core.timestamps import short_stamp
from portaria.models.visitor import VisitorStatus
from portaria.services.collections import Collection
from .base import CrudController


class VisitorsController(CrudController):
    collection = Collection.VISITORS
    search_fields = ("name", "document", "unit", "resident_name")
    status_filters = {
        "no_condominio": VisitorStatus.NO_CONDOMINIO,
        "saiu": VisitorStatus.SAIU,
    }
    day_field = "entry_time"
    save_error = "Erro ao registrar visitante"
    exit_error = "Erro ao registrar saída"

    async def create(self, data, **overrides) -> bool:
        return await super().create(
            data,
            entry_time=short_stamp(self.clock()),
            status=VisitorStatus.NO_CONDOMINIO.value,
            **overrides
        )

    async def register_exit(self, item_id: str) -> bool:
        values = {"exit_time": short_stamp(self.clock())}
        return await self._transition(item_id, VisitorStatus.SAIU, values, self.exit_error)
