"""
Portaria - Materials Controller
"""
from portaria.core.timestamps import short_stamp
from portaria.models.material import MaterialStatus
from portaria.services.collections import Collection
from .base import CrudController


class MaterialsController(CrudController):
    collection = Collection.MATERIALS
    search_fields = ("material_name", "borrower_name", "unit")
    status_filters = {
        "emprestados": MaterialStatus.EMPRESTADO,
        "devolvidos": MaterialStatus.DEVOLVIDO,
    }
    day_field = "loan_date"
    save_error = "Erro ao registrar empréstimo"
    return_error = "Erro ao registrar devolução"

    async def create(self, data, **overrides) -> bool:
        return await super().create(
            data,
            loan_date=short_stamp(self.clock()),
            status=MaterialStatus.EMPRESTADO.value,
            **overrides
        )

    async def return_material(self, item_id: str) -> bool:
        values = {"return_date": short_stamp(self.clock())}
        return await self._transition(item_id, MaterialStatus.DEVOLVIDO, values, self.return_error)
