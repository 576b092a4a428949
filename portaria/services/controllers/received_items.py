"""
Portaria - Received Items Controller
Itens deixados na portaria. O codigo de recebimento e salvo dentro de
observations (a tabela nao tem coluna received_code).
"""
from portaria.core.timestamps import short_stamp
from portaria.models.package import PickupStatus
from portaria.services.collections import Collection
from .base import CrudController


class ReceivedItemsController(CrudController):
    collection = Collection.RECEIVED_ITEMS
    search_fields = ("description", "unit", "block", "left_by", "observations", "received_code")
    status_filters = {
        "pendentes": PickupStatus.AGUARDANDO,
        "retiradas": PickupStatus.RETIRADA,
    }
    save_error = "Erro ao registrar item. Verifique os dados."
    pickup_error = "Erro ao registrar retirada"

    def stats(self):
        return {
            "total": len(self.items),
            "pending": self.count_status(PickupStatus.AGUARDANDO),
            "picked_up": self.count_status(PickupStatus.RETIRADA),
        }

    async def create(self, data, **overrides) -> bool:
        return await super().create(
            data,
            received_at=short_stamp(self.clock()),
            status=PickupStatus.AGUARDANDO.value,
            **overrides
        )

    async def pickup(self, item_id: str, name: str) -> bool:
        values = {"picked_up_by": name, "picked_up_at": short_stamp(self.clock())}
        return await self._transition(item_id, PickupStatus.RETIRADA, values, self.pickup_error)
