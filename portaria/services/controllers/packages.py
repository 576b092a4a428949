"""
Portaria - Packages Controller
Encomendas: filtro pendentes/retiradas, agrupamento por bloco/unidade,
retirada individual e retirada em lote de uma unidade.
"""
import logging
import re
from typing import Dict, List, Optional, Tuple

from portaria.core.timestamps import short_stamp
from portaria.models.package import PickupStatus
from portaria.services.collections import COLLECTIONS, Collection
from .base import CrudController

logger = logging.getLogger(__name__)

NO_BLOCK = "OUTROS"


def group_block(block: str) -> str:
    return block.upper() if block else NO_BLOCK


def natural_key(value: str):
    """"2" < "10" < "101A" (ordenacao numerica de unidades)"""
    return [int(part) if part.isdigit() else part.lower() for part in re.split(r"(\d+)", value or "")]


class PackagesController(CrudController):
    collection = Collection.PACKAGES
    search_fields = (
        "recipient_name", "unit", "block", "withdrawal_code",
        "tracking_code", "observations", "sender"
    )
    status_filters = {
        "pendentes": PickupStatus.AGUARDANDO,
        "retiradas": PickupStatus.RETIRADA,
    }
    default_filter = "pendentes"
    save_error = "Erro ao salvar encomenda"
    pickup_error = "Erro ao registrar retirada"
    resident_error = "Erro ao salvar morador"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.selected_group: Optional[Tuple[str, str]] = None

    def set_filter(self, name: str):
        super().set_filter(name)
        self.selected_group = None

    def stats(self) -> Dict[str, int]:
        return {
            "total": len(self.items),
            "pending": self.count_status(PickupStatus.AGUARDANDO),
            "picked_up": self.count_status(PickupStatus.RETIRADA),
        }

    # ============================================
    # AGRUPAMENTO POR BLOCO / UNIDADE
    # ============================================

    def grouped_pending(self) -> List[dict]:
        """Pendentes agrupadas por bloco e unidade (so na visao "pendentes" sem grupo aberto)"""
        if self.status_filter != "pendentes" or self.selected_group:
            return []

        blocks: Dict[str, list] = {}
        for pkg in self.filtered():
            blocks.setdefault(group_block(pkg.block), []).append(pkg)

        result = []
        for block_name in sorted(blocks):
            block_items = blocks[block_name]
            units: Dict[str, list] = {}
            for pkg in block_items:
                units.setdefault(pkg.unit, []).append(pkg)
            unit_groups = [
                {"unit": unit, "block": block_name, "count": len(items), "items": items}
                for unit, items in sorted(units.items(), key=lambda kv: natural_key(kv[0]))
            ]
            result.append({
                "block_name": block_name,
                "total_in_block": len(block_items),
                "unit_groups": unit_groups,
            })
        return result

    def select_group(self, unit: str, block: str):
        self.selected_group = (unit, group_block(block))

    def clear_group(self):
        self.selected_group = None

    def _in_group(self, pkg) -> bool:
        unit, block = self.selected_group
        return pkg.unit == unit and group_block(pkg.block) == block

    def displayed(self) -> list:
        items = self.filtered()
        if self.selected_group:
            return [pkg for pkg in items if self._in_group(pkg)]
        return items

    # ============================================
    # ESCRITA
    # ============================================

    async def create(self, data, **overrides) -> bool:
        received_at = data.received_at or short_stamp(self.clock())
        return await super().create(data, received_at=received_at, **overrides)

    def _pickup_values(self, name: str) -> dict:
        return {"picked_up_by": name, "picked_up_at": short_stamp(self.clock())}

    async def pickup(self, item_id: str, name: str) -> bool:
        return await self._transition(
            item_id, PickupStatus.RETIRADA, self._pickup_values(name), self.pickup_error
        )

    async def bulk_pickup(self, name: str) -> bool:
        """Retira todas as pendentes da unidade/bloco selecionados"""
        if not self.selected_group:
            return False
        ids = [
            pkg.id for pkg in self.items
            if self._in_group(pkg) and pkg.status == PickupStatus.AGUARDANDO
        ]
        if not ids:
            logger.info(f"Nenhuma encomenda pendente em {self.selected_group}")
            return False

        values = {"status": PickupStatus.RETIRADA.value, **self._pickup_values(name)}
        ok = await self._write(self.query().update(values).in_("id", ids), self.pickup_error)
        if ok:
            self.selected_group = None
        return ok

    async def create_resident(self, data) -> bool:
        """Cadastro rapido de morador a partir do formulario de encomenda"""
        spec = COLLECTIONS[Collection.RESIDENTS]
        builder = self.gateway.table(spec.table).insert(spec.write_row(data))
        return await self._write(builder, self.resident_error, scopes=(Collection.RESIDENTS,))
