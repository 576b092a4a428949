"""
Portaria - Delivery Controllers
Entregadores e visitas de entregadores.

company_name / driver_name sao copiados no momento da gravacao e nao
acompanham renomeacoes posteriores.
"""
from typing import Optional

from portaria.core.timestamps import long_stamp, iso_day
from portaria.models.delivery import DriverStatus
from portaria.services.collections import COLLECTIONS, Collection
from portaria.services.exports import delivery_visits_pdf
from .base import CrudController

UNKNOWN_COMPANY = "N/A"


def company_name_for(store, company_id: str) -> str:
    company = next((c for c in store.snapshot(Collection.COMPANIES) if c.id == company_id), None)
    return company.name if company else UNKNOWN_COMPANY


class DeliveryDriversController(CrudController):
    collection = Collection.DELIVERY_DRIVERS
    search_fields = ("name", "company_name", "cpf", "rg")
    status_filters = {status.value: status for status in DriverStatus}
    save_error = "Erro ao salvar entregador"

    async def save(self, data, **overrides) -> bool:
        return await super().save(
            data, company_name=company_name_for(self.store, data.company_id), **overrides
        )


class DeliveryVisitsController(CrudController):
    collection = Collection.DELIVERY_VISITS
    # Visitas exibem dados do entregador: recarrega as duas colecoes
    refresh_scopes = (Collection.DELIVERY_VISITS, Collection.DELIVERY_DRIVERS)
    search_fields = ("driver_name", "company_name", "observations")
    day_field = "entry_time"
    save_error = "Erro ao salvar visita"
    driver_error = "Erro ao salvar entregador"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # None = hoje, resolvido a cada leitura
        self.selected_day = None

    def active_day(self) -> str:
        if self.selected_day is None:
            return iso_day(self.clock())
        return self.selected_day

    def day_stats(self) -> dict:
        """Totais do dia selecionado (ignora a busca)"""
        visits = [v for v in self.items if self.matches_day(v)]
        return {
            "visits": len(visits),
            "packages": sum(v.package_count or 0 for v in visits),
        }

    async def save(self, data, **overrides) -> bool:
        if self.editing_id:
            ok = await self.update(self.editing_id, data, **overrides)
        else:
            ok = await self.create(data, entry_time=long_stamp(self.clock()), **overrides)
        if ok:
            self.editing_id = None
        return ok

    async def save_driver(self, data, driver_id: Optional[str] = None) -> bool:
        """Cadastro/edicao de entregador direto da tela de visitas"""
        spec = COLLECTIONS[Collection.DELIVERY_DRIVERS]
        row = spec.write_row(data, company_name=company_name_for(self.store, data.company_id))
        builder = self.gateway.table(spec.table)
        if driver_id:
            builder = builder.update(row).eq("id", driver_id)
        else:
            builder = builder.insert(row)
        return await self._write(builder, self.driver_error)

    def print_report(self) -> bytes:
        return delivery_visits_pdf(self.filtered(), self.active_day(), self.day_stats())
