"""
Portaria - Front Desk
Composicao da aplicacao: gateway, coordenador de atualizacao, controladores
das paginas, alertas e sessao do turno.
"""
import logging
from datetime import datetime
from typing import Callable

from portaria.core.config import Settings
from portaria.gateway import CollectionGateway
from .collections import ALL_SCOPE
from .store import CollectionStore
from .session import LocalStorage, SessionShell
from .dashboard import dashboard_summary
from .controllers import (
    AlertBox,
    ResidentsController,
    PackagesController,
    ReceivedItemsController,
    MaterialsController,
    VisitorsController,
    EmployeesController,
    OccurrencesController,
    TimeRecordsController,
    CompaniesController,
    DeliveryDriversController,
    DeliveryVisitsController,
)

logger = logging.getLogger(__name__)


class FrontDesk:

    def __init__(
        self,
        gateway: CollectionGateway,
        storage: LocalStorage,
        storage_key: str = "portaria_user",
        clock: Callable[[], datetime] = datetime.now
    ):
        self.gateway = gateway
        self.store = CollectionStore(gateway)
        self.alerts = AlertBox()

        args = (self.store, gateway, self.alerts, clock)
        self.residents = ResidentsController(*args)
        self.packages = PackagesController(*args)
        self.received_items = ReceivedItemsController(*args)
        self.materials = MaterialsController(*args)
        self.visitors = VisitorsController(*args)
        self.employees = EmployeesController(*args)
        self.occurrences = OccurrencesController(*args)
        self.time_records = TimeRecordsController(*args)
        self.companies = CompaniesController(*args)
        self.delivery_drivers = DeliveryDriversController(*args)
        self.delivery_visits = DeliveryVisitsController(*args)

        self.session = SessionShell(storage, storage_key, occurrences=self.occurrences)

    async def startup(self) -> bool:
        """Carga completa (bloqueante) ao montar"""
        return await self.store.refresh([ALL_SCOPE])

    def dashboard(self) -> dict:
        return dashboard_summary(self.store)

    async def close(self):
        await self.gateway.close()


def build_gateway(settings: Settings) -> CollectionGateway:
    if settings.GATEWAY_BACKEND == "rest":
        from portaria.gateway.rest import RestGateway

        if not settings.SUPABASE_URL or not settings.SUPABASE_KEY:
            raise RuntimeError("GATEWAY_BACKEND=rest exige SUPABASE_URL e SUPABASE_KEY")
        return RestGateway(settings.SUPABASE_URL, settings.SUPABASE_KEY, timeout=settings.GATEWAY_TIMEOUT)

    from portaria.gateway.sql import SqlGateway
    return SqlGateway()


def build_front_desk(settings: Settings, gateway: CollectionGateway = None) -> FrontDesk:
    gateway = gateway or build_gateway(settings)
    logger.info(f"Gateway de dados: {type(gateway).__name__}")
    return FrontDesk(
        gateway,
        LocalStorage(settings.STORAGE_PATH),
        storage_key=settings.SESSION_STORAGE_KEY
    )
