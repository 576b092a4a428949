"""
Portaria - Delivery API
Entregadores e visitas de entregadores
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query, Response, status

from portaria.schemas import DriverInput, VisitInput
from portaria.services import FrontDesk
from .deps import require_operator, dump, written, find_or_404, apply_filters, add_delete_routes

drivers_router = APIRouter(prefix="/delivery-drivers", tags=["Delivery Drivers"])
visits_router = APIRouter(prefix="/delivery-visits", tags=["Delivery Visits"])


# ============================================
# ENTREGADORES
# ============================================

@drivers_router.get("")
async def list_drivers(
    search: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    desk: FrontDesk = Depends(require_operator)
):
    """Lista entregadores (filtro: todos | ativo | inativo | bloqueado)"""
    apply_filters(desk.delivery_drivers, search=search, status_filter=status_filter)
    return {"items": dump(desk.delivery_drivers.filtered()), "stats": desk.delivery_drivers.stats()}


@drivers_router.post("", status_code=status.HTTP_201_CREATED)
async def create_driver(payload: DriverInput, desk: FrontDesk = Depends(require_operator)):
    desk.delivery_drivers.start_edit(None)
    return written(await desk.delivery_drivers.save(payload), desk)


@drivers_router.put("/{item_id}")
async def update_driver(item_id: str, payload: DriverInput, desk: FrontDesk = Depends(require_operator)):
    find_or_404(desk.delivery_drivers, item_id)
    desk.delivery_drivers.start_edit(item_id)
    return written(await desk.delivery_drivers.save(payload), desk)


add_delete_routes(drivers_router, "delivery_drivers")


# ============================================
# VISITAS
# ============================================

@visits_router.get("")
async def list_visits(
    search: Optional[str] = Query(None),
    day: Optional[str] = Query(None, pattern=r"^(\d{4}-\d{2}-\d{2})?$"),
    desk: FrontDesk = Depends(require_operator)
):
    """Lista visitas do dia selecionado (padrao: hoje)"""
    controller = desk.delivery_visits
    apply_filters(controller, search=search, day=day)
    return {
        "items": dump(controller.filtered()),
        "day": controller.active_day(),
        "stats": controller.day_stats(),
    }


@visits_router.get("/report.pdf")
async def print_report(desk: FrontDesk = Depends(require_operator)):
    """Relatorio para impressao das visitas filtradas"""
    pdf = desk.delivery_visits.print_report()
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": 'inline; filename="visitas_entregadores.pdf"'}
    )


@visits_router.post("", status_code=status.HTTP_201_CREATED)
async def create_visit(payload: VisitInput, desk: FrontDesk = Depends(require_operator)):
    desk.delivery_visits.start_edit(None)
    return written(await desk.delivery_visits.save(payload), desk)


@visits_router.put("/{item_id}")
async def update_visit(item_id: str, payload: VisitInput, desk: FrontDesk = Depends(require_operator)):
    find_or_404(desk.delivery_visits, item_id)
    desk.delivery_visits.start_edit(item_id)
    return written(await desk.delivery_visits.save(payload), desk)


@visits_router.post("/drivers", status_code=status.HTTP_201_CREATED)
async def create_driver_from_visits(payload: DriverInput, desk: FrontDesk = Depends(require_operator)):
    """Cadastra entregador direto da tela de visitas"""
    return written(await desk.delivery_visits.save_driver(payload), desk)


@visits_router.put("/drivers/{driver_id}")
async def update_driver_from_visits(driver_id: str, payload: DriverInput, desk: FrontDesk = Depends(require_operator)):
    find_or_404(desk.delivery_drivers, driver_id)
    return written(await desk.delivery_visits.save_driver(payload, driver_id=driver_id), desk)


add_delete_routes(visits_router, "delivery_visits")
