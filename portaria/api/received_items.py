"""
Portaria - Received Items API
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query, status

from portaria.schemas import ReceivedItemCreate, PickupRequest
from portaria.services import FrontDesk
from portaria.services.translators import strip_received_code
from .deps import require_operator, dump, written, find_or_404, apply_filters, add_delete_routes

router = APIRouter(prefix="/received-items", tags=["Received Items"])


@router.get("")
async def list_received_items(
    search: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    desk: FrontDesk = Depends(require_operator)
):
    """Lista itens recebidos (filtro: todos | pendentes | retiradas)"""
    controller = desk.received_items
    apply_filters(controller, search=search, status_filter=status_filter)
    items = controller.filtered()
    rows = dump(items)
    for row, item in zip(rows, items):
        row["displayObservations"] = strip_received_code(item.observations)
    return {"items": rows, "stats": controller.stats()}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_received_item(payload: ReceivedItemCreate, desk: FrontDesk = Depends(require_operator)):
    """Registra item deixado na portaria"""
    return written(await desk.received_items.create(payload), desk)


@router.post("/{item_id}/pickup")
async def pickup_received_item(item_id: str, payload: PickupRequest, desk: FrontDesk = Depends(require_operator)):
    find_or_404(desk.received_items, item_id)
    return written(await desk.received_items.pickup(item_id, payload.name), desk)


add_delete_routes(router, "received_items")
