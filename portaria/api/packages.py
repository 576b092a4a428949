"""
Portaria - Packages API
Encomendas, agrupamento por unidade e retirada em lote
"""
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status

from portaria.schemas import PackageCreate, PickupRequest, ResidentCreate, GroupSelect
from portaria.services import FrontDesk
from .deps import require_operator, dump, written, find_or_404, apply_filters, add_delete_routes

router = APIRouter(prefix="/packages", tags=["Packages"])


def _page(desk: FrontDesk) -> dict:
    controller = desk.packages
    group = controller.selected_group
    return {
        "items": dump(controller.displayed()),
        "stats": controller.stats(),
        "filter": controller.status_filter,
        "selected_group": {"unit": group[0], "block": group[1]} if group else None,
    }


@router.get("")
async def list_packages(
    search: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    desk: FrontDesk = Depends(require_operator)
):
    """Lista encomendas (filtro: todos | pendentes | retiradas)"""
    apply_filters(desk.packages, search=search, status_filter=status_filter)
    return _page(desk)


@router.get("/groups")
async def list_groups(desk: FrontDesk = Depends(require_operator)):
    """Pendentes agrupadas por bloco / unidade"""
    blocks = desk.packages.grouped_pending()
    for block in blocks:
        for group in block["unit_groups"]:
            group["items"] = dump(group["items"])
    return {"blocks": blocks}


@router.post("/groups/select")
async def select_group(payload: GroupSelect, desk: FrontDesk = Depends(require_operator)):
    desk.packages.select_group(payload.unit, payload.block)
    return _page(desk)


@router.post("/groups/clear")
async def clear_group(desk: FrontDesk = Depends(require_operator)):
    desk.packages.clear_group()
    return _page(desk)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_package(payload: PackageCreate, desk: FrontDesk = Depends(require_operator)):
    """Registra nova encomenda"""
    return written(await desk.packages.create(payload), desk)


@router.post("/residents", status_code=status.HTTP_201_CREATED)
async def create_resident_from_package(payload: ResidentCreate, desk: FrontDesk = Depends(require_operator)):
    """Cadastro rapido de morador durante o registro da encomenda"""
    return written(await desk.packages.create_resident(payload), desk)


@router.post("/bulk-pickup")
async def bulk_pickup(payload: PickupRequest, desk: FrontDesk = Depends(require_operator)):
    """Retira todas as pendentes da unidade selecionada"""
    if not desk.packages.selected_group:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Nenhuma unidade selecionada"
        )
    return written(await desk.packages.bulk_pickup(payload.name), desk)


@router.post("/{item_id}/pickup")
async def pickup_package(item_id: str, payload: PickupRequest, desk: FrontDesk = Depends(require_operator)):
    """Registra retirada"""
    find_or_404(desk.packages, item_id)
    return written(await desk.packages.pickup(item_id, payload.name), desk)


add_delete_routes(router, "packages")
