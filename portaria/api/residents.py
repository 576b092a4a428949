"""
Portaria - Residents API
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query, status

from portaria.schemas import ResidentCreate
from portaria.services import FrontDesk
from .deps import require_operator, dump, written, find_or_404, apply_filters, add_delete_routes

router = APIRouter(prefix="/residents", tags=["Residents"])


@router.get("")
async def list_residents(
    search: Optional[str] = Query(None),
    desk: FrontDesk = Depends(require_operator)
):
    """Lista moradores"""
    apply_filters(desk.residents, search=search)
    items = desk.residents.filtered()
    return {"items": dump(items), "total": len(desk.residents.items)}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_resident(payload: ResidentCreate, desk: FrontDesk = Depends(require_operator)):
    """Cadastra morador"""
    return written(await desk.residents.create(payload), desk)


@router.put("/{item_id}")
async def update_resident(item_id: str, payload: ResidentCreate, desk: FrontDesk = Depends(require_operator)):
    """Atualiza morador"""
    find_or_404(desk.residents, item_id)
    desk.residents.start_edit(item_id)
    return written(await desk.residents.save(payload), desk)


add_delete_routes(router, "residents")
