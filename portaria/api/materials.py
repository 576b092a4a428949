"""
Portaria - Materials API
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query, status

from portaria.schemas import MaterialCreate
from portaria.services import FrontDesk
from .deps import require_operator, dump, written, find_or_404, apply_filters, add_delete_routes

router = APIRouter(prefix="/materials", tags=["Materials"])


@router.get("")
async def list_materials(
    search: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    day: Optional[str] = Query(None, pattern=r"^(\d{4}-\d{2}-\d{2})?$"),
    desk: FrontDesk = Depends(require_operator)
):
    """Lista emprestimos (filtro: todos | emprestados | devolvidos; dia YYYY-MM-DD)"""
    apply_filters(desk.materials, search=search, status_filter=status_filter, day=day)
    return {"items": dump(desk.materials.filtered()), "stats": desk.materials.stats()}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_material(payload: MaterialCreate, desk: FrontDesk = Depends(require_operator)):
    """Registra emprestimo"""
    return written(await desk.materials.create(payload), desk)


@router.post("/{item_id}/return")
async def return_material(item_id: str, desk: FrontDesk = Depends(require_operator)):
    """Registra devolucao"""
    find_or_404(desk.materials, item_id)
    return written(await desk.materials.return_material(item_id), desk)


add_delete_routes(router, "materials")
