"""
Portaria - Visitors API
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query, status

from portaria.schemas import VisitorCreate
from portaria.services import FrontDesk
from .deps import require_operator, dump, written, find_or_404, apply_filters, add_delete_routes

router = APIRouter(prefix="/visitors", tags=["Visitors"])


@router.get("")
async def list_visitors(
    search: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    day: Optional[str] = Query(None, pattern=r"^(\d{4}-\d{2}-\d{2})?$"),
    desk: FrontDesk = Depends(require_operator)
):
    """Lista visitantes (filtro: todos | no_condominio | saiu; dia YYYY-MM-DD)"""
    apply_filters(desk.visitors, search=search, status_filter=status_filter, day=day)
    return {"items": dump(desk.visitors.filtered()), "stats": desk.visitors.stats()}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_visitor(payload: VisitorCreate, desk: FrontDesk = Depends(require_operator)):
    """Registra entrada de visitante"""
    return written(await desk.visitors.create(payload), desk)


@router.post("/{item_id}/exit")
async def register_exit(item_id: str, desk: FrontDesk = Depends(require_operator)):
    """Registra saida"""
    find_or_404(desk.visitors, item_id)
    return written(await desk.visitors.register_exit(item_id), desk)


add_delete_routes(router, "visitors")
