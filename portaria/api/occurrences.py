"""
Portaria - Occurrences API
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query, status

from portaria.schemas import OccurrenceCreate
from portaria.services import FrontDesk
from .deps import require_operator, dump, written, find_or_404, apply_filters, add_delete_routes

router = APIRouter(prefix="/occurrences", tags=["Occurrences"])


@router.get("")
async def list_occurrences(
    search: Optional[str] = Query(None),
    desk: FrontDesk = Depends(require_operator)
):
    apply_filters(desk.occurrences, search=search)
    return {"items": dump(desk.occurrences.filtered())}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_occurrence(payload: OccurrenceCreate, desk: FrontDesk = Depends(require_operator)):
    """Registra ocorrencia de passagem de turno"""
    return written(await desk.occurrences.create(payload), desk)


@router.get("/{item_id}")
async def get_occurrence(item_id: str, desk: FrontDesk = Depends(require_operator)):
    return find_or_404(desk.occurrences, item_id).model_dump(by_alias=True, mode="json")


add_delete_routes(router, "occurrences")
