"""
Portaria - Companies API
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query, status

from portaria.schemas import CompanyInput
from portaria.services import FrontDesk
from .deps import require_operator, dump, written, find_or_404, apply_filters, add_delete_routes

router = APIRouter(prefix="/companies", tags=["Companies"])


@router.get("")
async def list_companies(
    search: Optional[str] = Query(None),
    desk: FrontDesk = Depends(require_operator)
):
    apply_filters(desk.companies, search=search)
    return {"items": dump(desk.companies.filtered())}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_company(payload: CompanyInput, desk: FrontDesk = Depends(require_operator)):
    desk.companies.start_edit(None)
    return written(await desk.companies.save(payload), desk)


@router.put("/{item_id}")
async def update_company(item_id: str, payload: CompanyInput, desk: FrontDesk = Depends(require_operator)):
    find_or_404(desk.companies, item_id)
    desk.companies.start_edit(item_id)
    return written(await desk.companies.save(payload), desk)


add_delete_routes(router, "companies")
