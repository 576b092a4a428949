"""
Portaria - Employees API
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query, status

from portaria.schemas import EmployeeInput
from portaria.services import FrontDesk
from .deps import require_operator, dump, written, find_or_404, apply_filters, add_delete_routes

router = APIRouter(prefix="/employees", tags=["Employees"])


@router.get("")
async def list_employees(
    search: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    desk: FrontDesk = Depends(require_operator)
):
    """Lista funcionarios (filtro: todos | ativo | inativo | ferias)"""
    apply_filters(desk.employees, search=search, status_filter=status_filter)
    return {"items": dump(desk.employees.filtered()), "stats": desk.employees.stats()}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_employee(payload: EmployeeInput, desk: FrontDesk = Depends(require_operator)):
    desk.employees.start_edit(None)
    return written(await desk.employees.save(payload), desk)


@router.put("/{item_id}")
async def update_employee(item_id: str, payload: EmployeeInput, desk: FrontDesk = Depends(require_operator)):
    find_or_404(desk.employees, item_id)
    desk.employees.start_edit(item_id)
    return written(await desk.employees.save(payload), desk)


add_delete_routes(router, "employees")
