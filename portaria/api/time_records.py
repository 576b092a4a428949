"""
Portaria - Time Records API
Folha de ponto
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query, Response, status

from portaria.schemas import TimeRecordInput
from portaria.services import FrontDesk
from .deps import require_operator, dump, written, find_or_404, apply_filters, add_delete_routes

router = APIRouter(prefix="/time-records", tags=["Time Records"])


@router.get("")
async def list_time_records(
    search: Optional[str] = Query(None),
    shift: Optional[str] = Query(None, pattern="^(todos|diurno|noturno)$"),
    employee_id: Optional[str] = Query(None),
    desk: FrontDesk = Depends(require_operator)
):
    """Lista registros de ponto (filtros: turno e funcionario)"""
    controller = desk.time_records
    apply_filters(controller, search=search)
    if shift is not None:
        controller.shift_filter = shift
    if employee_id is not None:
        controller.employee_filter = employee_id
    return {"items": dump(controller.filtered())}


@router.post("/filters/clear")
async def clear_filters(desk: FrontDesk = Depends(require_operator)):
    desk.time_records.clear_filters()
    return {"items": dump(desk.time_records.filtered())}


@router.get("/export.csv")
async def export_csv(desk: FrontDesk = Depends(require_operator)):
    """Exporta os registros filtrados"""
    content = desk.time_records.export_csv()
    return Response(
        content=content.encode("utf-8-sig"),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": 'attachment; filename="folha_de_ponto.csv"'}
    )


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_time_record(payload: TimeRecordInput, desk: FrontDesk = Depends(require_operator)):
    desk.time_records.start_edit(None)
    return written(await desk.time_records.save(payload), desk)


@router.put("/{item_id}")
async def update_time_record(item_id: str, payload: TimeRecordInput, desk: FrontDesk = Depends(require_operator)):
    find_or_404(desk.time_records, item_id)
    desk.time_records.start_edit(item_id)
    return written(await desk.time_records.save(payload), desk)


@router.delete("")
async def clear_all(desk: FrontDesk = Depends(require_operator)):
    """Apaga todos os registros de ponto"""
    return written(await desk.time_records.clear_all(), desk)


add_delete_routes(router, "time_records")
