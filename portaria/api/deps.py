"""
Portaria - API Dependencies
"""
from typing import Iterable, Optional
from fastapi import APIRouter, Depends, HTTPException, Request, status

from portaria.services import FrontDesk
from portaria.services.controllers import CrudController


def get_desk(request: Request) -> FrontDesk:
    """Dependency para obter a portaria montada no startup"""
    return request.app.state.desk


async def require_operator(desk: FrontDesk = Depends(get_desk)) -> FrontDesk:
    """Exige turno iniciado (login de turno)"""
    if not desk.session.is_authenticated:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Turno nao iniciado"
        )
    return desk


def dump(items: Iterable) -> list:
    return [item.model_dump(by_alias=True, mode="json") for item in items]


def written(ok: bool, desk: FrontDesk) -> dict:
    """
    Converte o resultado de uma escrita em resposta.
    Falha com alerta -> 502 com a mensagem do alerta.
    Falha sem alerta (referencia inexistente) -> operacao abandonada.
    """
    if ok:
        return {"success": True}
    message = desk.alerts.pop_last()
    if message:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=message)
    return {"success": False}


def find_or_404(controller: CrudController, item_id: str):
    item = controller.find(item_id)
    if item is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Registro nao encontrado"
        )
    return item


def apply_filters(
    controller: CrudController,
    search: Optional[str] = None,
    status_filter: Optional[str] = None,
    day: Optional[str] = None
):
    """Aplica os filtros vindos da query-string ao estado da pagina"""
    if search is not None:
        controller.search_term = search
    if status_filter is not None:
        try:
            controller.set_filter(status_filter)
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if day is not None:
        controller.selected_day = day


def add_delete_routes(router: APIRouter, attr: str):
    """Exclusao em duas etapas: pedido -> confirmacao (ou cancelamento)"""

    @router.post("/{item_id}/delete-request")
    async def request_delete(item_id: str, desk: FrontDesk = Depends(require_operator)):
        controller = getattr(desk, attr)
        controller.request_delete(item_id)
        return {"pending_delete_id": controller.pending_delete_id}

    @router.post("/delete-cancel")
    async def cancel_delete(desk: FrontDesk = Depends(require_operator)):
        getattr(desk, attr).cancel_delete()
        return {"pending_delete_id": None}

    @router.post("/delete-confirm")
    async def confirm_delete(desk: FrontDesk = Depends(require_operator)):
        controller = getattr(desk, attr)
        if not controller.pending_delete_id:
            return {"success": False}
        return written(await controller.confirm_delete(), desk)
