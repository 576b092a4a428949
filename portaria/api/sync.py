"""
Portaria - Sync API
Atualizacao das colecoes, estado de carga, dashboard e alertas
"""
from fastapi import APIRouter, Depends, HTTPException, status

from portaria.schemas import RefreshRequest
from portaria.services import FrontDesk, UnknownCollection
from .deps import get_desk, require_operator, dump

router = APIRouter(tags=["Sync"])


@router.post("/refresh")
async def refresh(payload: RefreshRequest, desk: FrontDesk = Depends(get_desk)):
    """Recarrega as colecoes pedidas ("all" = todas)"""
    try:
        ok = await desk.store.refresh(payload.scopes, background=payload.background)
    except UnknownCollection as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return {"success": ok}


@router.get("/state")
async def get_state(desk: FrontDesk = Depends(get_desk)):
    return {
        "is_loading": desk.store.is_loading,
        "loaded": sorted(c.value for c in desk.store.loaded),
    }


@router.get("/dashboard")
async def get_dashboard(desk: FrontDesk = Depends(require_operator)):
    summary = desk.dashboard()
    summary["recent_occurrences"] = dump(summary["recent_occurrences"])
    return summary


@router.get("/alerts")
async def get_alerts(desk: FrontDesk = Depends(get_desk)):
    """Alertas pendentes (a leitura esvazia a fila)"""
    return {"alerts": desk.alerts.drain()}
