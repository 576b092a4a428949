"""
Portaria - Session API
Login de turno, navegacao, menu lateral e bloco de notas
"""
from fastapi import APIRouter, Depends, HTTPException, Request, status
from slowapi import Limiter
from slowapi.util import get_remote_address

from portaria.core import settings
from portaria.core.constants import MENU_ITEMS
from portaria.schemas import LoginRequest, NavigateRequest, OccurrenceCreate
from portaria.services import FrontDesk
from .deps import get_desk, require_operator, written

router = APIRouter(prefix="/session", tags=["Session"])

limiter = Limiter(key_func=get_remote_address)


@router.get("")
async def get_session(desk: FrontDesk = Depends(get_desk)):
    """Estado da sessao (identidade, pagina ativa, menu, bloco de notas)"""
    return {
        **desk.session.state(),
        "is_loading": desk.store.is_loading,
        "menu": MENU_ITEMS,
    }


@router.post("/login")
@limiter.limit(settings.LOGIN_RATE_LIMIT)
async def login(request: Request, payload: LoginRequest, desk: FrontDesk = Depends(get_desk)):
    """Inicia o turno com o nome do funcionario"""
    try:
        user = desk.session.login(payload.name)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return {"user": user}


@router.post("/logout/request")
async def request_logout(desk: FrontDesk = Depends(require_operator)):
    desk.session.request_logout()
    return desk.session.state()


@router.post("/logout/cancel")
async def cancel_logout(desk: FrontDesk = Depends(get_desk)):
    desk.session.cancel_logout()
    return desk.session.state()


@router.post("/logout/confirm")
async def confirm_logout(desk: FrontDesk = Depends(require_operator)):
    desk.session.confirm_logout()
    return desk.session.state()


@router.post("/navigate")
async def navigate(payload: NavigateRequest, desk: FrontDesk = Depends(require_operator)):
    try:
        desk.session.navigate(payload.page)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return desk.session.state()


@router.post("/sidebar/{action}")
async def sidebar(action: str, desk: FrontDesk = Depends(require_operator)):
    actions = {
        "open": desk.session.open_sidebar,
        "close": desk.session.close_sidebar,
        "toggle": desk.session.toggle_sidebar,
    }
    if action not in actions:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Acao desconhecida")
    actions[action]()
    return desk.session.state()


@router.post("/notepad/{action}")
async def notepad(action: str, desk: FrontDesk = Depends(require_operator)):
    actions = {
        "open": desk.session.open_notepad,
        "minimize": desk.session.minimize_notepad,
        "maximize": desk.session.maximize_notepad,
        "close": desk.session.close_notepad,
    }
    if action not in actions:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Acao desconhecida")
    actions[action]()
    return desk.session.state()


@router.post("/notepad")
async def save_notepad(payload: OccurrenceCreate, desk: FrontDesk = Depends(require_operator)):
    """Salva a anotacao do bloco de notas como ocorrencia"""
    result = written(await desk.session.save_notepad(payload), desk)
    return {**result, "active_page": desk.session.active_page}
