"""
Portaria - Session Shell
Login de turno (qualquer nome e aceito como identidade), navegacao entre
paginas, menu lateral e bloco de notas flutuante.

Estados: nao autenticado -> autenticado (login grava a identidade no
armazenamento local) -> nao autenticado (logout confirmado apaga).
"""
import json
import logging
from pathlib import Path
from typing import Optional

from portaria.core.constants import (
    CURRENT_USER,
    DEFAULT_PAGE,
    NOTEPAD_TARGET_PAGE,
    ADMIN_NAME,
    ROLE_ADMIN,
    ROLE_OPERATOR,
    navigable_pages,
)

logger = logging.getLogger(__name__)


class LocalStorage:
    """Armazenamento chave/valor persistente em arquivo JSON (valores string)"""

    def __init__(self, path):
        self.path = Path(path)

    def _load(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Armazenamento local ilegivel ({self.path}): {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self, data: dict):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")

    def get(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set(self, key: str, value: str):
        data = self._load()
        data[key] = value
        self._save(data)

    def remove(self, key: str):
        data = self._load()
        if data.pop(key, None) is not None:
            self._save(data)


class SessionShell:

    def __init__(self, storage: LocalStorage, storage_key: str, occurrences=None):
        self.storage = storage
        self.storage_key = storage_key
        self.occurrences = occurrences

        self.current_user = dict(CURRENT_USER)
        self.is_authenticated = False
        self.active_page = DEFAULT_PAGE
        self.is_sidebar_open = False
        self.is_logout_modal_open = False
        self.is_notepad_open = False
        self.is_notepad_minimized = False

        self._restore()

    def _restore(self):
        raw = self.storage.get(self.storage_key)
        if not raw:
            return
        try:
            user = json.loads(raw)
        except ValueError:
            logger.warning("Identidade salva invalida; ignorando")
            return
        if isinstance(user, dict) and user.get("name"):
            self.current_user = {"name": user["name"], "role": user.get("role", ROLE_OPERATOR)}
            self.is_authenticated = True

    # ============================================
    # LOGIN / LOGOUT
    # ============================================

    def login(self, employee_name: str) -> dict:
        name = (employee_name or "").strip()
        if not name:
            raise ValueError("Nome do funcionario obrigatorio")
        user = {
            "name": name,
            "role": ROLE_ADMIN if name == ADMIN_NAME else ROLE_OPERATOR
        }
        self.current_user = user
        self.is_authenticated = True
        self.storage.set(self.storage_key, json.dumps(user, ensure_ascii=False))
        logger.info(f"Turno iniciado por {name} ({user['role']})")
        return user

    def request_logout(self):
        self.is_logout_modal_open = True

    def cancel_logout(self):
        self.is_logout_modal_open = False

    def confirm_logout(self):
        logger.info(f"Turno encerrado por {self.current_user.get('name')}")
        self.is_authenticated = False
        self.is_logout_modal_open = False
        self.is_sidebar_open = False
        self.active_page = DEFAULT_PAGE
        self.storage.remove(self.storage_key)

    # ============================================
    # NAVEGACAO
    # ============================================

    def navigate(self, page: str):
        if page not in navigable_pages():
            raise ValueError(f"Pagina desconhecida: {page}")
        self.active_page = page
        self.is_sidebar_open = False

    def open_sidebar(self):
        self.is_sidebar_open = True

    def close_sidebar(self):
        self.is_sidebar_open = False

    def toggle_sidebar(self):
        self.is_sidebar_open = not self.is_sidebar_open

    # ============================================
    # BLOCO DE NOTAS
    # ============================================

    def open_notepad(self):
        self.is_notepad_open = True
        self.is_notepad_minimized = False

    def minimize_notepad(self):
        self.is_notepad_minimized = True

    def maximize_notepad(self):
        self.is_notepad_minimized = False

    def close_notepad(self):
        self.is_notepad_open = False

    async def save_notepad(self, data) -> bool:
        """Salva a anotacao como ocorrencia e abre a pagina de ocorrencias"""
        ok = await self.occurrences.create(data)
        if ok:
            self.active_page = NOTEPAD_TARGET_PAGE
        return ok

    def state(self) -> dict:
        return {
            "user": dict(self.current_user),
            "is_authenticated": self.is_authenticated,
            "active_page": self.active_page,
            "is_sidebar_open": self.is_sidebar_open,
            "is_logout_modal_open": self.is_logout_modal_open,
            "notepad": {
                "is_open": self.is_notepad_open,
                "is_minimized": self.is_notepad_minimized,
            },
        }
