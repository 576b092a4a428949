"""
Portaria - Base Controller
Padrao comum das paginas de cadastro/operacao:
busca + filtro de status (+ filtro por dia), criar/editar, transicao de status
e exclusao em duas etapas. Toda escrita vai direto ao gateway e depois pede
ao coordenador uma atualizacao em background apenas do escopo afetado.
"""
import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Sequence

from portaria.core.timestamps import matches_day
from portaria.gateway import CollectionGateway, GatewayError, QueryBuilder
from portaria.services.collections import COLLECTIONS, Collection, CollectionSpec
from portaria.services.store import CollectionStore

logger = logging.getLogger(__name__)

ALL_FILTER = "todos"


class AlertBox:
    """Fila de alertas exibidos ao usuario (equivalente ao alert() bloqueante)"""

    def __init__(self):
        self._messages: List[str] = []

    def push(self, message: str):
        self._messages.append(message)

    def pop_last(self) -> Optional[str]:
        return self._messages.pop() if self._messages else None

    def drain(self) -> List[str]:
        messages, self._messages = self._messages, []
        return messages

    def __len__(self):
        return len(self._messages)


class CrudController:
    collection: Collection
    # Escopos atualizados depois de uma escrita (padrao: a propria colecao)
    refresh_scopes: Sequence[Collection] = ()
    search_fields: Sequence[str] = ()
    # Nome do filtro -> status exigido
    status_filters: Dict[str, Any] = {}
    status_field = "status"
    default_filter = ALL_FILTER
    # Campo de data exibida usado no filtro por dia (None = sem filtro por dia)
    day_field: Optional[str] = None

    save_error = "Erro ao salvar"
    delete_error = "Erro ao excluir"

    def __init__(
        self,
        store: CollectionStore,
        gateway: CollectionGateway,
        alerts: AlertBox,
        clock: Callable[[], datetime] = datetime.now
    ):
        self.store = store
        self.gateway = gateway
        self.alerts = alerts
        self.clock = clock
        self.search_term = ""
        self.status_filter = self.default_filter
        self.selected_day = ""
        self.pending_delete_id: Optional[str] = None
        self.editing_id: Optional[str] = None

    @property
    def spec(self) -> CollectionSpec:
        return COLLECTIONS[self.collection]

    @property
    def items(self) -> tuple:
        return self.store.snapshot(self.collection)

    def find(self, item_id: str):
        return next((item for item in self.items if item.id == item_id), None)

    def query(self) -> QueryBuilder:
        return self.gateway.table(self.spec.table)

    # ============================================
    # FILTROS (predicados puros sobre o estado ja carregado)
    # ============================================

    def set_filter(self, name: str):
        if name != ALL_FILTER and name not in self.status_filters:
            raise ValueError(f"Filtro invalido: {name}")
        self.status_filter = name

    def matches_search(self, item) -> bool:
        term = self.search_term.strip().lower()
        if not term:
            return True
        return any(term in str(getattr(item, field, "") or "").lower() for field in self.search_fields)

    def matches_status(self, item) -> bool:
        if self.status_filter == ALL_FILTER:
            return True
        return getattr(item, self.status_field) == self.status_filters[self.status_filter]

    def active_day(self) -> str:
        """Dia efetivo do filtro (YYYY-MM-DD; vazio = todos os dias)"""
        return self.selected_day

    def matches_day(self, item) -> bool:
        if not self.day_field:
            return True
        return matches_day(getattr(item, self.day_field, ""), self.active_day())

    def filtered(self) -> list:
        return [
            item for item in self.items
            if self.matches_day(item) and self.matches_search(item) and self.matches_status(item)
        ]

    def count_status(self, status) -> int:
        return sum(1 for item in self.items if getattr(item, self.status_field) == status)

    def stats(self) -> Dict[str, int]:
        """Total e contagem por filtro de status"""
        counts = {"total": len(self.items)}
        for name, status in self.status_filters.items():
            counts[name] = self.count_status(status)
        return counts

    # ============================================
    # ESCRITA
    # ============================================

    async def refresh(self, scopes: Sequence[Collection] = None):
        scopes = scopes or self.refresh_scopes or (self.collection,)
        await self.store.refresh(scopes, background=True)

    async def _write(self, builder: QueryBuilder, error_message: str, scopes: Sequence[Collection] = None) -> bool:
        """
        Executa a escrita; em falha registra o erro e alerta o usuario.
        Nada e revertido localmente: o estado so muda apos a atualizacao.
        """
        try:
            await builder.execute()
        except GatewayError as e:
            logger.error(f"{self.collection.value}: {error_message}: {e}")
            self.alerts.push(error_message)
            return False
        await self.refresh(scopes)
        return True

    async def create(self, data, **overrides) -> bool:
        row = self.spec.write_row(data, **overrides)
        return await self._write(self.query().insert(row), self.save_error)

    async def update(self, item_id: str, data, **overrides) -> bool:
        row = self.spec.write_row(data, **overrides)
        return await self._write(self.query().update(row).eq("id", item_id), self.save_error)

    def start_edit(self, item_id: Optional[str] = None):
        """None = novo registro"""
        self.editing_id = item_id

    async def save(self, data, **overrides) -> bool:
        """Cria ou edita conforme editing_id"""
        if self.editing_id:
            ok = await self.update(self.editing_id, data, **overrides)
        else:
            ok = await self.create(data, **overrides)
        if ok:
            self.editing_id = None
        return ok

    async def _transition(self, item_id: str, target, values: Dict[str, Any], error_message: str) -> bool:
        """Transicao de status de mao unica (pendente -> concluido)"""
        item = self.find(item_id)
        if item is not None and getattr(item, self.status_field) == target:
            logger.warning(f"{self.collection.value} {item_id}: ja esta em '{target.value}'")
            return False
        values = {self.status_field: target.value, **values}
        return await self._write(self.query().update(values).eq("id", item_id), error_message)

    # ============================================
    # EXCLUSAO EM DUAS ETAPAS
    # ============================================

    def request_delete(self, item_id: str):
        self.pending_delete_id = item_id

    def cancel_delete(self):
        self.pending_delete_id = None

    async def confirm_delete(self) -> bool:
        item_id = self.pending_delete_id
        if not item_id:
            return False
        self.pending_delete_id = None
        return await self._write(self.query().delete().eq("id", item_id), self.delete_error)
