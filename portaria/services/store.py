"""
Portaria - Collection Store
Coordenador de atualizacao: unico ponto de (re)carga das colecoes.

- Busca em paralelo as colecoes pedidas e so aplica o resultado quando o
  lote inteiro termina (nenhuma pagina ve metade das colecoes atualizada).
- Modo bloqueante (carga inicial) liga o indicador is_loading; o modo
  background (depois de uma escrita) nao mexe no indicador.
- Falha em qualquer colecao: o lote inteiro e descartado e o estado anterior
  de todas as colecoes e mantido. Sem retry.
- Cada colecao tem um contador de geracao: uma resposta mais antiga que a
  ultima resposta aplicada para a mesma colecao e descartada. Uma requisicao
  mais nova que falhou nao invalida uma resposta anterior bem sucedida.
"""
import asyncio
import logging
from typing import Callable, Dict, Iterable, List, Set, Tuple

from portaria.gateway import CollectionGateway, GatewayError
from .collections import ALL_SCOPE, COLLECTIONS, Collection, CollectionSpec, resolve_scopes

logger = logging.getLogger(__name__)


class CollectionStore:
    """Dono unico das onze colecoes em memoria (um escritor, varios leitores)"""

    def __init__(self, gateway: CollectionGateway, registry: Dict[Collection, CollectionSpec] = None):
        self._gateway = gateway
        self._registry = registry or COLLECTIONS
        self._state: Dict[Collection, Tuple] = {c: () for c in Collection}
        self._generations: Dict[Collection, int] = {c: 0 for c in Collection}
        self._committed: Dict[Collection, int] = {c: 0 for c in Collection}
        self._blocking = 0
        self._loaded: Set[Collection] = set()
        self._listeners: List[Callable[[List[Collection]], None]] = []

    @property
    def is_loading(self) -> bool:
        return self._blocking > 0

    @property
    def loaded(self) -> Set[Collection]:
        return set(self._loaded)

    def snapshot(self, collection: Collection) -> Tuple:
        return self._state[Collection(collection)]

    def on_change(self, listener: Callable[[List[Collection]], None]):
        self._listeners.append(listener)

    async def _fetch(self, collection: Collection) -> Tuple:
        spec = self._registry[collection]
        builder = self._gateway.table(spec.table).select()
        if spec.order_desc:
            builder = builder.order("created_at", desc=True)
        rows = await builder.execute()
        logger.debug(f"[REFRESH] {collection.value}: {len(rows)} registro(s)")
        return tuple(spec.from_row(row) for row in rows)

    async def refresh(self, scopes: Iterable = (ALL_SCOPE,), background: bool = False) -> bool:
        """
        Recarrega as colecoes pedidas. Retorna True se alguma colecao do lote
        foi aplicada; False se a busca falhou (estado anterior preservado) ou
        se todas as respostas ja estavam obsoletas.
        """
        collections = resolve_scopes(scopes)
        if not collections:
            return True

        tickets = {}
        for collection in collections:
            self._generations[collection] += 1
            tickets[collection] = self._generations[collection]

        mode = "background" if background else "bloqueante"
        logger.info(f"[REFRESH] Atualizando ({mode}): {', '.join(c.value for c in collections)}")

        if not background:
            self._blocking += 1
        try:
            # Espera todas as leituras terminarem, mesmo com falha em alguma
            results = await asyncio.gather(
                *(self._fetch(c) for c in collections),
                return_exceptions=True
            )
        finally:
            if not background:
                self._blocking -= 1

        errors = [r for r in results if isinstance(r, BaseException)]
        for error in errors:
            if not isinstance(error, GatewayError):
                raise error
        if errors:
            for error in errors:
                logger.error(f"[REFRESH] Erro ao buscar dados: {error}")
            return False

        committed = []
        for collection, rows in zip(collections, results):
            if tickets[collection] <= self._committed[collection]:
                logger.debug(f"[REFRESH] Resposta obsoleta descartada: {collection.value}")
                continue
            self._state[collection] = rows
            self._committed[collection] = tickets[collection]
            self._loaded.add(collection)
            committed.append(collection)

        if not committed:
            return False
        for listener in self._listeners:
            listener(committed)
        return True
