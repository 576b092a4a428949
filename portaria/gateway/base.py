"""
Portaria - Collection Gateway
Cliente generico de consulta sobre colecoes nomeadas:
select / insert / update / delete com filtros eq, in, neq e ordenacao.

Uso:
    rows = await gateway.table("packages").select().order("created_at", desc=True).execute()
    await gateway.table("packages").update({"status": "Retirada"}).in_("id", ids).execute()
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


class GatewayError(Exception):
    """Falha de comunicacao com o backend de dados"""

    def __init__(self, message: str, table: Optional[str] = None):
        super().__init__(message)
        self.table = table


class GatewayReadError(GatewayError):
    pass


class GatewayWriteError(GatewayError):
    pass


@dataclass
class Query:
    """Descricao de uma operacao sobre uma colecao"""
    table: str
    operation: str = "select"
    values: Optional[Dict[str, Any]] = None
    filters: List[Tuple[str, str, Any]] = field(default_factory=list)
    order_by: Optional[Tuple[str, bool]] = None

    @property
    def is_read(self) -> bool:
        return self.operation == "select"


class QueryBuilder:
    """Builder encadeavel no estilo do cliente do backend hospedado"""

    def __init__(self, gateway: "CollectionGateway", table: str):
        self._gateway = gateway
        self._query = Query(table=table)

    def select(self) -> "QueryBuilder":
        self._query.operation = "select"
        return self

    def insert(self, row: Dict[str, Any]) -> "QueryBuilder":
        self._query.operation = "insert"
        self._query.values = dict(row)
        return self

    def update(self, values: Dict[str, Any]) -> "QueryBuilder":
        self._query.operation = "update"
        self._query.values = dict(values)
        return self

    def delete(self) -> "QueryBuilder":
        self._query.operation = "delete"
        return self

    def eq(self, column: str, value: Any) -> "QueryBuilder":
        self._query.filters.append((column, "eq", value))
        return self

    def neq(self, column: str, value: Any) -> "QueryBuilder":
        self._query.filters.append((column, "neq", value))
        return self

    def in_(self, column: str, values) -> "QueryBuilder":
        self._query.filters.append((column, "in", list(values)))
        return self

    def order(self, column: str, desc: bool = False) -> "QueryBuilder":
        self._query.order_by = (column, desc)
        return self

    @property
    def query(self) -> Query:
        return self._query

    async def execute(self) -> List[Dict[str, Any]]:
        query = self._query
        if query.operation in ("update", "delete") and not query.filters:
            # Nunca atualiza/apaga a colecao inteira sem filtro explicito
            raise ValueError(f"{query.operation} em '{query.table}' exige ao menos um filtro")
        return await self._gateway.run(query)


class CollectionGateway:
    """Contrato dos backends (SQL local ou REST hospedado)"""

    def table(self, name: str) -> QueryBuilder:
        return QueryBuilder(self, name)

    async def run(self, query: Query) -> List[Dict[str, Any]]:
        raise NotImplementedError

    async def close(self):
        pass
