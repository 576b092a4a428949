"""
Portaria - SQL Gateway
Executa as consultas do gateway via SQLAlchemy assincrono
"""
import logging
import uuid
from typing import Any, Dict, List

from sqlalchemy import select, insert, update, delete, Table
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from portaria.database import Base, build_engine
from .base import CollectionGateway, Query, GatewayError, GatewayReadError, GatewayWriteError

logger = logging.getLogger(__name__)


class SqlGateway(CollectionGateway):
    """Gateway sobre as tabelas declaradas em portaria.models"""

    def __init__(self, engine: AsyncEngine = None):
        import portaria.models  # noqa: F401  (registra as tabelas)

        self.engine = engine or build_engine()

    def _table(self, name: str) -> Table:
        table = Base.metadata.tables.get(name)
        if table is None:
            raise GatewayError(f"Tabela desconhecida: {name}", table=name)
        return table

    def _where(self, stmt, table: Table, query: Query):
        for column, op, value in query.filters:
            col = table.c[column]
            if op == "eq":
                stmt = stmt.where(col == value)
            elif op == "neq":
                stmt = stmt.where(col != value)
            elif op == "in":
                stmt = stmt.where(col.in_(value))
            else:
                raise GatewayError(f"Operador nao suportado: {op}", table=table.name)
        return stmt

    async def run(self, query: Query) -> List[Dict[str, Any]]:
        table = self._table(query.table)
        error_cls = GatewayReadError if query.is_read else GatewayWriteError

        try:
            async with self.engine.begin() as conn:
                if query.operation == "select":
                    stmt = self._where(select(table), table, query)
                    if query.order_by:
                        column, desc = query.order_by
                        col = table.c[column]
                        stmt = stmt.order_by(col.desc() if desc else col.asc())
                    result = await conn.execute(stmt)
                    return [dict(row) for row in result.mappings().all()]

                if query.operation == "insert":
                    row = dict(query.values or {})
                    row.setdefault("id", str(uuid.uuid4()))
                    await conn.execute(insert(table).values(**row))
                    result = await conn.execute(select(table).where(table.c.id == row["id"]))
                    return [dict(r) for r in result.mappings().all()]

                if query.operation == "update":
                    stmt = self._where(update(table).values(**(query.values or {})), table, query)
                    result = await conn.execute(stmt)
                    logger.debug(f"{query.table}: {result.rowcount} linha(s) atualizada(s)")
                    return []

                if query.operation == "delete":
                    stmt = self._where(delete(table), table, query)
                    result = await conn.execute(stmt)
                    logger.debug(f"{query.table}: {result.rowcount} linha(s) removida(s)")
                    return []

                raise GatewayError(f"Operacao nao suportada: {query.operation}", table=query.table)
        except KeyError as e:
            raise error_cls(f"Coluna desconhecida em {query.table}: {e}", table=query.table) from e
        except SQLAlchemyError as e:
            raise error_cls(f"Erro no banco ({query.operation} {query.table}): {e}", table=query.table) from e

    async def close(self):
        await self.engine.dispose()
