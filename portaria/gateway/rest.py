"""
Portaria - REST Gateway
Executa as consultas contra um backend hospedado compativel com PostgREST
(/rest/v1/<tabela>, filtros "eq." / "neq." / "in.()", order=coluna.desc)
"""
import logging
from typing import Any, Dict, List, Optional

import httpx

from .base import CollectionGateway, Query, GatewayError, GatewayReadError, GatewayWriteError

logger = logging.getLogger(__name__)


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_params(query: Query) -> List[tuple]:
    """Converte filtros e ordenacao em query-string do PostgREST"""
    params = []
    if query.is_read:
        params.append(("select", "*"))
    for column, op, value in query.filters:
        if op == "in":
            joined = ",".join(f'"{_format_value(v)}"' for v in value)
            params.append((column, f"in.({joined})"))
        elif op in ("eq", "neq"):
            params.append((column, f"{op}.{_format_value(value)}"))
        else:
            raise GatewayError(f"Operador nao suportado: {op}", table=query.table)
    if query.order_by:
        column, desc = query.order_by
        params.append(("order", f"{column}.{'desc' if desc else 'asc'}"))
    return params


class RestGateway(CollectionGateway):
    """Gateway HTTP (httpx) para o backend hospedado"""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.client = httpx.AsyncClient(
            base_url=f"{base_url.rstrip('/')}/rest/v1",
            headers={
                "apikey": api_key,
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    async def run(self, query: Query) -> List[Dict[str, Any]]:
        path = f"/{query.table}"
        params = build_params(query)
        error_cls = GatewayReadError if query.is_read else GatewayWriteError

        try:
            if query.operation == "select":
                response = await self.client.get(path, params=params)
            elif query.operation == "insert":
                response = await self.client.post(
                    path,
                    json=query.values,
                    headers={"Prefer": "return=representation"}
                )
            elif query.operation == "update":
                response = await self.client.patch(path, params=params, json=query.values)
            elif query.operation == "delete":
                response = await self.client.delete(path, params=params)
            else:
                raise GatewayError(f"Operacao nao suportada: {query.operation}", table=query.table)

            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            detail = e.response.text[:200]
            raise error_cls(
                f"Backend respondeu {e.response.status_code} ({query.operation} {query.table}): {detail}",
                table=query.table
            ) from e
        except httpx.HTTPError as e:
            raise error_cls(f"Falha de conexao ({query.operation} {query.table}): {e}", table=query.table) from e

        if not response.content:
            return []
        data = response.json()
        return data if isinstance(data, list) else [data]

    async def close(self):
        await self.client.aclose()
