"""
Fixtures compartilhadas: gateway em memoria, coordenador, portaria montada e
cliente HTTP.
"""
import asyncio
import itertools
import uuid
from collections import defaultdict
from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from portaria.gateway import CollectionGateway, GatewayReadError, GatewayWriteError
from portaria.services import CollectionStore, FrontDesk, LocalStorage

FIXED_NOW = datetime(2025, 3, 5, 14, 30)
BASE_CREATED_AT = datetime(2025, 1, 1, 8, 0)


def _matches(row, filters):
    for column, op, value in filters:
        current = row.get(column)
        if op == "eq" and current != value:
            return False
        if op == "neq" and current == value:
            return False
        if op == "in" and current not in value:
            return False
    return True


class InMemoryGateway(CollectionGateway):
    """
    Backend falso com o mesmo contrato dos gateways reais.
    Registra todas as consultas, permite simular falhas por (operacao, tabela)
    e segurar a proxima leitura de uma tabela ate um evento ser liberado.
    """

    def __init__(self):
        self.tables = defaultdict(list)
        self.calls = []
        self.failures = set()
        self.holds = {}
        self.parked = []
        self._ticks = itertools.count()

    def seed(self, table, rows):
        return [self._insert(table, row) for row in rows]

    def _insert(self, table, row):
        row = dict(row)
        row.setdefault("id", str(uuid.uuid4()))
        row.setdefault("created_at", BASE_CREATED_AT + timedelta(minutes=next(self._ticks)))
        self.tables[table].append(row)
        return dict(row)

    def fail(self, operation, table):
        self.failures.add((operation, table))

    def hold(self, table):
        """A proxima leitura de `table` captura os dados e espera o evento"""
        event = asyncio.Event()
        self.holds[table] = event
        return event

    def writes(self):
        return [q for q in self.calls if not q.is_read]

    def reads(self):
        return [q for q in self.calls if q.is_read]

    async def run(self, query):
        self.calls.append(query)
        if (query.operation, query.table) in self.failures:
            error_cls = GatewayReadError if query.is_read else GatewayWriteError
            raise error_cls(f"falha simulada: {query.operation} {query.table}", table=query.table)

        rows = self.tables[query.table]
        matched = [row for row in rows if _matches(row, query.filters)]

        if query.operation == "select":
            result = [dict(row) for row in matched]
            if query.order_by:
                column, desc = query.order_by
                result.sort(key=lambda r: r[column], reverse=desc)
            event = self.holds.pop(query.table, None)
            if event is not None:
                self.parked.append(query.table)
                await event.wait()
            return result

        if query.operation == "insert":
            return [self._insert(query.table, query.values)]

        if query.operation == "update":
            for row in matched:
                row.update(query.values)
            return []

        if query.operation == "delete":
            ids = {row["id"] for row in matched}
            self.tables[query.table] = [row for row in rows if row["id"] not in ids]
            return []

        raise ValueError(query.operation)


@pytest.fixture
def gateway():
    return InMemoryGateway()


@pytest.fixture
def store(gateway):
    return CollectionStore(gateway)


@pytest.fixture
def storage(tmp_path):
    return LocalStorage(tmp_path / "local_storage.json")


@pytest.fixture
def desk(gateway, storage):
    """Portaria montada com relogio fixo (05/03/2025 14:30)"""
    return FrontDesk(gateway, storage, clock=lambda: FIXED_NOW)


@pytest.fixture
def client(desk):
    """Cliente HTTP sem lifespan: a portaria do teste e injetada no app"""
    from portaria.main import app
    from portaria.api.session import limiter

    limiter.enabled = False
    app.state.desk = desk
    yield TestClient(app)
    limiter.enabled = True


@pytest.fixture
def logged_client(client, desk):
    desk.session.login("João")
    return client
