"""
Gateway SQL sobre sqlite temporario
"""
from datetime import datetime

import pytest

from portaria.database import build_engine, init_db
from portaria.gateway import GatewayError, GatewayReadError
from portaria.gateway.sql import SqlGateway


@pytest.fixture
async def sql_gateway(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'portaria.db'}")
    await init_db(engine)
    gateway = SqlGateway(engine)
    yield gateway
    await gateway.close()


class TestSqlGateway:

    async def test_insert_devolve_a_linha(self, sql_gateway):
        [row] = await sql_gateway.table("residents").insert(
            {"name": "Maria", "unit": "101", "block": "A"}
        ).execute()
        assert row["name"] == "Maria"
        assert len(row["id"]) == 36
        assert row["created_at"] is not None

    async def test_select_ordenado(self, sql_gateway):
        packages = sql_gateway.table("packages")
        await packages.insert({"unit": "101", "recipient_name": "Antigo",
                               "created_at": datetime(2025, 1, 1)}).execute()
        await sql_gateway.table("packages").insert({"unit": "102", "recipient_name": "Novo",
                                                    "created_at": datetime(2025, 2, 1)}).execute()

        rows = await sql_gateway.table("packages").select().order("created_at", desc=True).execute()
        assert [r["recipient_name"] for r in rows] == ["Novo", "Antigo"]

    async def test_update_com_in_e_delete_com_neq(self, sql_gateway):
        ids = []
        for unit in ("101", "102", "103"):
            [row] = await sql_gateway.table("packages").insert(
                {"unit": unit, "recipient_name": "X", "status": "Aguardando Retirada"}
            ).execute()
            ids.append(row["id"])

        await sql_gateway.table("packages").update({"status": "Retirada"}).in_("id", ids[:2]).execute()
        rows = await sql_gateway.table("packages").select().eq("status", "Retirada").execute()
        assert sorted(r["id"] for r in rows) == sorted(ids[:2])

        await sql_gateway.table("packages").delete().neq("id", ids[2]).execute()
        rows = await sql_gateway.table("packages").select().execute()
        assert [r["id"] for r in rows] == [ids[2]]

    async def test_escrita_sem_filtro_recusada(self, sql_gateway):
        with pytest.raises(ValueError):
            await sql_gateway.table("packages").delete().execute()

    async def test_tabela_desconhecida(self, sql_gateway):
        with pytest.raises(GatewayError):
            await sql_gateway.table("garagem").select().execute()

    async def test_coluna_desconhecida_vira_erro_de_leitura(self, sql_gateway):
        with pytest.raises(GatewayReadError):
            await sql_gateway.table("residents").select().eq("apelido", "x").execute()
