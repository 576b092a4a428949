"""
Gateway REST (PostgREST) com transporte httpx simulado
"""
import json

import httpx
import pytest

from portaria.gateway import GatewayReadError, GatewayWriteError, QueryBuilder
from portaria.gateway.rest import RestGateway, build_params


def _gateway(handler):
    return RestGateway(
        "https://exemplo.supabase.co/", "chave-anon",
        transport=httpx.MockTransport(handler)
    )


class TestParametros:

    def test_select_com_filtros_e_ordem(self):
        query = QueryBuilder(None, "packages").select().eq("status", "Retirada").order("created_at", desc=True).query
        assert build_params(query) == [
            ("select", "*"),
            ("status", "eq.Retirada"),
            ("order", "created_at.desc"),
        ]

    def test_in_e_neq(self):
        query = QueryBuilder(None, "time_records").update({"x": 1}).in_("id", ["a", "b"]).neq("id", "z").query
        assert build_params(query) == [("id", 'in.("a","b")'), ("id", "neq.z")]


class TestRestGateway:

    async def test_select(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=[{"id": "p1", "unit": "101"}])

        gateway = _gateway(handler)
        rows = await gateway.table("packages").select().order("created_at", desc=True).execute()
        await gateway.close()

        assert rows == [{"id": "p1", "unit": "101"}]
        [request] = seen
        assert request.method == "GET"
        assert request.url.path == "/rest/v1/packages"
        assert request.url.params["order"] == "created_at.desc"
        assert request.headers["apikey"] == "chave-anon"
        assert request.headers["authorization"] == "Bearer chave-anon"

    async def test_insert_pede_representacao(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(201, json=[{"id": "r1", **json.loads(request.content)}])

        gateway = _gateway(handler)
        rows = await gateway.table("residents").insert({"name": "Maria"}).execute()
        await gateway.close()

        assert rows[0]["name"] == "Maria"
        assert seen[0].method == "POST"
        assert seen[0].headers["prefer"] == "return=representation"

    async def test_update_sem_corpo(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(204)

        gateway = _gateway(handler)
        rows = await gateway.table("packages").update({"status": "Retirada"}).in_("id", ["a", "b"]).execute()
        await gateway.close()

        assert rows == []
        assert seen[0].method == "PATCH"
        assert seen[0].url.params["id"] == 'in.("a","b")'

    async def test_erro_http_na_leitura(self):
        gateway = _gateway(lambda request: httpx.Response(500, text="boom"))
        with pytest.raises(GatewayReadError) as exc:
            await gateway.table("visitors").select().execute()
        await gateway.close()
        assert exc.value.table == "visitors"

    async def test_falha_de_conexao_na_escrita(self):
        def handler(request):
            raise httpx.ConnectError("sem rede", request=request)

        gateway = _gateway(handler)
        with pytest.raises(GatewayWriteError):
            await gateway.table("visitors").delete().eq("id", "v1").execute()
        await gateway.close()
