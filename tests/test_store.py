"""
Coordenador de atualizacao: lotes, escopos, indicador de carga e
descarte de respostas obsoletas.
"""
import asyncio

import pytest

from portaria.services import Collection, UnknownCollection


async def _wait_parked(gateway, table):
    for _ in range(50):
        if table in gateway.parked:
            return
        await asyncio.sleep(0)
    raise AssertionError(f"leitura de {table} nao ficou pendente")


@pytest.fixture
def seeded(gateway):
    gateway.seed("residents", [{"name": "Maria", "unit": "101", "block": "A"}])
    gateway.seed("packages", [
        {"unit": "101", "block": "A", "recipient_name": "Maria", "status": "Aguardando Retirada"},
        {"unit": "102", "block": "A", "recipient_name": "José", "status": "Retirada"},
    ])
    gateway.seed("visitors", [{"name": "Pedro", "unit": "101", "status": "no_condominio"}])
    return gateway


class TestCargaCompleta:

    async def test_carrega_todas_as_colecoes(self, store, seeded):
        assert await store.refresh() is True
        assert store.loaded == set(Collection)
        assert len(store.snapshot(Collection.PACKAGES)) == 2
        assert len(store.snapshot(Collection.RESIDENTS)) == 1
        assert store.snapshot(Collection.COMPANIES) == ()

    async def test_logs_ordenados_do_mais_recente(self, store, seeded):
        await store.refresh()
        names = [p.recipient_name for p in store.snapshot(Collection.PACKAGES)]
        assert names == ["José", "Maria"]

        orders = {q.table: q.order_by for q in seeded.reads()}
        assert orders["packages"] == ("created_at", True)
        assert orders["borrowed_materials"] == ("created_at", True)
        assert orders["residents"] is None

    async def test_escopo_desconhecido(self, store):
        with pytest.raises(UnknownCollection):
            await store.refresh(["garagem"])


class TestEscopo:

    async def test_atualizacao_restrita_mantem_demais_colecoes(self, store, seeded):
        await store.refresh()
        residents = store.snapshot(Collection.RESIDENTS)
        visitors = store.snapshot(Collection.VISITORS)

        seeded.seed("packages", [{"unit": "103", "recipient_name": "Ana"}])
        seeded.calls.clear()
        await store.refresh([Collection.PACKAGES], background=True)

        assert [q.table for q in seeded.reads()] == ["packages"]
        assert len(store.snapshot(Collection.PACKAGES)) == 3
        assert store.snapshot(Collection.RESIDENTS) is residents
        assert store.snapshot(Collection.VISITORS) is visitors

    async def test_escopos_duplicados_buscam_uma_vez(self, store, seeded):
        await store.refresh(["packages", Collection.PACKAGES, "residents"])
        assert sorted(q.table for q in seeded.reads()) == ["packages", "residents"]


class TestFalha:

    async def test_falha_descarta_o_lote_inteiro(self, store, seeded):
        await store.refresh()
        packages = store.snapshot(Collection.PACKAGES)

        seeded.seed("packages", [{"unit": "103", "recipient_name": "Ana"}])
        seeded.fail("select", "visitors")

        assert await store.refresh(["packages", "visitors"]) is False
        assert store.snapshot(Collection.PACKAGES) is packages
        assert store.is_loading is False

    async def test_ouvintes_nao_sao_notificados_na_falha(self, store, seeded):
        notified = []
        store.on_change(notified.append)
        seeded.fail("select", "residents")
        await store.refresh()
        assert notified == []


class TestIndicadorDeCarga:

    async def test_bloqueante_liga_o_indicador(self, store, seeded):
        release = seeded.hold("packages")
        task = asyncio.create_task(store.refresh(["packages"]))
        await _wait_parked(seeded, "packages")

        assert store.is_loading is True
        release.set()
        assert await task is True
        assert store.is_loading is False

    async def test_background_nao_liga_o_indicador(self, store, seeded):
        release = seeded.hold("packages")
        task = asyncio.create_task(store.refresh(["packages"], background=True))
        await _wait_parked(seeded, "packages")

        assert store.is_loading is False
        release.set()
        await task
        assert len(store.snapshot(Collection.PACKAGES)) == 2


class TestRespostaObsoleta:

    async def test_resposta_antiga_nao_sobrescreve_a_nova(self, store, seeded):
        release = seeded.hold("packages")
        slow = asyncio.create_task(store.refresh(["packages"], background=True))
        await _wait_parked(seeded, "packages")

        seeded.seed("packages", [{"unit": "103", "recipient_name": "Ana"}])
        assert await store.refresh(["packages"], background=True) is True
        assert len(store.snapshot(Collection.PACKAGES)) == 3

        release.set()
        await slow
        names = {p.recipient_name for p in store.snapshot(Collection.PACKAGES)}
        assert names == {"Maria", "José", "Ana"}

    async def test_lote_misto_aplica_apenas_a_parte_atual(self, store, seeded):
        release = seeded.hold("packages")
        slow = asyncio.create_task(store.refresh(["packages", "residents"], background=True))
        await _wait_parked(seeded, "packages")

        seeded.seed("packages", [{"unit": "103", "recipient_name": "Ana"}])
        await store.refresh(["packages"], background=True)

        release.set()
        await slow
        assert len(store.snapshot(Collection.PACKAGES)) == 3
        assert Collection.RESIDENTS in store.loaded


class TestFalhaConcorrente:

    async def test_falha_mais_nova_nao_invalida_resposta_anterior(self, store, seeded):
        release = seeded.hold("packages")
        slow = asyncio.create_task(store.refresh(["packages"], background=True))
        await _wait_parked(seeded, "packages")

        seeded.fail("select", "packages")
        assert await store.refresh(["packages"], background=True) is False
        seeded.failures.clear()

        release.set()
        assert await slow is True
        assert Collection.PACKAGES in store.loaded
        assert len(store.snapshot(Collection.PACKAGES)) == 2

    async def test_lote_espera_todas_as_leituras(self, store, seeded, caplog):
        release = seeded.hold("packages")
        seeded.fail("select", "visitors")
        seeded.fail("select", "residents")
        task = asyncio.create_task(store.refresh(["packages", "visitors", "residents"]))
        await _wait_parked(seeded, "packages")

        for _ in range(10):
            await asyncio.sleep(0)
        assert not task.done()
        assert store.is_loading is True

        release.set()
        assert await task is False
        assert store.is_loading is False
        assert store.snapshot(Collection.PACKAGES) == ()
        errors = [r for r in caplog.records if "[REFRESH] Erro" in r.getMessage()]
        assert len(errors) == 2

    async def test_lote_todo_obsoleto_nao_notifica(self, store, seeded):
        notified = []
        store.on_change(notified.append)

        release = seeded.hold("packages")
        slow = asyncio.create_task(store.refresh(["packages"], background=True))
        await _wait_parked(seeded, "packages")

        assert await store.refresh(["packages"], background=True) is True
        release.set()
        assert await slow is False
        assert notified == [[Collection.PACKAGES]]
