"""
Sessao do turno: identidade persistida, logout com confirmacao, navegacao,
menu lateral e bloco de notas.
"""
import json

import pytest

from portaria.schemas import OccurrenceCreate
from portaria.services import LocalStorage, SessionShell

KEY = "portaria_user"


class TestArmazenamentoLocal:

    def test_get_set_remove(self, storage):
        assert storage.get(KEY) is None
        storage.set(KEY, "valor")
        assert storage.get(KEY) == "valor"
        storage.remove(KEY)
        assert storage.get(KEY) is None

    def test_arquivo_corrompido_le_como_vazio(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text("{nao e json", encoding="utf-8")
        assert LocalStorage(path).get(KEY) is None


class TestLogin:

    def test_inicia_sem_identidade(self, storage):
        shell = SessionShell(storage, KEY)
        assert shell.is_authenticated is False
        assert shell.current_user == {"name": "Visitante", "role": "VISITANTE"}

    def test_login_persiste_e_restaura(self, storage):
        shell = SessionShell(storage, KEY)
        user = shell.login("  João ")
        assert user == {"name": "João", "role": "OPERADOR"}
        assert json.loads(storage.get(KEY)) == user

        restored = SessionShell(storage, KEY)
        assert restored.is_authenticated is True
        assert restored.current_user == user

    def test_administrador(self, storage):
        user = SessionShell(storage, KEY).login("Administrador")
        assert user["role"] == "ADMINISTRADOR"

    def test_nome_vazio_rejeitado(self, storage):
        shell = SessionShell(storage, KEY)
        with pytest.raises(ValueError):
            shell.login("   ")
        assert shell.is_authenticated is False

    def test_identidade_invalida_ignorada(self, storage):
        storage.set(KEY, "isso nao e json")
        assert SessionShell(storage, KEY).is_authenticated is False


class TestLogout:

    def test_fluxo_com_confirmacao(self, storage):
        shell = SessionShell(storage, KEY)
        shell.login("João")
        shell.navigate("visitantes")
        shell.open_sidebar()

        shell.request_logout()
        assert shell.is_logout_modal_open is True
        shell.cancel_logout()
        assert shell.is_logout_modal_open is False
        assert shell.is_authenticated is True

        shell.request_logout()
        shell.open_sidebar()
        shell.confirm_logout()
        assert shell.is_authenticated is False
        assert shell.is_logout_modal_open is False
        assert shell.is_sidebar_open is False
        assert shell.active_page == "dashboard"
        assert storage.get(KEY) is None


class TestNavegacao:

    def test_navegar_fecha_o_menu(self, storage):
        shell = SessionShell(storage, KEY)
        shell.toggle_sidebar()
        assert shell.is_sidebar_open is True
        shell.navigate("ponto")
        assert shell.active_page == "ponto"
        assert shell.is_sidebar_open is False

    def test_pagina_desconhecida(self, storage):
        shell = SessionShell(storage, KEY)
        with pytest.raises(ValueError):
            shell.navigate("cadastro")
        assert shell.active_page == "dashboard"


class TestBlocoDeNotas:

    def test_abrir_minimizar_maximizar(self, storage):
        shell = SessionShell(storage, KEY)
        shell.open_notepad()
        shell.minimize_notepad()
        assert shell.state()["notepad"] == {"is_open": True, "is_minimized": True}
        shell.open_notepad()
        assert shell.is_notepad_minimized is False
        shell.close_notepad()
        assert shell.is_notepad_open is False

    async def test_salvar_vira_ocorrencia(self, desk, gateway):
        await desk.startup()
        desk.session.login("Ana")
        data = OccurrenceCreate(
            outgoing_employee_name="Ana", incoming_employee_name="Bruno",
            description="Interfone do bloco B mudo"
        )
        assert await desk.session.save_notepad(data) is True
        assert desk.session.active_page == "ocorrencias"
        assert [o.description for o in desk.occurrences.items] == ["Interfone do bloco B mudo"]

    async def test_falha_mantem_a_pagina(self, desk, gateway):
        await desk.startup()
        gateway.fail("insert", "occurrences")
        data = OccurrenceCreate(
            outgoing_employee_name="Ana", incoming_employee_name="Bruno", description="x"
        )
        assert await desk.session.save_notepad(data) is False
        assert desk.session.active_page == "dashboard"
        assert desk.alerts.drain() == ["Erro ao registrar ocorrência"]
