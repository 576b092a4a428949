"""
API HTTP: sessao, colecoes e mapeamento de erros
"""
PENDING = "Aguardando Retirada"


class TestBasico:

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_headers_de_seguranca(self, client):
        response = client.get("/")
        assert response.headers["X-Frame-Options"] == "DENY"
        assert response.json()["service"] == "Portaria"

    def test_rotas_exigem_turno(self, client):
        assert client.get("/api/packages").status_code == 401
        assert client.get("/api/dashboard").status_code == 401


class TestSessao:

    def test_login_e_estado(self, client, desk):
        response = client.post("/api/session/login", json={"name": "João"})
        assert response.status_code == 200
        assert response.json()["user"] == {"name": "João", "role": "OPERADOR"}

        state = client.get("/api/session").json()
        assert state["is_authenticated"] is True
        assert state["active_page"] == "dashboard"
        assert state["menu"][0]["id"] == "dashboard"
        assert "Cache-Control" in client.get("/api/session").headers

    def test_login_sem_nome(self, client):
        assert client.post("/api/session/login", json={"name": ""}).status_code == 422

    def test_navegacao(self, logged_client):
        response = logged_client.post("/api/session/navigate", json={"page": "encomendas"})
        assert response.json()["active_page"] == "encomendas"
        assert logged_client.post("/api/session/navigate", json={"page": "xyz"}).status_code == 400

    def test_logout(self, logged_client, desk):
        logged_client.post("/api/session/logout/request")
        state = logged_client.post("/api/session/logout/confirm").json()
        assert state["is_authenticated"] is False
        assert logged_client.get("/api/packages").status_code == 401

    def test_menu_e_bloco_de_notas(self, logged_client):
        assert logged_client.post("/api/session/sidebar/toggle").json()["is_sidebar_open"] is True
        assert logged_client.post("/api/session/sidebar/fechar").status_code == 404

        logged_client.post("/api/session/notepad/open")
        response = logged_client.post("/api/session/notepad", json={
            "outgoingEmployeeName": "João", "incomingEmployeeName": "Ana",
            "description": "Lampada do hall queimada"
        })
        assert response.json() == {"success": True, "active_page": "ocorrencias"}


class TestEncomendas:

    def test_cadastro_e_listagem(self, logged_client):
        response = logged_client.post("/api/packages", json={
            "unit": "101", "block": "A", "recipientName": "Maria"
        })
        assert response.status_code == 201

        body = logged_client.get("/api/packages").json()
        assert body["stats"] == {"total": 1, "pending": 1, "picked_up": 0}
        [item] = body["items"]
        assert item["recipientName"] == "Maria"
        assert item["receivedAt"] == "05/03/25 14:30"

    def test_retirada_em_lote(self, logged_client, desk, gateway):
        gateway.seed("packages", [
            {"unit": "101", "block": "A", "recipient_name": "Maria", "status": PENDING},
            {"unit": "101", "block": "A", "recipient_name": "Maria", "status": PENDING},
        ])
        logged_client.post("/api/refresh", json={"scopes": ["packages"]})

        groups = logged_client.get("/api/packages/groups").json()["blocks"]
        assert groups[0]["unit_groups"][0]["count"] == 2

        assert logged_client.post("/api/packages/bulk-pickup", json={"name": "João"}).status_code == 400
        selected = logged_client.post("/api/packages/groups/select", json={"unit": "101", "block": "A"})
        assert len(selected.json()["items"]) == 2

        assert logged_client.post("/api/packages/bulk-pickup", json={"name": "João"}).json() == {"success": True}
        assert desk.packages.stats()["pending"] == 0

    def test_retirada_de_id_inexistente(self, logged_client):
        response = logged_client.post("/api/packages/nao-existe/pickup", json={"name": "João"})
        assert response.status_code == 404

    def test_falha_do_backend_vira_502(self, logged_client, gateway):
        gateway.fail("insert", "packages")
        response = logged_client.post("/api/packages", json={"unit": "101", "recipientName": "Maria"})
        assert response.status_code == 502
        assert response.json()["detail"] == "Erro ao salvar encomenda"

    def test_filtro_invalido(self, logged_client):
        assert logged_client.get("/api/packages", params={"status": "perdidas"}).status_code == 400


class TestExclusao:

    def test_duas_etapas(self, logged_client, desk, gateway):
        [row] = gateway.seed("residents", [{"name": "Maria", "unit": "101"}])
        logged_client.post("/api/refresh", json={"scopes": ["residents"]})

        response = logged_client.post(f"/api/residents/{row['id']}/delete-request")
        assert response.json() == {"pending_delete_id": row["id"]}
        assert logged_client.post("/api/residents/delete-confirm").json() == {"success": True}
        assert logged_client.post("/api/residents/delete-confirm").json() == {"success": False}
        assert logged_client.get("/api/residents").json()["items"] == []


class TestSincronizacao:

    def test_escopo_desconhecido(self, logged_client):
        response = logged_client.post("/api/refresh", json={"scopes": ["garagem"]})
        assert response.status_code == 400

    def test_estado_e_alertas(self, logged_client, desk):
        logged_client.post("/api/refresh", json={"scopes": ["all"]})
        state = logged_client.get("/api/state").json()
        assert state["is_loading"] is False
        assert "packages" in state["loaded"]

        desk.alerts.push("Erro de teste")
        assert logged_client.get("/api/alerts").json() == {"alerts": ["Erro de teste"]}
        assert logged_client.get("/api/alerts").json() == {"alerts": []}

    def test_dashboard(self, logged_client, gateway):
        gateway.seed("visitors", [{"name": "Pedro", "unit": "101", "status": "no_condominio"}])
        gateway.seed("occurrences", [{"description": "Portao aberto", "timestamp": "x"}])
        logged_client.post("/api/refresh", json={})

        summary = logged_client.get("/api/dashboard").json()
        assert summary["visitors_inside"] == 1
        assert summary["recent_occurrences"][0]["description"] == "Portao aberto"


class TestExportacoes:

    def test_csv_da_folha_de_ponto(self, logged_client, gateway):
        gateway.seed("time_records", [{"employee_name": "Ana", "date": "2025-03-05", "shift": "diurno"}])
        logged_client.post("/api/refresh", json={"scopes": ["time_records"]})

        response = logged_client.get("/api/time-records/export.csv")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert "Ana" in response.content.decode("utf-8-sig")

    def test_pdf_das_visitas(self, logged_client):
        response = logged_client.get("/api/delivery-visits/report.pdf")
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert response.content.startswith(b"%PDF")

    def test_pdf_com_marcacao_nas_observacoes(self, logged_client, gateway):
        gateway.seed("delivery_visits", [{
            "driver_name": "Carlos", "entry_time": "05/03/2025 09:00",
            "package_count": 3, "observations": "deixar <b>na guarita & avisar",
        }])
        logged_client.post("/api/refresh", json={"scopes": ["delivery_visits"]})

        response = logged_client.get("/api/delivery-visits/report.pdf")
        assert response.status_code == 200
        assert response.content.startswith(b"%PDF")
