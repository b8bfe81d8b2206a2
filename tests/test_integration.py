import pytest
from fastapi.testclient import TestClient

from backend.app import app
from backend.deps import get_checker
from backend.streaming import manager
from cheers.lookup import BrandLookupUnavailable

client = TestClient(app)


def test_docs_page_is_available():
    resp = client.get("/docs")
    assert resp.status_code == 200
    assert "Swagger UI" in resp.text or "swagger-ui" in resp.text.lower()


def test_health():
    body = client.get("/health").json()
    assert body["ok"] is True
    assert body["ws_clients"] == 0


def test_check_owned_brand():
    resp = client.post("/brands/check", json={"query": "BUDWEISER"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["category"] == "owned"
    assert body["suggestions"] == []
    assert body["title"] == "Cheers!"
    assert body["lang"] == "en"


def test_check_uses_accept_language():
    resp = client.post("/brands/check", json={"query": "Heineken"}, headers={"Accept-Language": "pt-BR,pt;q=0.9"})
    body = resp.json()
    assert body["category"] == "competitor"
    assert body["lang"] == "pt"
    assert body["title"] == "Sério mesmo?"


def test_check_lang_param_wins_over_header():
    resp = client.post("/brands/check?lang=en", json={"query": "Xyzzyxx123"}, headers={"Accept-Language": "pt"})
    body = resp.json()
    assert body["category"] == "unknown"
    assert body["title"] == "Tears..."
    assert len(body["suggestions"]) <= 5


def test_check_rejects_empty_query():
    assert client.post("/brands/check", json={"query": "   "}).status_code == 400


def test_suggest_endpoint():
    body = client.get("/brands/suggest", params={"q": "Bud"}).json()
    assert body["query"] == "Bud"
    assert body["suggestions"][0] == "Budweiser"
    assert client.get("/brands/suggest").json()["suggestions"] == []


def test_list_brands():
    body = client.get("/brands").json()
    assert "Budweiser" in body["owned"]
    assert "Heineken" in body["competitors"]
    assert body["aliases"]["stella"] == "Stella Artois"


def test_messages():
    assert client.get("/i18n/pt").json()["suggestions"] == "Você quis dizer:"
    assert client.get("/i18n/fr").status_code == 404


def test_unavailable_lookup_maps_to_503():
    class _Down:
        def suggest(self, query):
            raise BrandLookupUnavailable("API not implemented")

    app.dependency_overrides[get_checker] = lambda: _Down()
    try:
        resp = client.get("/brands/suggest", params={"q": "Bud"})
    finally:
        app.dependency_overrides.pop(get_checker, None)
    assert resp.status_code == 503
    assert resp.json()["detail"] == "Brand lookup unavailable"


def test_websocket_suggestions_follow_latest_seq():
    with client.websocket_connect("/ws/suggest") as ws:
        ws.send_json({"seq": 1, "q": "Bud"})
        first = ws.receive_json()
        assert first["type"] == "suggestions"
        assert first["seq"] == 1
        assert first["suggestions"][0] == "Budweiser"

        ws.send_json({"seq": 5, "q": "Cor"})
        assert ws.receive_json()["seq"] == 5
        # seq périmé : pas de réponse, la suivante est celle du seq 6
        ws.send_json({"seq": 4, "q": "Hei"})
        ws.send_json({"seq": 6, "q": ""})
        last = ws.receive_json()
        assert last["seq"] == 6
        assert last["suggestions"] == []


def test_websocket_rejects_malformed_frames():
    with client.websocket_connect("/ws/suggest") as ws:
        ws.send_text("not json")
        assert ws.receive_json()["type"] == "error"
        ws.send_json({"q": "Bud"})
        assert ws.receive_json()["type"] == "error"
        ws.send_json(["Bud"])
        assert ws.receive_json()["type"] == "error"


def test_websocket_rejects_boolean_seq():
    with client.websocket_connect("/ws/suggest") as ws:
        ws.send_json({"seq": True, "q": "Bud"})
        msg = ws.receive_json()
        assert msg["type"] == "error"
        assert msg["seq"] is None


def test_websocket_connection_is_released_on_close():
    with client.websocket_connect("/ws/suggest") as ws:
        ws.send_json({"seq": 1, "q": "Bud"})
        ws.receive_json()
        assert client.get("/health").json()["ws_clients"] == 1
    assert manager.active_connections == []


def test_websocket_connection_is_released_on_server_error():
    class _Broken:
        local = None

    app.dependency_overrides[get_checker] = lambda: _Broken()
    try:
        with pytest.raises(Exception):
            with client.websocket_connect("/ws/suggest") as ws:
                ws.send_json({"seq": 1, "q": "Bud"})
                ws.receive_json()
    finally:
        app.dependency_overrides.pop(get_checker, None)
    assert manager.active_connections == []
