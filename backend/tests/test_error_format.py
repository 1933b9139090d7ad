from __future__ import annotations

from fastapi.testclient import TestClient

from house_hunter.core import config as app_config


def _assert_error_shape(res, *, error: str | None = None):
    data = res.json()
    assert isinstance(data, dict)
    assert isinstance(data.get("error"), str) and data["error"]
    assert isinstance(data.get("message"), str) and data["message"]
    if error is not None:
        assert data["error"] == error


def test_error_shape_401_missing_cookie(anon_client):
    res = anon_client.get("/authenticate")
    assert res.status_code == 401
    _assert_error_shape(res, error="UNAUTHORIZED")
    assert res.json()["message"] == "not authorized"


def test_error_shape_403_token_issuance_disabled(client):
    app_config.settings.TOKEN_ISSUER_SECRET = ""
    res = client.post("/jwt", json={"email": "a@b.com"})
    assert res.status_code == 403
    _assert_error_shape(res, error="FORBIDDEN")


def test_error_shape_404_user_not_found(client):
    res = client.get("/userByEmail/missing@example.com")
    assert res.status_code == 404
    _assert_error_shape(res, error="NOT_FOUND")


def test_http_error_shape_has_no_details(client):
    res = client.get("/userByEmail/missing@example.com")
    assert set(res.json()) == {"error", "message"}
    assert res.json()["message"] == "User not found"


def test_error_shape_422_request_validation_error(client):
    res = client.post("/houses", json=["not", "an", "object"])
    assert res.status_code == 422
    _assert_error_shape(res, error="VALIDATION_ERROR")
    body = res.json()
    assert isinstance(body.get("details"), dict)
    assert isinstance(body["details"].get("errors"), list)


def test_error_shape_500_unhandled(app, monkeypatch):
    from house_hunter.routes import users as users_routes

    def boom(db, email):
        raise RuntimeError("database unavailable")

    monkeypatch.setattr(users_routes, "get_user_by_email", boom)

    with TestClient(app, raise_server_exceptions=False) as c:
        res = c.get("/userByEmail/a@b.com")
    assert res.status_code == 500
    _assert_error_shape(res, error="INTERNAL_ERROR")
    assert res.json()["success"] is False
