from __future__ import annotations


def test_user_by_email_returns_document(client, existing_user):
    res = client.get("/userByEmail/tenant@example.com")
    assert res.status_code == 200
    doc = res.json()
    assert doc["_id"] == existing_user.id
    assert doc["email"] == "tenant@example.com"
    assert doc["name"] == "Tenant"
    assert doc["role"] == "renter"
    assert "createdAt" in doc


def test_user_by_email_never_exposes_password(client, existing_user):
    doc = client.get("/userByEmail/tenant@example.com").json()
    assert "password" not in doc
    assert "password_hash" not in doc
    assert existing_user.password_hash not in str(doc)


def test_user_by_email_is_case_insensitive(client, existing_user):
    res = client.get("/userByEmail/TENANT@example.com")
    assert res.status_code == 200
    assert res.json()["_id"] == existing_user.id


def test_user_by_email_missing_is_404(client):
    res = client.get("/userByEmail/ghost@example.com")
    assert res.status_code == 404
    assert res.json() == {"error": "NOT_FOUND", "message": "User not found"}


def test_registered_profile_is_visible_via_lookup(client):
    client.post(
        "/register",
        json={"email": "landlord@example.com", "password": "x", "fullName": "Land Lord", "role": "owner"},
    )
    doc = client.get("/userByEmail/landlord@example.com").json()
    assert doc["fullName"] == "Land Lord"
    assert doc["role"] == "owner"
