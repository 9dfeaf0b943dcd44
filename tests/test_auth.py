"""Authentication dependency and profile endpoints."""
from tests.conftest import API, auth, make_token


def test_missing_token_is_rejected(client):
    resp = client.get(f"{API}/auth/user")
    assert resp.status_code == 401
    assert resp.json()["message"] == "Authentication required"


def test_invalid_signature_is_rejected(client):
    resp = client.get(
        f"{API}/auth/user", headers={"Authorization": "Bearer not-a-jwt"}
    )
    assert resp.status_code == 401
    assert resp.json()["message"] == "Invalid or expired token"


def test_expired_token_is_rejected(client):
    token = make_token("u1", expires_in=-60)
    resp = client.get(f"{API}/auth/user", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401


def test_first_request_provisions_profile(client):
    resp = client.get(
        f"{API}/auth/user",
        headers=auth("u1", email="ana@example.com", first_name="Ana"),
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["id"] == "u1"
    assert body["email"] == "ana@example.com"
    assert body["firstName"] == "Ana"
    assert body["interests"] == []


def test_later_login_refreshes_claim_fields(client):
    client.get(f"{API}/auth/user", headers=auth("u1", first_name="Ana"))
    resp = client.get(
        f"{API}/auth/user",
        headers=auth("u1", first_name="Anna", last_name="Lee"),
    )
    body = resp.json()
    assert body["firstName"] == "Anna"
    assert body["lastName"] == "Lee"


def test_update_profile(client, login):
    headers = login("u1")
    resp = client.patch(
        f"{API}/auth/user",
        json={
            "bio": "  Backpacker  ",
            "location": "Lisbon",
            "dateOfBirth": "1990-05-17",
            "interests": ["Hiking", "hiking", " Food ", ""],
        },
        headers=headers,
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["bio"] == "Backpacker"
    assert body["location"] == "Lisbon"
    assert body["dateOfBirth"] == "1990-05-17"
    assert body["interests"] == ["Hiking", "Food"]


def test_update_profile_rejects_identity_fields(client, login):
    headers = login("u1")
    resp = client.patch(
        f"{API}/auth/user", json={"email": "new@example.com"}, headers=headers
    )
    assert resp.status_code == 400
    assert resp.json()["errors"][0]["field"] == "email"


def test_storage_failure_is_generic_500(client, login):
    login("u1")
    # Second account claiming the same email violates the unique index
    resp = client.get(f"{API}/auth/user", headers=auth("u2", email="u1@example.com"))
    assert resp.status_code == 500
    assert resp.json() == {"message": "Internal server error"}
