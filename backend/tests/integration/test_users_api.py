"""Test user upsert, admin lookup and promotion routes."""
from doctor_portal.auth import verify_token
from doctor_portal.models.user import User


def test_upsert_user_creates_and_returns_token(client, settings):
    response = client.put("/user/p@x.com", json={"email": "p@x.com", "name": "Pat"})

    assert response.status_code == 200
    body = response.json()
    assert body["result"]["upsertedCount"] == 1
    assert body["result"]["upsertedId"]
    assert verify_token(body["token"], settings) == "p@x.com"


def test_upsert_existing_user_updates(client):
    client.put("/user/p@x.com", json={"name": "Pat"})

    response = client.put("/user/p@x.com", json={"name": "Patricia"})

    result = response.json()["result"]
    assert result["matchedCount"] == 1
    assert result["modifiedCount"] == 1
    assert result["upsertedCount"] == 0


def test_upsert_without_body_is_allowed(client):
    response = client.put("/user/p@x.com")

    assert response.status_code == 200
    assert response.json()["token"]


def test_upsert_cannot_grant_admin_role(client):
    client.put("/user/p@x.com", json={"name": "Pat", "role": "admin"})

    assert client.get("/admin/p@x.com").json() == {"admin": False}


def test_list_users_returns_documents(client, auth_header):
    client.put("/user/p@x.com", json={"name": "Pat"})

    response = client.get("/user", headers=auth_header("p@x.com"))

    [user] = response.json()
    assert user["email"] == "p@x.com"
    assert user["name"] == "Pat"
    assert "_id" in user


def test_admin_lookup_for_unknown_email_is_false(client):
    response = client.get("/admin/ghost@x.com")

    assert response.status_code == 200
    assert response.json() == {"admin": False}


def test_admin_lookup_for_admin_is_true(client, seed):
    seed(User(email="admin@x.com", role="admin", profile={}))

    assert client.get("/admin/admin@x.com").json() == {"admin": True}


def test_admin_can_promote_twice(client, seed, auth_header):
    seed(
        User(email="admin@x.com", role="admin", profile={}),
        User(email="p@x.com", profile={}),
    )
    headers = auth_header("admin@x.com")

    first = client.put("/user/admin/p@x.com", headers=headers)
    second = client.put("/user/admin/p@x.com", headers=headers)

    assert first.status_code == 200
    assert first.json()["modifiedCount"] == 1
    assert second.status_code == 200
    assert second.json()["matchedCount"] == 1
    assert second.json()["modifiedCount"] == 0
    assert client.get("/admin/p@x.com").json() == {"admin": True}


def test_non_admin_cannot_promote(client, seed, auth_header):
    seed(User(email="p@x.com", role="patient", profile={}), User(email="q@x.com", profile={}))

    response = client.put("/user/admin/q@x.com", headers=auth_header("p@x.com"))

    assert response.status_code == 403
    assert client.get("/admin/q@x.com").json() == {"admin": False}
