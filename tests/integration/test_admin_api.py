"""Integration tests for superadmin-only /admins management."""

import uuid

import pytest

from tests.conftest import TEST_PASSWORD, bearer, make_admin_payload

pytestmark = pytest.mark.integration

BASE = "/api/v1/admins"


async def test_create_admin(client):
    """POST /admins returns 201 without exposing the password hash."""
    payload = make_admin_payload()
    resp = await client.post(BASE, json=payload)

    assert resp.status_code == 201
    data = resp.json()
    assert data["username"] == payload["username"]
    assert data["email"] == payload["email"]
    assert data["role"] == "admin"
    assert "password" not in data
    assert "password_hash" not in data


async def test_create_superadmin(client):
    resp = await client.post(BASE, json=make_admin_payload(role="superadmin"))

    assert resp.status_code == 201
    assert resp.json()["role"] == "superadmin"


async def test_create_admin_duplicate_email(client):
    payload = make_admin_payload()
    await client.post(BASE, json=payload)

    resp = await client.post(BASE, json=make_admin_payload(email=payload["email"]))

    assert resp.status_code == 409
    assert resp.json()["kind"] == "conflict"
    assert payload["email"] in resp.json()["detail"]


async def test_create_admin_duplicate_username(client):
    payload = make_admin_payload()
    await client.post(BASE, json=payload)

    resp = await client.post(BASE, json=make_admin_payload(username=payload["username"]))

    assert resp.status_code == 409
    assert "username" in resp.json()["detail"]


async def test_create_admin_invalid_role(client):
    resp = await client.post(BASE, json=make_admin_payload(role="owner"))
    assert resp.status_code == 400


async def test_list_admins(client, superadmin):
    await client.post(BASE, json=make_admin_payload())

    resp = await client.get(BASE)

    assert resp.status_code == 200
    usernames = [a["username"] for a in resp.json()]
    assert superadmin.username in usernames
    assert len(usernames) == 2


async def test_get_admin(client, regular_admin):
    resp = await client.get(f"{BASE}/{regular_admin.id}")

    assert resp.status_code == 200
    assert resp.json()["username"] == regular_admin.username


async def test_get_admin_not_found(client):
    resp = await client.get(f"{BASE}/{uuid.uuid4()}")
    assert resp.status_code == 404


async def test_update_admin_role_and_password(client, anon_client, regular_admin):
    resp = await client.put(
        f"{BASE}/{regular_admin.id}",
        json={"role": "superadmin", "password": "brand-new-pass"},
    )

    assert resp.status_code == 200
    assert resp.json()["role"] == "superadmin"

    resp = await anon_client.post(
        "/api/v1/auth/login",
        json={"identifier": regular_admin.username, "password": "brand-new-pass"},
    )
    assert resp.status_code == 200


async def test_update_admin_email_conflict(client, superadmin, regular_admin):
    resp = await client.put(f"{BASE}/{regular_admin.id}", json={"email": superadmin.email})

    assert resp.status_code == 409


async def test_update_admin_keeps_own_email(client, regular_admin):
    resp = await client.put(
        f"{BASE}/{regular_admin.id}",
        json={"email": regular_admin.email, "username": "renamed"},
    )

    assert resp.status_code == 200
    assert resp.json()["username"] == "renamed"


async def test_delete_admin(client, regular_admin):
    resp = await client.delete(f"{BASE}/{regular_admin.id}")
    assert resp.status_code == 204

    resp = await client.get(f"{BASE}/{regular_admin.id}")
    assert resp.status_code == 404


async def test_regular_admin_is_forbidden(anon_client, regular_admin):
    headers = bearer(regular_admin)

    resp = await anon_client.get(BASE, headers=headers)
    assert resp.status_code == 403
    assert resp.json()["kind"] == "authorization_error"

    resp = await anon_client.post(BASE, json=make_admin_payload(), headers=headers)
    assert resp.status_code == 403


async def test_admins_require_auth(anon_client):
    resp = await anon_client.get(BASE)
    assert resp.status_code == 401


async def test_regular_admin_password_is_usable(anon_client, regular_admin):
    resp = await anon_client.post(
        "/api/v1/auth/login",
        json={"identifier": regular_admin.email, "password": TEST_PASSWORD},
    )
    assert resp.status_code == 200
