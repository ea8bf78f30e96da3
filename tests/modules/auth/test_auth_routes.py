# -*- coding: utf-8 -*-
"""
tests/modules/auth/test_auth_routes.py

Registro, login con limitador por ip:email y perfil propio.
"""

import pytest

PASSWORD = "s3cret-passw0rd"


@pytest.fixture
async def registered(app_client):
    r = await app_client.post(
        "/auth/register",
        json={"email": "Ana@Example.com", "password": PASSWORD, "full_name": "Ana", "role": "freelancer"},
    )
    assert r.status_code == 201, r.text
    return r.json()


async def test_register_normalizes_email(registered):
    assert registered["email"] == "ana@example.com"
    assert registered["role"] == "freelancer"
    assert "password_hash" not in registered


async def test_register_duplicate_email(app_client, registered):
    r = await app_client.post(
        "/auth/register",
        json={"email": "ana@example.com", "password": PASSWORD, "full_name": "Otra"},
    )
    assert r.status_code == 400
    assert r.json()["reason"] == "email_already_registered"


async def test_register_rejects_admin_role(app_client):
    r = await app_client.post(
        "/auth/register",
        json={"email": "boss@example.com", "password": PASSWORD, "full_name": "Boss", "role": "admin"},
    )
    assert r.status_code == 422


async def test_login_and_me(app_client, registered):
    r = await app_client.post("/auth/login", json={"email": "ana@example.com", "password": PASSWORD})
    assert r.status_code == 200, r.text
    token = r.json()["access_token"]
    assert r.json()["token_type"] == "bearer"

    me = await app_client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["id"] == registered["id"]


async def test_me_without_token_is_401(app_client):
    r = await app_client.get("/auth/me")
    assert r.status_code == 401
    assert r.json()["detail"]["error"] == "invalid_token"


async def test_me_with_garbage_token_is_401(app_client):
    r = await app_client.get("/auth/me", headers={"Authorization": "Bearer not.a.jwt"})
    assert r.status_code == 401


async def test_wrong_password_is_401(app_client, registered):
    r = await app_client.post("/auth/login", json={"email": "ana@example.com", "password": "nope"})
    assert r.status_code == 401


async def test_sixth_attempt_is_rate_limited(app_client, registered):
    for _ in range(5):
        r = await app_client.post("/auth/login", json={"email": "ana@example.com", "password": "nope"})
        assert r.status_code == 401

    # Ni la contraseña correcta pasa mientras la ventana esté activa
    r = await app_client.post("/auth/login", json={"email": "ana@example.com", "password": PASSWORD})
    assert r.status_code == 429
    assert r.headers["Retry-After"] == "900"
    assert r.json()["retry_after_minutes"] == 15
    assert r.json()["error_code"] == "rate_limit_exceeded"


async def test_limit_is_per_email(app_client, registered):
    for _ in range(5):
        await app_client.post("/auth/login", json={"email": "ana@example.com", "password": "nope"})

    r = await app_client.post("/auth/login", json={"email": "other@example.com", "password": "nope"})
    assert r.status_code == 401


async def test_successful_logins_count_against_the_ceiling(app_client, registered):
    for _ in range(5):
        ok = await app_client.post("/auth/login", json={"email": "ana@example.com", "password": PASSWORD})
        assert ok.status_code == 200

    r = await app_client.post("/auth/login", json={"email": "ana@example.com", "password": PASSWORD})
    assert r.status_code == 429


async def test_success_after_failures_does_not_refund_attempts(app_client, registered):
    for _ in range(4):
        await app_client.post("/auth/login", json={"email": "ana@example.com", "password": "nope"})
    ok = await app_client.post("/auth/login", json={"email": "ana@example.com", "password": PASSWORD})
    assert ok.status_code == 200

    r = await app_client.post("/auth/login", json={"email": "ana@example.com", "password": "nope"})
    assert r.status_code == 429


async def test_role_gate_returns_403(app_client, users, headers_for):
    # Crear propuestas exige rol freelancer
    r = await app_client.post(
        "/proposals",
        headers=headers_for(users.client),
        json={"project_id": 1, "cover_letter": "hi", "bid_amount": 10},
    )
    assert r.status_code == 403
    assert r.json()["error_code"] == "forbidden"
