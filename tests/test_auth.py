from datetime import timedelta

import pytest
from jose import jwt

from _helpers import SECRET, bearer, make_token


@pytest.mark.asyncio
async def test_missing_token_is_unauthorized(client):
    resp = await client.get("/documents/search")
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Not Authorized"


@pytest.mark.asyncio
async def test_missing_token_rejected_before_body_validation(client):
    resp = await client.post("/documents", json={"title": ""})
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_garbage_token_is_invalid(client):
    resp = await client.get("/documents/search", headers=bearer("not-a-jwt"))
    assert resp.status_code == 406
    assert resp.json()["detail"] == "Token Invalid"


@pytest.mark.asyncio
async def test_token_signed_with_other_secret_is_invalid(client):
    resp = await client.get("/documents/search", headers=bearer(make_token(1, 2, secret="nope")))
    assert resp.status_code == 406


@pytest.mark.asyncio
async def test_expired_token_is_invalid(client):
    token = make_token(1, 2, expires_delta=timedelta(minutes=-1))
    resp = await client.get("/documents/search", headers=bearer(token))
    assert resp.status_code == 406


@pytest.mark.asyncio
async def test_token_without_identity_claims_is_invalid(client):
    token = jwt.encode({"UserId": 1}, SECRET, algorithm="HS256")
    resp = await client.get("/documents/search", headers=bearer(token))
    assert resp.status_code == 406


@pytest.mark.asyncio
async def test_x_access_token_header_is_accepted(client):
    resp = await client.get("/documents/search", headers={"x-access-token": make_token(1, 2)})
    assert resp.status_code == 200


@pytest.mark.asyncio
async def test_raw_token_in_authorization_is_accepted(client):
    resp = await client.get("/documents/search", headers={"Authorization": make_token(1, 2)})
    assert resp.status_code == 200


@pytest.mark.asyncio
async def test_authorization_header_wins(client):
    resp = await client.get(
        "/documents/search",
        headers={"Authorization": "Bearer garbage", "x-access-token": make_token(1, 2)},
    )
    assert resp.status_code == 406

    resp = await client.get(
        "/documents/search",
        headers={"Authorization": f"Bearer {make_token(1, 2)}", "x-access-token": "garbage"},
    )
    assert resp.status_code == 200


@pytest.mark.asyncio
async def test_admin_route_forbidden_for_regular_user(client, auth_headers):
    resp = await client.get("/documents", headers=auth_headers("alice"))
    assert resp.status_code == 403
    assert resp.json()["detail"] == "Only an admin is authorized for this request"


@pytest.mark.asyncio
async def test_admin_route_allowed_for_admin(client, auth_headers):
    resp = await client.get("/documents", headers=auth_headers("root"))
    assert resp.status_code == 200


@pytest.mark.asyncio
async def test_admin_route_forbidden_for_unknown_role(client):
    resp = await client.get("/documents", headers=bearer(make_token(1, 999)))
    assert resp.status_code == 403


@pytest.mark.asyncio
async def test_health_needs_no_token(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "database": "ok"}


@pytest.mark.asyncio
@pytest.mark.parametrize("user_id, role_id", [(1, 10**30), (10**30, 2), (0, 2)])
async def test_out_of_range_identity_claims_are_invalid(client, user_id, role_id):
    resp = await client.get("/documents", headers=bearer(make_token(user_id, role_id)))
    assert resp.status_code == 406


@pytest.mark.asyncio
async def test_admin_role_lookup_database_error_is_bad_request(client, auth_headers, monkeypatch):
    from sqlalchemy.exc import OperationalError
    from app.db.repositories.role_repository import RoleRepository

    async def broken_get_by_id(self, role_id):
        raise OperationalError("SELECT roles", {}, Exception("roles table is locked"))

    monkeypatch.setattr(RoleRepository, "get_by_id", broken_get_by_id)

    resp = await client.get("/documents", headers=auth_headers("root"))
    assert resp.status_code == 400
    assert "roles table is locked" in resp.json()["detail"]
