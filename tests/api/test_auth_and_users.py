"""Authentication, user registry sync, health, and error body shape."""

from httpx import AsyncClient


async def test_health_needs_no_token(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_readiness_checks_database(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_missing_token_is_unauthorized(client: AsyncClient) -> None:
    for method, path in [
        ("GET", "/api/v1/books"),
        ("POST", "/api/v1/collections"),
        ("GET", "/api/v1/users/me"),
    ]:
        response = await client.request(method, path)
        assert response.status_code == 401
        assert response.json()["error"] == "AUTHENTICATION_ERROR"


async def test_rejected_token_is_unauthorized(client: AsyncClient) -> None:
    response = await client.get(
        "/api/v1/users/sync", headers={"Authorization": "Bearer garbage"}
    )
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid or expired authentication token"


async def test_sync_upserts_user(client: AsyncClient, alice: dict[str, str]) -> None:
    for _ in range(3):
        response = await client.get("/api/v1/users/sync", headers=alice)
        assert response.status_code == 200
        assert response.json() == {"status": "synced"}

    me = await client.get("/api/v1/users/me", headers=alice)
    assert me.json() == {"id": "alice-id", "name": "alice"}


async def test_request_id_is_echoed(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"


async def test_unsafe_request_id_is_replaced(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "bad id!"})
    assert response.headers["X-Request-ID"] != "bad id!"
    assert len(response.headers["X-Request-ID"]) == 36
