import logging

import pytest
from httpx import AsyncClient, ASGITransport

from main import create_app


@pytest.mark.asyncio
async def test_access_log(client, caplog):
    with caplog.at_level(logging.INFO, logger="access"):
        await client.get("/health")
        await client.get("/api/courses/0123456789abcdef01234567")

    records = [r for r in caplog.records if r.name == "access"]
    assert [(r.method, r.path, r.status) for r in records] == [
        ("GET", "/health", 200),
        ("GET", "/api/courses/0123456789abcdef01234567", 404),
    ]
    assert all(r.duration_ms >= 0 for r in records)
    assert records[1].levelno == logging.WARNING


@pytest.mark.asyncio
async def test_cors_preflight(client):
    response = await client.options(
        "/api/courses",
        headers={
            "Origin": "https://frontend.example.com",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    assert "POST" in response.headers["access-control-allow-methods"]


@pytest.mark.asyncio
async def test_cors_header_on_simple_request(client):
    response = await client.get("/health", headers={"Origin": "https://frontend.example.com"})
    assert response.headers["access-control-allow-origin"] == "*"


@pytest.mark.asyncio
async def test_static_files(settings, database, tmp_path):
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_text("<h1>dashboard</h1>")
    (public / "app.js").write_text("console.log('hi');")

    app = create_app(settings=settings, database=database)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        assert (await c.get("/app.js")).text == "console.log('hi');"
        assert "dashboard" in (await c.get("/")).text
        assert (await c.get("/api/courses")).json() == []


@pytest.mark.asyncio
async def test_static_files_served_before_routes(settings, database, tmp_path):
    public = tmp_path / "public"
    public.mkdir()
    (public / "health").write_text("static health page")

    app = create_app(settings=settings, database=database)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        assert (await c.get("/health")).text == "static health page"
        assert (await c.get("/../config.py")).status_code == 404
        assert (await c.get("/api/courses")).json() == []
        assert (await c.post("/api/courses", json={"name": "CS101"})).status_code == 201
