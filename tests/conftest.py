"""
Pytest fixtures for the relay services

The store runs on a temporary SQLite database; the gateway reaches it
in-process through httpx.ASGITransport.
"""

import pytest
import httpx

from api_gateway.config import Settings as GatewaySettings
from api_gateway.main import create_app as create_gateway_app
from store_service.config import Settings as StoreSettings
from store_service.db.database import StoreDatabase
from store_service.main import create_app as create_store_app

STORE_URL = "http://store-service"
GATEWAY_URL = "http://api-gateway"


@pytest.fixture
def store_settings(tmp_path) -> StoreSettings:
    """Store configuration backed by a throwaway SQLite file"""
    return StoreSettings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'store.db'}",
        storage_root="uploads",
        log_format="console"
    )


@pytest.fixture
def gateway_settings() -> GatewaySettings:
    return GatewaySettings(store_service_url=STORE_URL, log_format="console")


@pytest.fixture
async def store_db(store_settings):
    db = StoreDatabase(store_settings)
    await db.initialize()
    yield db
    await db.close()


@pytest.fixture
async def session(store_db):
    async with store_db.session() as session:
        yield session


@pytest.fixture
def store_app(store_settings, store_db):
    """Store app with its database attached (ASGITransport skips lifespan)"""
    app = create_store_app(store_settings)
    app.state.db = store_db
    return app


@pytest.fixture
async def store_http(store_app):
    transport = httpx.ASGITransport(app=store_app)
    async with httpx.AsyncClient(transport=transport, base_url=STORE_URL) as client:
        yield client


async def _gateway_http(settings, store_transport):
    app = create_gateway_app(settings, store_transport=store_transport)
    await app.state.store_client.start()
    transport = httpx.ASGITransport(app=app)
    client = httpx.AsyncClient(transport=transport, base_url=GATEWAY_URL)
    return app, client


@pytest.fixture
async def gateway_http(gateway_settings, store_app):
    """Gateway client wired to the in-process store"""
    app, client = await _gateway_http(gateway_settings, httpx.ASGITransport(app=store_app))
    yield client
    await client.aclose()
    await app.state.store_client.stop()


@pytest.fixture
async def make_gateway_http(gateway_settings):
    """Factory for gateway clients wired to an arbitrary store transport"""
    created = []

    async def factory(store_transport: httpx.AsyncBaseTransport) -> httpx.AsyncClient:
        app, client = await _gateway_http(gateway_settings, store_transport)
        created.append((app, client))
        return client

    yield factory

    for app, client in created:
        await client.aclose()
        await app.state.store_client.stop()


@pytest.fixture
def account_payload() -> dict:
    return {"email": "ada@example.com", "credential": "s3cret-pass"}
