from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from customer_store.config import get_settings
from customer_store.main import create_app
from customer_store.observability.metrics import reset_metrics
from customer_store.services.customer_service import CustomerStore


@pytest.fixture(autouse=True)
def test_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.delenv("ENABLE_METRICS_ENDPOINT", raising=False)
    get_settings.cache_clear()
    reset_metrics()

    yield

    reset_metrics()
    get_settings.cache_clear()


@pytest.fixture
def store() -> CustomerStore:
    return CustomerStore()


@pytest.fixture
def app(store: CustomerStore) -> FastAPI:
    return create_app(store=store)


@pytest.fixture
async def api_client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
