from httpx import ASGITransport, AsyncClient

from customer_store.config import get_settings
from customer_store.main import create_app


async def test_metrics_endpoint_returns_snapshot_and_counts_requests(api_client) -> None:
    m1 = await api_client.get("/metrics")
    assert m1.status_code == 200
    payload1 = m1.json()
    assert "counters" in payload1
    assert "latency_ms" in payload1
    assert payload1["store"] == {"customers_total": 0}

    # /metrics itself should NOT affect http_requests_total.
    m1b = await api_client.get("/metrics")
    assert m1b.json()["counters"]["http_requests_total"] == payload1["counters"]["http_requests_total"]

    await api_client.post("/customers", json={"id": "1", "nome": "Ana", "email": "a@example.com"})
    await api_client.get("/customers/missing")

    payload2 = (await api_client.get("/metrics")).json()
    counters = payload2["counters"]
    assert counters["http_requests_total"] == payload1["counters"]["http_requests_total"] + 2
    assert counters["http_responses_by_class"].get("2xx", 0) >= 1
    assert counters["http_responses_by_class"].get("4xx", 0) >= 1
    assert payload2["latency_ms"]["http_request_ms"]["count"] == counters["http_requests_total"]
    assert payload2["store"] == {"customers_total": 1}


async def test_metrics_endpoint_can_be_disabled(monkeypatch) -> None:
    monkeypatch.setenv("ENABLE_METRICS_ENDPOINT", "false")
    get_settings.cache_clear()

    app = create_app()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        resp = await client.get("/metrics")
    assert resp.status_code == 404
