from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request

from customer_store.observability.metrics import get_metrics
from customer_store.services.customer_service import CustomerStore
from customer_store.services.dependencies import get_customer_store


router = APIRouter(tags=["metrics"])


@router.get("/metrics")
async def metrics(request: Request, store: CustomerStore = Depends(get_customer_store)) -> dict:
    if not request.app.state.settings.enable_metrics_endpoint:
        raise HTTPException(status_code=404, detail="Not found")
    snapshot = get_metrics().snapshot()
    snapshot["store"] = {"customers_total": len(store)}
    return snapshot
