from __future__ import annotations

from fastapi import Request
from pydantic import ValidationError

from customer_store.exceptions import ClientInputError
from customer_store.models.schemas import Customer
from customer_store.services.customer_service import CustomerStore


def get_customer_store(request: Request) -> CustomerStore:
    return request.app.state.customer_store


async def decode_customer(request: Request) -> Customer:
    """Decode the raw request body; any decode failure is a 400."""
    body = await request.body()
    try:
        return Customer.model_validate_json(body)
    except ValidationError as exc:
        raise ClientInputError(str(exc)) from exc
