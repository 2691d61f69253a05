from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from customer_store.models.schemas import Customer
from customer_store.services.customer_service import CustomerStore
from customer_store.services.dependencies import decode_customer, get_customer_store

router = APIRouter(prefix="/customers", tags=["customers"])


@router.post("", response_model=Customer, status_code=status.HTTP_201_CREATED)
def create_customer(
    payload: Customer = Depends(decode_customer),
    store: CustomerStore = Depends(get_customer_store),
) -> Customer:
    return store.create(payload)


@router.get("", response_model=list[Customer])
def list_customers(store: CustomerStore = Depends(get_customer_store)) -> list[Customer]:
    return store.list_all()


@router.get("/{customer_id}", response_model=Customer)
def get_customer(customer_id: str, store: CustomerStore = Depends(get_customer_store)) -> Customer:
    return store.get(customer_id)


@router.put("/{customer_id}", response_model=Customer)
def update_customer(
    customer_id: str,
    payload: Customer = Depends(decode_customer),
    store: CustomerStore = Depends(get_customer_store),
) -> Customer:
    return store.update(customer_id, payload)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_customer(customer_id: str, store: CustomerStore = Depends(get_customer_store)) -> Response:
    store.delete(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
