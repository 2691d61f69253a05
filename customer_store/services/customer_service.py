from __future__ import annotations

import logging
from threading import Lock

from customer_store.exceptions import CustomerNotFoundError
from customer_store.models.schemas import Customer

logger = logging.getLogger(__name__)


class CustomerStore:
    """Thread-safe, process-local customer records (lost on restart).

    One lock guards every read and write of the mapping. Records handed in
    and out are copies, so callers never share state with the store.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._records: dict[str, Customer] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, customer_id: object) -> bool:
        with self._lock:
            return customer_id in self._records

    def create(self, customer: Customer) -> Customer:
        # Existing ids are overwritten without a conflict check.
        stored = customer.model_copy()
        with self._lock:
            replaced = stored.id in self._records
            self._records[stored.id] = stored

        logger.info("customer.created", extra={"customer_id": stored.id, "replaced": replaced})
        return stored.model_copy()

    def list_all(self) -> list[Customer]:
        with self._lock:
            snapshot = list(self._records.values())
        return [c.model_copy() for c in snapshot]

    def get(self, customer_id: str) -> Customer:
        with self._lock:
            customer = self._records.get(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)
        return customer.model_copy()

    def update(self, customer_id: str, changes: Customer) -> Customer:
        """Replace name and email of an existing record; the id never changes."""
        with self._lock:
            current = self._records.get(customer_id)
            if current is None:
                raise CustomerNotFoundError(customer_id)
            updated = current.model_copy(update={"name": changes.name, "email": changes.email})
            self._records[customer_id] = updated

        logger.info("customer.updated", extra={"customer_id": customer_id})
        return updated.model_copy()

    def delete(self, customer_id: str) -> None:
        with self._lock:
            if customer_id not in self._records:
                raise CustomerNotFoundError(customer_id)
            del self._records[customer_id]

        logger.info("customer.deleted", extra={"customer_id": customer_id})

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
