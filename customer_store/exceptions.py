"""Error types raised by the customer store and its HTTP layer.

Each error carries the HTTP status it maps to; the application's exception
handler renders them as plain-text responses.
"""

from __future__ import annotations


class CustomerStoreError(Exception):
    """Base class for all errors surfaced to API callers."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message if message is not None else self.default_message
        super().__init__(self.message)


class ClientInputError(CustomerStoreError):
    """Raised when a request body cannot be decoded into a customer."""

    status_code = 400
    default_message = "Invalid request body"


class CustomerNotFoundError(CustomerStoreError):
    """Raised when an operation targets an id that is not stored."""

    status_code = 404
    default_message = "Customer not found"

    def __init__(self, customer_id: str | None = None, message: str | None = None) -> None:
        self.customer_id = customer_id
        super().__init__(message)
