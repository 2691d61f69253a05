"""Observability helpers.

Request IDs bound into structlog contextvars, JSON logging, and an in-memory
metrics snapshot served by the ``/metrics`` endpoint.
"""
