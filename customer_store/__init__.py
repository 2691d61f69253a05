"""In-memory customer record store served over HTTP."""

__version__ = "0.1.0"
