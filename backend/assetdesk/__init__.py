"""Multi-tenant asset tracking service."""

__version__ = "0.1.0"
