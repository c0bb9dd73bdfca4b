"""Common middleware for Lumina."""

from .observability import StructlogContextMiddleware

__all__ = ["StructlogContextMiddleware"]
