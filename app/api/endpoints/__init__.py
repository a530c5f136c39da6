"""API endpoints package."""

from . import health
from . import generate

__all__ = ["health", "generate"]
