"""
SQLAlchemy models.

Exposes `Base` and all ORM classes from a single import location.
"""

from .base import Base  # re-export

from .customers import Customer

__all__ = [
    "Base",
    "Customer",
]
