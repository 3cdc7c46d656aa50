"""
Pydantic schemas exchanged over the API boundary.
"""

from .customers import CustomerDTO, CustomerResponse

__all__ = [
    "CustomerDTO",
    "CustomerResponse",
]
