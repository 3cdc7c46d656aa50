"""
API dependency helpers.
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from customer_service.db.database import get_db
from customer_service.services.customer_service import CustomerService


def get_customer_service(db: Session = Depends(get_db)) -> CustomerService:
    """Build a request-scoped CustomerService bound to the request's session."""
    return CustomerService(db)
