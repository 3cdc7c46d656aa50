"""
Customer repository functions.

Explicit data access for the ``customers`` table: lookups by id and first
name, paginated scans with a total row count, save and delete.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from customer_service.db import models

logger = logging.getLogger(__name__)


def find_by_first_name(db: Session, first_name: Optional[str]) -> Optional[models.Customer]:
    # ``== None`` compiles to IS NULL, so a missing name matches NULL rows
    return db.query(models.Customer).filter(models.Customer.first_name == first_name).first()


def find_by_id(db: Session, customer_id: int) -> Optional[models.Customer]:
    return db.query(models.Customer).filter(models.Customer.id == customer_id).first()


def count(db: Session) -> int:
    return db.query(models.Customer).count()


def find_page(db: Session, page_number: int, page_size: int) -> Tuple[List[models.Customer], int]:
    """Return one zero-based page of customers ordered by id, plus the total row count."""
    query = db.query(models.Customer)
    total_count = query.count()
    customers = (
        query.order_by(models.Customer.id.asc())
        .offset(page_number * page_size)
        .limit(page_size)
        .all()
    )
    return customers, total_count


def save(db: Session, customer: models.Customer) -> models.Customer:
    """Insert or update a customer; the store assigns ``id`` on insert."""
    try:
        db.add(customer)
        db.commit()
        db.refresh(customer)
        return customer
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to save customer %s", customer.id)
        raise


def delete(db: Session, customer: models.Customer) -> None:
    try:
        db.delete(customer)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to delete customer %s", customer.id)
        raise


def delete_by_id(db: Session, customer_id: int) -> bool:
    """Delete a customer by id. Returns False when no such row exists."""
    db_customer = find_by_id(db, customer_id)
    if not db_customer:
        return False
    delete(db, db_customer)
    return True
