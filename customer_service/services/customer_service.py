"""
Customer service: create, list, fetch, update and delete customer records.
"""

import logging
import math
from sqlalchemy.orm import Session

from customer_service.db import models, schemas
from customer_service.db.repositories import customers as customer_repo
from customer_service.exceptions import (
    CustomerAlreadyExistsError,
    CustomerNotFoundError,
    ResourceNotFoundError,
)

logger = logging.getLogger(__name__)


def to_dto(customer: models.Customer) -> schemas.CustomerDTO:
    return schemas.CustomerDTO(
        customer_id=customer.id,
        first_name=customer.first_name,
        last_name=customer.last_name,
        email=customer.email,
        phone_number=customer.phone_number,
    )


def to_entity(dto: schemas.CustomerDTO) -> models.Customer:
    # Identity always comes from the store, never from the request
    return models.Customer(
        first_name=dto.first_name,
        last_name=dto.last_name,
        email=dto.email,
        phone_number=dto.phone_number,
    )


class CustomerService:
    """Service class for customer operations."""

    def __init__(self, db: Session):
        self.db = db

    def create_customer(self, customer_dto: schemas.CustomerDTO) -> schemas.CustomerDTO:
        """Create a customer unless one with the same first name already exists."""
        customer = to_entity(customer_dto)
        existing = customer_repo.find_by_first_name(self.db, customer.first_name)
        if existing is not None:
            logger.warning("Rejected duplicate customer first_name=%r (existing id=%s)", customer.first_name, existing.id)
            raise CustomerAlreadyExistsError()

        saved = customer_repo.save(self.db, customer)
        logger.info("Created customer %s", saved.id)
        return to_dto(saved)

    def get_all_customers(self, page_number: int, page_size: int) -> schemas.CustomerResponse:
        """Return one page of customers.

        An empty page raises ``CustomerNotFoundError``, including a page past
        the end of a non-empty table.
        """
        customers, total_elements = customer_repo.find_page(self.db, page_number, page_size)
        if not customers:
            raise CustomerNotFoundError()

        total_pages = math.ceil(total_elements / page_size)
        return schemas.CustomerResponse(
            content=[to_dto(c) for c in customers],
            page_number=page_number,
            page_size=page_size,
            total_elements=total_elements,
            total_pages=total_pages,
            last_page=page_number >= total_pages - 1,
        )

    def get_customer_by_id(self, customer_id: int) -> schemas.CustomerDTO:
        customer = customer_repo.find_by_id(self.db, customer_id)
        if customer is None:
            raise CustomerNotFoundError()
        return to_dto(customer)

    def update_customer(self, customer_dto: schemas.CustomerDTO, customer_id: int) -> schemas.CustomerDTO:
        """Overwrite the four mutable fields of an existing customer.

        This is a full replacement: a field absent from the request is stored
        as null. The id is never changed.
        """
        customer = self._get_existing(customer_id)
        customer.first_name = customer_dto.first_name
        customer.last_name = customer_dto.last_name
        customer.email = customer_dto.email
        customer.phone_number = customer_dto.phone_number
        customer = customer_repo.save(self.db, customer)
        logger.info("Updated customer %s", customer.id)
        return to_dto(customer)

    def delete_customer(self, customer_id: int) -> schemas.CustomerDTO:
        """Delete a customer and return its last-known values."""
        customer = self._get_existing(customer_id)
        # Project before deleting; the instance is detached afterwards
        deleted = to_dto(customer)
        customer_repo.delete(self.db, customer)
        logger.info("Deleted customer %s", customer_id)
        return deleted

    def _get_existing(self, customer_id: int) -> models.Customer:
        customer = customer_repo.find_by_id(self.db, customer_id)
        if customer is None:
            logger.warning("Customer %s not found", customer_id)
            raise ResourceNotFoundError("Customer", "customerId", customer_id)
        return customer
