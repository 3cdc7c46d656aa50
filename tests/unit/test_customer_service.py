from unittest.mock import patch

import pytest

from customer_service.db import schemas
from customer_service.db.repositories import customers as customer_repo
from customer_service.exceptions import (
    CustomerAlreadyExistsError,
    CustomerNotFoundError,
    ResourceNotFoundError,
)
from customer_service.services.customer_service import CustomerService


def _dto(first_name="John", last_name="Doe", email="john@example.com", phone_number="555-0101", **kw):
    return schemas.CustomerDTO(first_name=first_name, last_name=last_name, email=email, phone_number=phone_number, **kw)


@pytest.fixture
def service(db_session):
    return CustomerService(db_session)


def test_create_customer_returns_projection_with_id(service):
    created = service.create_customer(_dto())
    assert created.customer_id is not None
    assert (created.first_name, created.last_name, created.email, created.phone_number) == (
        "John", "Doe", "john@example.com", "555-0101",
    )


def test_create_customer_ignores_incoming_id(service, customer_factory):
    existing = customer_factory("Existing")
    created = service.create_customer(_dto(first_name="New", customer_id=existing.id))
    assert created.customer_id != existing.id
    assert service.get_customer_by_id(existing.id).first_name == "Existing"


def test_create_duplicate_first_name_conflicts_without_write(service, db_session):
    service.create_customer(_dto())
    with patch.object(customer_repo, "save", wraps=customer_repo.save) as save_spy:
        with pytest.raises(CustomerAlreadyExistsError) as exc:
            service.create_customer(_dto(last_name="Other", email="other@example.com"))
    assert exc.value.message == "Customer already exists"
    assert exc.value.status_code == 409
    save_spy.assert_not_called()
    assert customer_repo.count(db_session) == 1


def test_get_all_customers_builds_envelope(service, customer_factory):
    for name in ["A", "B", "C"]:
        customer_factory(name)

    page = service.get_all_customers(0, 2)
    assert [c.first_name for c in page.content] == ["A", "B"]
    assert page.page_number == 0
    assert page.page_size == 2
    assert page.total_elements == 3
    assert page.total_pages == 2
    assert page.last_page is False

    last = service.get_all_customers(1, 2)
    assert [c.first_name for c in last.content] == ["C"]
    assert len(last.content) <= last.page_size
    assert last.last_page is True


def test_get_all_customers_empty_table_not_found(service):
    with pytest.raises(CustomerNotFoundError) as exc:
        service.get_all_customers(0, 10)
    assert exc.value.message == "Customer not found"


def test_get_all_customers_page_past_end_not_found(service, customer_factory):
    customer_factory("Only")
    with pytest.raises(CustomerNotFoundError):
        service.get_all_customers(1, 10)


def test_get_customer_by_id(service, customer_factory):
    customer = customer_factory("Lookup")
    dto = service.get_customer_by_id(customer.id)
    assert dto.customer_id == customer.id
    assert dto.first_name == "Lookup"
    with pytest.raises(CustomerNotFoundError):
        service.get_customer_by_id(customer.id + 99)


def test_update_customer_overwrites_four_fields(service, customer_factory):
    customer = customer_factory("Before", last_name="Old", email="old@example.com", phone_number="1")
    updated = service.update_customer(
        _dto(first_name="After", last_name="New", email="new@example.com", phone_number="2", customer_id=12345),
        customer.id,
    )
    assert updated.customer_id == customer.id
    assert (updated.first_name, updated.last_name, updated.email, updated.phone_number) == (
        "After", "New", "new@example.com", "2",
    )
    assert service.get_customer_by_id(customer.id).last_name == "New"


def test_update_customer_missing_fields_become_null(service, customer_factory):
    customer = customer_factory("Partial")
    updated = service.update_customer(schemas.CustomerDTO(first_name="Partial"), customer.id)
    assert updated.last_name is None
    assert updated.email is None
    assert updated.phone_number is None


def test_update_missing_customer_raises_structured_not_found(service):
    with pytest.raises(ResourceNotFoundError) as exc:
        service.update_customer(_dto(), 77)
    err = exc.value
    assert (err.resource_name, err.field_name, err.field_value) == ("Customer", "customerId", 77)
    assert err.status_code == 404


def test_delete_customer_returns_last_known_values(service, customer_factory):
    customer = customer_factory("Gone", last_name="Away")
    customer_id = customer.id
    deleted = service.delete_customer(customer_id)
    assert deleted.customer_id == customer_id
    assert deleted.first_name == "Gone"
    assert deleted.last_name == "Away"
    with pytest.raises(CustomerNotFoundError):
        service.get_customer_by_id(customer_id)


def test_delete_missing_customer_raises_structured_not_found(service):
    with pytest.raises(ResourceNotFoundError) as exc:
        service.delete_customer(5)
    assert (exc.value.resource_name, exc.value.field_name, exc.value.field_value) == ("Customer", "customerId", 5)


def test_john_doe_lifecycle(service):
    created = service.create_customer(_dto())
    assert created.customer_id == 1

    with pytest.raises(CustomerAlreadyExistsError):
        service.create_customer(_dto())

    page = service.get_all_customers(0, 10)
    assert [c.first_name for c in page.content] == ["John"]
    assert page.total_elements == 1

    updated = service.update_customer(_dto(last_name="Smith"), 1)
    assert updated.last_name == "Smith"

    deleted = service.delete_customer(1)
    assert deleted.last_name == "Smith"
    assert deleted.customer_id == 1

    with pytest.raises(CustomerNotFoundError):
        service.get_customer_by_id(1)
