"""
Customers API endpoints.

Admin routes create and delete customers; public routes list, fetch and
update them. The prefixes are naming only and are not enforced.
Domain errors raised by the service propagate to the app-level handlers.
"""
from fastapi import APIRouter, Depends, Path, Query, status

from customer_service.db import schemas
from customer_service.api.deps import get_customer_service
from customer_service.services.customer_service import CustomerService

router = APIRouter(prefix="/api", tags=["customers"])

# Ids are bigint columns; paging values must fit a 32-bit int
MAX_CUSTOMER_ID = 2**63 - 1
MIN_CUSTOMER_ID = -(2**63)
MAX_PAGE_VALUE = 2**31 - 1


@router.post("/admin/customers", response_model=schemas.CustomerDTO, status_code=status.HTTP_200_OK)
def create_customer_endpoint(
    customer: schemas.CustomerDTO,
    service: CustomerService = Depends(get_customer_service),
):
    return service.create_customer(customer)


@router.get("/public/customers", response_model=schemas.CustomerResponse)
def get_all_customers_endpoint(
    page_number: int = Query(..., alias="pageNumber", ge=0, le=MAX_PAGE_VALUE),
    page_size: int = Query(..., alias="pageSize", ge=1, le=MAX_PAGE_VALUE),
    service: CustomerService = Depends(get_customer_service),
):
    """Return one zero-based page of customers; an empty page is a 404."""
    return service.get_all_customers(page_number, page_size)


@router.get("/public/customers/{customerId}", response_model=schemas.CustomerDTO)
def get_customer_endpoint(
    customer_id: int = Path(..., alias="customerId", ge=MIN_CUSTOMER_ID, le=MAX_CUSTOMER_ID),
    service: CustomerService = Depends(get_customer_service),
):
    return service.get_customer_by_id(customer_id)


@router.put("/public/customers/{customerId}", response_model=schemas.CustomerDTO)
def update_customer_endpoint(
    customer: schemas.CustomerDTO,
    customer_id: int = Path(..., alias="customerId", ge=MIN_CUSTOMER_ID, le=MAX_CUSTOMER_ID),
    service: CustomerService = Depends(get_customer_service),
):
    return service.update_customer(customer, customer_id)


@router.delete("/admin/customers/{customerId}", response_model=schemas.CustomerDTO)
def delete_customer_endpoint(
    customer_id: int = Path(..., alias="customerId", ge=MIN_CUSTOMER_ID, le=MAX_CUSTOMER_ID),
    service: CustomerService = Depends(get_customer_service),
):
    """Delete a customer and return the record as it was before deletion."""
    return service.delete_customer(customer_id)
