from typing import List, Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CustomerDTO(BaseModel):
    """Wire representation of a customer.

    Serialized with camelCase keys (``firstName``, ``customerId``...); input
    accepts either camelCase or snake_case.
    """

    customer_id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CustomerResponse(BaseModel):
    content: List[CustomerDTO]
    page_number: int
    page_size: int
    total_elements: int
    total_pages: int
    last_page: bool
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
