"""Customer Schemas — Pydantic models for the customer resource's API boundary.

Invariants:
    - Request bodies carry only first_name, last_name, city (id is never accepted)
    - Field constraints are NOT duplicated here: core.validate_customer owns them,
      so a missing or short field yields the same error whichever route receives it
    - CustomerUpdate fields are all optional; only fields present in the body are applied

Design Decisions:
    - extra="ignore": unknown keys (including "id") are dropped, not rejected
    - CustomerResponse built from ORM attributes (from_attributes=True)
"""

from pydantic import BaseModel, ConfigDict


class CustomerCreate(BaseModel):
    """Body of POST /customers."""
    model_config = ConfigDict(extra="ignore")

    first_name: str | None = None
    last_name: str | None = None
    city: str | None = None


class CustomerUpdate(BaseModel):
    """Body of PUT /customers/{id} — partial update."""
    model_config = ConfigDict(extra="ignore")

    first_name: str | None = None
    last_name: str | None = None
    city: str | None = None


class CustomerResponse(BaseModel):
    """Public representation of a customer."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    city: str


class CustomerListResponse(BaseModel):
    customers: list[CustomerResponse]


class CustomerEnvelope(BaseModel):
    customer: CustomerResponse


class CustomerUpdatedResponse(BaseModel):
    message: str
    customer: CustomerResponse
