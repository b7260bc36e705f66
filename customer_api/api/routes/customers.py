"""Customer Routes — five endpoints mapped one-to-one onto gateway operations.

Invariants:
    - GET /customers and POST /customers operate on the collection
    - GET /customer/{id} (singular path) reads one record; PUT and DELETE use /customers/{id}
    - Create and update take their fields from the JSON body
    - Errors are raised, never caught here: api/error_handlers shapes every failure

Design Decisions:
    - Gateway injected via Depends(get_customer_gateway) so tests can override it
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from customer_api.core.domain_types import CustomerId
from customer_api.core.repository_protocols import CustomerRepository
from customer_api.infrastructure.database import get_db
from customer_api.schemas.customer import (
    CustomerCreate, CustomerEnvelope, CustomerListResponse,
    CustomerResponse, CustomerUpdate, CustomerUpdatedResponse,
)
from customer_api.services.customer_gateway import CustomerGateway

logger = logging.getLogger(__name__)
router = APIRouter(tags=["customers"])


def get_customer_gateway(
    db: AsyncSession = Depends(get_db),
) -> CustomerRepository:
    """FastAPI dependency — one gateway per request, bound to its DB session."""
    return CustomerGateway(db)


@router.get("/customers", response_model=CustomerListResponse)
async def list_customers(
    gateway: CustomerRepository = Depends(get_customer_gateway),
):
    """Get all customers."""
    customers = await gateway.list_all()
    return {"customers": customers}


@router.get("/customer/{customer_id}", response_model=CustomerEnvelope)
async def get_customer(
    customer_id: int,
    gateway: CustomerRepository = Depends(get_customer_gateway),
):
    """Get a particular customer by id."""
    customer = await gateway.get_by_id(CustomerId(customer_id))
    return {"customer": customer}


@router.post(
    "/customers", response_model=CustomerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_customer(
    body: CustomerCreate,
    gateway: CustomerRepository = Depends(get_customer_gateway),
):
    """Create a new customer."""
    return await gateway.insert(body.model_dump())


@router.put("/customers/{customer_id}", response_model=CustomerUpdatedResponse)
async def update_customer(
    customer_id: int,
    body: CustomerUpdate,
    gateway: CustomerRepository = Depends(get_customer_gateway),
):
    """Update the fields present in the body; absent fields stay untouched."""
    customer = await gateway.update_by_id(
        CustomerId(customer_id), body.model_dump(exclude_unset=True),
    )
    return {
        "message": f"The customer with ID {customer.id} is now updated",
        "customer": customer,
    }


@router.delete("/customers/{customer_id}", response_model=str)
async def delete_customer(
    customer_id: int,
    gateway: CustomerRepository = Depends(get_customer_gateway),
):
    """Delete a customer; answers with a confirmation string."""
    await gateway.delete_by_id(CustomerId(customer_id))
    return f"The customer with ID {customer_id} has been deleted"
