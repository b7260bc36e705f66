"""Customer Gateway — translates CRUD intents into single-record store operations.

Invariants:
    - Each public method is one logical unit of work: at most one commit
    - Writes are validated by core.validate_customer first; an invalid record is never added
    - Missing rows (including ids outside the INTEGER range) raise CustomerNotFoundError;
      SQLAlchemy failures roll back and raise StoreError; no retries
    - id is assigned by the store on insert and never changed by update

Design Decisions:
    - Gateway wraps an AsyncSession injected per request (no process-wide table handle)
    - update merges only the provided fields, then validates the merged record
"""

import logging
from collections.abc import Mapping
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from customer_api.core.domain_types import (
    CustomerId, MAX_CUSTOMER_ID, MIN_CUSTOMER_ID,
)
from customer_api.core.errors import (
    CustomerNotFoundError, CustomerValidationError, StoreError,
)
from customer_api.core.validate_customer import validate_customer
from customer_api.models.customer import Customer

logger = logging.getLogger(__name__)

WRITABLE_FIELDS = ("first_name", "last_name", "city")


def _writable(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Keep only columns a client may set (drops id and unknown keys)."""
    return {k: fields[k] for k in WRITABLE_FIELDS if k in fields}


def _ensure_valid(candidate: Mapping[str, Any]) -> None:
    result = validate_customer(candidate)
    if not result.ok:
        raise CustomerValidationError(result.message, result.field)


class CustomerGateway:
    """SQLAlchemy-backed implementation of core.repository_protocols.CustomerRepository."""

    def __init__(self, db: AsyncSession):
        self._db = db

    @asynccontextmanager
    async def _unit_of_work(self, operation: str) -> AsyncGenerator[None, None]:
        """Roll back and surface any store failure as StoreError."""
        try:
            yield
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(
                f"Customer {operation} failed: {e}",
                extra={"operation": operation, "error_code": "STORE_ERROR"},
            )
            raise StoreError(type(e).__name__, operation) from e

    async def _load(self, customer_id: CustomerId) -> Customer:
        # Out-of-range ids overflow the driver's integer binding
        if not MIN_CUSTOMER_ID <= customer_id <= MAX_CUSTOMER_ID:
            raise CustomerNotFoundError(customer_id)
        result = await self._db.execute(
            select(Customer).where(Customer.id == customer_id),
        )
        customer = result.scalar_one_or_none()
        if customer is None:
            raise CustomerNotFoundError(customer_id)
        return customer

    async def list_all(self) -> list[Customer]:
        async with self._unit_of_work("list"):
            result = await self._db.execute(
                select(Customer).order_by(Customer.id),
            )
            return list(result.scalars().all())

    async def get_by_id(self, customer_id: CustomerId) -> Customer:
        async with self._unit_of_work("get"):
            return await self._load(customer_id)

    async def insert(self, fields: Mapping[str, Any]) -> Customer:
        """Validate and persist a new customer; returns it with its generated id."""
        values = _writable(fields)
        _ensure_valid(values)
        async with self._unit_of_work("insert"):
            customer = Customer(**values)
            self._db.add(customer)
            await self._db.commit()
            await self._db.refresh(customer)
        logger.info(
            f"Customer {customer.id} created",
            extra={"customer_id": customer.id, "operation": "insert"},
        )
        return customer

    async def update_by_id(
        self, customer_id: CustomerId, fields: Mapping[str, Any],
    ) -> Customer:
        """Apply the given field changes to an existing customer."""
        async with self._unit_of_work("update"):
            customer = await self._load(customer_id)
            merged = {**customer.to_dict(), **_writable(fields)}
            _ensure_valid(merged)
            for key, value in _writable(fields).items():
                setattr(customer, key, value)
            await self._db.commit()
            await self._db.refresh(customer)
        logger.info(
            f"The customer with ID {customer.id} is now updated",
            extra={"customer_id": customer.id, "operation": "update"},
        )
        return customer

    async def delete_by_id(self, customer_id: CustomerId) -> None:
        async with self._unit_of_work("delete"):
            customer = await self._load(customer_id)
            await self._db.delete(customer)
            await self._db.commit()
        logger.info(
            f"Customer {customer_id} deleted",
            extra={"customer_id": customer_id, "operation": "delete"},
        )
