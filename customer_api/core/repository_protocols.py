"""Boundary Protocols — contract between the HTTP router and the persistence gateway.

Invariants:
    - Routes depend on CustomerRepository, never on a concrete gateway class
    - Every method is one logical unit of work against the store
    - Failures are raised as core.errors types (NotFound, Validation, Store)

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
    - Async methods: implementations do IO; callers await them from route handlers
"""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from customer_api.core.domain_types import CustomerId


class CustomerLike(Protocol):
    """Structural contract for customer records returned by a repository."""
    id: int
    first_name: str
    last_name: str
    city: str


class CustomerRepository(Protocol):
    """Contract for customer persistence — implemented by services.customer_gateway."""
    async def list_all(self) -> Sequence[CustomerLike]: ...
    async def get_by_id(self, customer_id: CustomerId) -> CustomerLike: ...
    async def insert(self, fields: Mapping[str, Any]) -> CustomerLike: ...
    async def update_by_id(
        self, customer_id: CustomerId, fields: Mapping[str, Any],
    ) -> CustomerLike: ...
    async def delete_by_id(self, customer_id: CustomerId) -> None: ...
