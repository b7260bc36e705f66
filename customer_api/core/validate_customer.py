"""Customer Validation — pure field-constraint checks run before every write.

Invariants:
    - validate_customer is PURE: returns a result, never raises for bad data
    - Checks run in a fixed order (first_name, last_name, city); first failure wins
    - Missing or non-string values fail their check (None has no length, no membership)

Design Decisions:
    - Result object over exceptions: the gateway decides how to surface failures
    - Constraints imported from domain_types: single source of truth
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from customer_api.core.domain_types import (
    City, FIRST_NAME_MIN_LENGTH, LAST_NAME_MIN_LENGTH,
)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validate_customer. field/message set only on failure."""
    ok: bool
    field: str | None = None
    message: str | None = None


VALID = ValidationResult(ok=True)


def _check_min_length(candidate: Mapping[str, Any], field: str, minimum: int):
    value = candidate.get(field)
    if not isinstance(value, str) or len(value) < minimum:
        return ValidationResult(
            ok=False, field=field,
            message=f"{field} must be at least {minimum} characters long",
        )
    return None


def _check_city(candidate: Mapping[str, Any]):
    if candidate.get("city") not in City.values():
        return ValidationResult(
            ok=False, field="city",
            message=f"city must be one of: {', '.join(City.values())}",
        )
    return None


def validate_customer(candidate: Mapping[str, Any]) -> ValidationResult:
    """Return the first violated constraint of a candidate record, or VALID."""
    failure = (
        _check_min_length(candidate, "first_name", FIRST_NAME_MIN_LENGTH)
        or _check_min_length(candidate, "last_name", LAST_NAME_MIN_LENGTH)
        or _check_city(candidate)
    )
    return failure or VALID
