"""Domain Types — rich types for the customer record.

Invariants:
    - CustomerId wraps the integer primary key assigned by the store (1..2**31-1)
    - City enumerates every accepted city; membership is exact (case-sensitive)
    - Minimum name lengths live here and nowhere else

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum for City: serializes to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

CustomerId = NewType("CustomerId", int)

# Bounds of the INTEGER primary key; ids outside can never exist
MIN_CUSTOMER_ID: int = 1
MAX_CUSTOMER_ID: int = 2**31 - 1


# ─── Field Constraints ───────────────────────────────────────────

FIRST_NAME_MIN_LENGTH: int = 3
LAST_NAME_MIN_LENGTH: int = 2


# ─── Enums ───────────────────────────────────────────────────────

class City(str, Enum):
    """Cities a customer may live in."""
    AMSTERDAM = "Amsterdam"
    ROTTERDAM = "Rotterdam"
    THE_HAGUE = "The Hague"
    EINDHOVEN = "Eindhoven"

    @classmethod
    def values(cls) -> list[str]:
        return [c.value for c in cls]
