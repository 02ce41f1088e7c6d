"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ResourceId wraps a positive int — storage assigns it, never reused
    - ResourceStatus is the only source of valid status values

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: serializes to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ResourceId = NewType("ResourceId", int)

# SQLite rowids are signed 64-bit integers
MAX_RESOURCE_ID = 2**63 - 1


# ─── Enums ───────────────────────────────────────────────────────

class ResourceStatus(str, Enum):
    """Resource publication states — maps to DB `status` column."""
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


RESOURCE_STATUSES: tuple[str, ...] = tuple(s.value for s in ResourceStatus)


# ─── Listing defaults ────────────────────────────────────────────

DEFAULT_LIST_LIMIT = 50
MAX_LIST_LIMIT = 1000
