"""Outcomes — tagged results returned by every resource operation.

Invariants:
    - Every handler returns exactly one of Ok, Invalid, NotFound
    - Invalid always maps to HTTP 400, NotFound to HTTP 404
    - Outcomes are immutable values (frozen dataclasses)

Design Decisions:
    - Tagged values over exceptions for expected failures: the router renders
      them with one exhaustive match, so every outcome kind has a visible branch
    - Unexpected failures are NOT outcomes — they stay exceptions and reach the
      catch-all handler in api/error_handlers.py
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful operation carrying its value (None for empty responses)."""
    value: T


@dataclass(frozen=True)
class Invalid:
    """Client input rejected before any persistence was touched."""
    message: str
    details: Any = None
    http_status: int = 400

    def to_response(self) -> dict:
        return {"error": self.message, "details": self.details}


@dataclass(frozen=True)
class NotFound:
    """No resource exists for the requested id."""
    message: str
    http_status: int = 404

    def to_response(self) -> dict:
        return {"error": self.message, "details": None}


Outcome = Union[Ok[T], Invalid, NotFound]
