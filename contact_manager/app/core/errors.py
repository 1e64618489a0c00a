"""
Exception types shared by the store, the services and the web layer.

``ContactValidationError`` is recoverable: handlers catch it and show
the originating form again.  ``ContactNotFoundError`` maps to HTTP 404.
``StoreError`` is not handled locally; an application level exception
handler logs it and answers with HTTP 500.
"""

from dataclasses import dataclass
from typing import Any, List, Optional


@dataclass(frozen=True)
class FieldError:
    """A single rule violation for one form field."""

    field: str
    message: str


class ContactValidationError(Exception):
    """Raised when a submitted contact payload breaks one or more rules."""

    def __init__(self, errors: List[FieldError], payload: Optional[Any] = None) -> None:
        self.errors = list(errors)
        self.payload = payload
        super().__init__("; ".join(f"{e.field}: {e.message}" for e in self.errors))

    def messages_for(self, field: str) -> List[str]:
        """Return the messages attached to ``field``, in rule order."""
        return [e.message for e in self.errors if e.field == field]


class ContactNotFoundError(LookupError):
    """Raised when no contact exists with the requested id."""

    def __init__(self, contact_id: str) -> None:
        self.contact_id = contact_id
        super().__init__(f"Contact {contact_id} not found")


class StoreError(RuntimeError):
    """Raised when the underlying database fails."""
