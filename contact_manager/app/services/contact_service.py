"""
Service layer for contacts.

``ContactService`` runs the validation rules before every write and
delegates persistence to a ``ContactStore``.  Writes are all or
nothing: when validation fails, ``ContactValidationError`` is raised
before the store is touched.  Store failures are not caught here and
reach the caller as ``StoreError``.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ..core.db import ContactStore
from ..core.errors import ContactNotFoundError, ContactValidationError
from ..schemas.contact import Contact, ContactCreate, ContactUpdate
from .validation import validate_contact


logger = logging.getLogger(__name__)


class ContactService:
    """Create, read, update and delete contacts."""

    def __init__(self, store: ContactStore) -> None:
        self.store = store

    async def list_contacts(self) -> List[Contact]:
        """Return every contact in store order."""
        return self.store.find()

    async def get_contact(self, contact_id: str) -> Optional[Contact]:
        """Return the contact with ``contact_id`` or ``None``."""
        return self.store.find_by_id(contact_id)

    async def create_contact(self, data: ContactCreate) -> Contact:
        """Validate ``data`` and insert it as a new contact.

        Raises ``ContactValidationError`` carrying the field errors and
        the submitted payload if any rule fails.
        """
        errors = validate_contact(data, self.store)
        if errors:
            raise ContactValidationError(errors, data)
        contact = self.store.insert(data.model_dump(include={"name", "email", "phone"}))
        logger.info("Created contact %s", contact.id)
        return contact

    async def update_contact(self, contact_id: str, data: ContactUpdate) -> Contact:
        """Validate ``data`` and overwrite the contact ``contact_id``.

        ``data.old_email`` is the email the edit form was loaded with;
        keeping it does not count as a duplicate.  The id itself is
        never changed.
        """
        errors = validate_contact(data, self.store, existing_email=data.old_email)
        if errors:
            raise ContactValidationError(errors, data)
        fields = data.model_dump(include={"name", "email", "phone"})
        if not self.store.update(contact_id, fields):
            raise ContactNotFoundError(contact_id)
        logger.info("Updated contact %s", contact_id)
        return Contact(id=contact_id, **fields)

    async def delete_contact(self, contact_id: str) -> None:
        """Delete ``contact_id``.  Deleting a missing contact is a no-op."""
        if self.store.delete(contact_id):
            logger.info("Deleted contact %s", contact_id)
        else:
            logger.debug("Delete of unknown contact %s ignored", contact_id)
