"""
Pydantic schemas for contacts.

``ContactCreate`` and ``ContactUpdate`` describe what the HTML forms
submit.  Field values are kept as plain strings: the rules in
``services.validation`` decide whether they are acceptable so that
every violation can be reported back on the form at once.
``Contact`` is the stored record.
"""

from pydantic import BaseModel, ConfigDict, Field


class ContactBase(BaseModel):
    name: str = Field("", examples=["Satria"])
    email: str = Field("", examples=["satria@example.com"])
    phone: str = Field("", examples=["08123456789"])


class ContactCreate(ContactBase):
    """Payload of the creation form."""


class ContactUpdate(ContactBase):
    """Payload of the edit form.

    ``id`` identifies the record to overwrite and ``old_email`` is the
    email the form was loaded with.  The form posts them as ``_id`` and
    ``oldEmail``.
    """

    id: str = Field(..., alias="_id")
    old_email: str = Field("", alias="oldEmail")

    model_config = ConfigDict(populate_by_name=True)


class Contact(ContactBase):
    """A stored contact."""

    id: str

    model_config = ConfigDict(from_attributes=True)
