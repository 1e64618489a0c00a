"""
Validation rules for submitted contacts.

Every rule is evaluated, even when an earlier one already failed, so
the form can show all problems at once.  Errors are returned in rule
order: email syntax, name length, phone length, phone format and
finally email uniqueness.
"""

import logging
import re
from typing import List, Optional

import phonenumbers
from email_validator import EmailNotValidError, validate_email

from ..core.config import settings
from ..core.db import ContactStore
from ..core.errors import FieldError
from ..schemas.contact import ContactBase


logger = logging.getLogger(__name__)

NAME_MIN_LENGTH = 3
PHONE_MIN_LENGTH = 11

INVALID_EMAIL = "Invalid email format"
INVALID_NAME = "Invalid name, min 3 characters"
PHONE_TOO_SHORT = "Invalid phone number, min 11 characters"
INVALID_PHONE = "Invalid phone number"
DUPLICATE_EMAIL = "Email already registered"

PHONE_PATTERN = re.compile(r"\+?\d+")

MOBILE_NUMBER_TYPES = {
    phonenumbers.PhoneNumberType.MOBILE,
    phonenumbers.PhoneNumberType.FIXED_LINE_OR_MOBILE,
}


def is_valid_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _is_mobile_in_region(value: str, region: str) -> bool:
    try:
        parsed = phonenumbers.parse(value, region)
    except phonenumbers.NumberParseException:
        return False
    if not phonenumbers.is_valid_number(parsed):
        return False
    return phonenumbers.number_type(parsed) in MOBILE_NUMBER_TYPES


def is_mobile_phone(value: str, region: Optional[str] = None) -> bool:
    """Return whether ``value`` is a valid mobile number in any region.

    Only digits with an optional leading ``+`` are accepted; separators
    such as spaces or dashes make the number invalid.  A national number
    is tried against ``region`` (``settings.phone_region`` by default)
    first and then against every other region ``phonenumbers`` knows.
    """
    if not PHONE_PATTERN.fullmatch(value):
        return False
    preferred = region or settings.phone_region
    if _is_mobile_in_region(value, preferred):
        return True
    if value.startswith("+"):
        # The country code already fixes the region.
        return False
    return any(
        _is_mobile_in_region(value, other)
        for other in sorted(phonenumbers.SUPPORTED_REGIONS)
        if other != preferred
    )


def validate_contact(
    payload: ContactBase,
    store: ContactStore,
    existing_email: Optional[str] = None,
) -> List[FieldError]:
    """Check ``payload`` against all contact rules.

    Parameters
    ----------
    payload : ContactBase
        Submitted name, email and phone.
    store : ContactStore
        Used to look up an existing contact with the same email.
    existing_email : Optional[str]
        Email the record currently has, given only on update.  A
        payload that keeps this email is not reported as a duplicate.

    Returns
    -------
    List[FieldError]
        Empty if the payload is acceptable.
    """
    errors: List[FieldError] = []

    if not is_valid_email(payload.email):
        errors.append(FieldError("email", INVALID_EMAIL))
    if len(payload.name) < NAME_MIN_LENGTH:
        errors.append(FieldError("name", INVALID_NAME))
    if len(payload.phone) < PHONE_MIN_LENGTH:
        errors.append(FieldError("phone", PHONE_TOO_SHORT))
    if not is_mobile_phone(payload.phone):
        errors.append(FieldError("phone", INVALID_PHONE))

    duplicate = store.find_one(email=payload.email)
    if duplicate is not None and (existing_email is None or payload.email != existing_email):
        errors.append(FieldError("email", DUPLICATE_EMAIL))

    if errors:
        logger.info(
            "Rejected contact payload: %s",
            ", ".join(sorted({e.field for e in errors})),
        )
    return errors
