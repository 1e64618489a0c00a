"""
Tests for ContactService
"""
import pytest

from contact_manager.app.core.db import MEMORY_DATABASE, ContactStore
from contact_manager.app.core.errors import (
    ContactNotFoundError,
    ContactValidationError,
    StoreError,
)
from contact_manager.app.schemas.contact import ContactUpdate
from contact_manager.app.services.contact_service import ContactService
from contact_manager.app.services.validation import (
    DUPLICATE_EMAIL,
    INVALID_EMAIL,
    INVALID_NAME,
)

from .conftest import OTHER_PHONE, VALID_PHONE


def _update_payload(contact, **overrides) -> ContactUpdate:
    fields = {
        "id": contact.id,
        "old_email": contact.email,
        "name": contact.name,
        "email": contact.email,
        "phone": contact.phone,
    }
    fields.update(overrides)
    return ContactUpdate(**fields)


@pytest.mark.asyncio
async def test_create_then_get_round_trip(service, make_payload):
    payload = make_payload()
    created = await service.create_contact(payload)
    fetched = await service.get_contact(created.id)
    assert (fetched.name, fetched.email, fetched.phone) == (payload.name, payload.email, payload.phone)


@pytest.mark.asyncio
async def test_short_name_writes_nothing(service, make_payload):
    with pytest.raises(ContactValidationError) as excinfo:
        await service.create_contact(make_payload(name="Al", email="a@x.com"))
    assert excinfo.value.messages_for("name") == [INVALID_NAME]
    assert excinfo.value.payload.name == "Al"
    assert await service.list_contacts() == []


@pytest.mark.asyncio
async def test_bad_email_rejected(service, make_payload):
    with pytest.raises(ContactValidationError) as excinfo:
        await service.create_contact(make_payload(email="bad-email"))
    assert excinfo.value.messages_for("email") == [INVALID_EMAIL]


@pytest.mark.asyncio
async def test_second_create_with_same_email_rejected(service, make_payload):
    await service.create_contact(make_payload())
    with pytest.raises(ContactValidationError) as excinfo:
        await service.create_contact(make_payload(name="Another Ali", phone=OTHER_PHONE))
    assert excinfo.value.messages_for("email") == [DUPLICATE_EMAIL]
    assert len(await service.list_contacts()) == 1


@pytest.mark.asyncio
async def test_update_with_unchanged_fields_accepted(service, make_payload):
    contact = await service.create_contact(make_payload())
    updated = await service.update_contact(contact.id, _update_payload(contact))
    assert updated == contact


@pytest.mark.asyncio
async def test_update_changes_fields_but_not_id(service, make_payload):
    contact = await service.create_contact(make_payload())
    payload = _update_payload(contact, name="Alice", email="alice@x.com", phone=OTHER_PHONE)
    await service.update_contact(contact.id, payload)
    stored = await service.get_contact(contact.id)
    assert stored.id == contact.id
    assert (stored.name, stored.email, stored.phone) == ("Alice", "alice@x.com", OTHER_PHONE)


@pytest.mark.asyncio
async def test_update_to_taken_email_rejected(service, make_payload):
    ali = await service.create_contact(make_payload())
    await service.create_contact(make_payload(name="Budi", email="budi@x.com", phone=OTHER_PHONE))
    with pytest.raises(ContactValidationError) as excinfo:
        await service.update_contact(ali.id, _update_payload(ali, email="budi@x.com"))
    assert excinfo.value.messages_for("email") == [DUPLICATE_EMAIL]
    assert (await service.get_contact(ali.id)).email == "ali@x.com"


@pytest.mark.asyncio
async def test_update_unknown_contact(service, make_payload):
    contact = await service.create_contact(make_payload())
    await service.delete_contact(contact.id)
    with pytest.raises(ContactNotFoundError):
        await service.update_contact(contact.id, _update_payload(contact))


@pytest.mark.asyncio
async def test_delete_twice_is_a_no_op(service, make_payload):
    contact = await service.create_contact(make_payload())
    await service.delete_contact(contact.id)
    await service.delete_contact(contact.id)
    assert await service.get_contact(contact.id) is None
    assert await service.list_contacts() == []


@pytest.mark.asyncio
async def test_delete_unknown_id(service):
    await service.delete_contact("does-not-exist")


@pytest.mark.asyncio
async def test_get_unknown_returns_none(service):
    assert await service.get_contact("does-not-exist") is None


@pytest.mark.asyncio
async def test_list_contacts(service, make_payload):
    await service.create_contact(make_payload())
    await service.create_contact(make_payload(name="Budi", email="budi@x.com", phone=VALID_PHONE))
    assert [c.name for c in await service.list_contacts()] == ["Ali", "Budi"]


@pytest.mark.asyncio
async def test_store_failure_propagates(make_payload):
    closed_service = ContactService(ContactStore(MEMORY_DATABASE))
    with pytest.raises(StoreError):
        await closed_service.create_contact(make_payload())
