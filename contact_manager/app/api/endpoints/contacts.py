"""
Contact routes.

HTML forms post ``application/x-www-form-urlencoded`` bodies.  Updates
and deletes arrive as POST requests with ``?_method=PUT`` or
``?_method=DELETE`` and are rewritten by ``MethodOverrideMiddleware``
before they reach these handlers.

A successful write queues a flash message and redirects to the
contact list with ``303 See Other``.  A rejected write renders the
originating form again with the field errors and the values the user
typed.
"""

from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from ..deps import get_contact_service
from ...core.errors import ContactNotFoundError, ContactValidationError
from ...core.flash import flash, pop_flash
from ...core.templates import render
from ...schemas.contact import ContactCreate, ContactUpdate
from ...services.contact_service import ContactService

router = APIRouter()

MSG_ADDED = "Data contact successfully added"
MSG_UPDATED = "Data contact successfully updated"
MSG_DELETED = "Data contact successfully deleted"

CREATE_TITLE = "Contact | Create Data"
EDIT_TITLE = "Contact | Edit Data"


def _redirect_to_list() -> RedirectResponse:
    return RedirectResponse("/contact", status_code=status.HTTP_303_SEE_OTHER)


@router.get("", response_class=HTMLResponse)
async def list_contacts(
    request: Request,
    service: ContactService = Depends(get_contact_service),
):
    """List every contact and show the pending flash message once."""
    contacts = await service.list_contacts()
    return render(
        request,
        "contact/index.html",
        {"title": "Contact", "contacts": contacts, "msg": pop_flash(request)},
    )


@router.get("/create", response_class=HTMLResponse)
async def create_form(request: Request):
    return render(request, "contact/create.html", {"title": CREATE_TITLE, "errors": []})


@router.post("", response_class=HTMLResponse)
async def create_contact(
    request: Request,
    name: str = Form(""),
    email: str = Form(""),
    phone: str = Form(""),
    service: ContactService = Depends(get_contact_service),
):
    """Validate and store a new contact."""
    data = ContactCreate(name=name, email=email, phone=phone)
    try:
        await service.create_contact(data)
    except ContactValidationError as exc:
        return render(
            request,
            "contact/create.html",
            {"title": CREATE_TITLE, "errors": exc.errors, "contact": data},
        )
    flash(request, MSG_ADDED)
    return _redirect_to_list()


@router.put("", response_class=HTMLResponse)
async def update_contact(
    request: Request,
    contact_id: str = Form(..., alias="_id"),
    old_email: str = Form("", alias="oldEmail"),
    name: str = Form(""),
    email: str = Form(""),
    phone: str = Form(""),
    service: ContactService = Depends(get_contact_service),
):
    """Validate and overwrite an existing contact.

    ``oldEmail`` is the email the edit form was loaded with; keeping it
    unchanged is not reported as a duplicate.
    """
    data = ContactUpdate(id=contact_id, old_email=old_email, name=name, email=email, phone=phone)
    try:
        await service.update_contact(contact_id, data)
    except ContactValidationError as exc:
        return render(
            request,
            "contact/edit.html",
            {"title": EDIT_TITLE, "errors": exc.errors, "contact": data, "old_email": old_email},
        )
    except ContactNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Contact not found")
    flash(request, MSG_UPDATED)
    return _redirect_to_list()


@router.delete("", response_class=HTMLResponse)
async def delete_contact(
    request: Request,
    contact_id: str = Form("", alias="id"),
    service: ContactService = Depends(get_contact_service),
):
    """Delete a contact.  Unknown ids are ignored."""
    await service.delete_contact(contact_id)
    flash(request, MSG_DELETED)
    return _redirect_to_list()


@router.get("/{contact_id}/edit", response_class=HTMLResponse)
async def edit_form(
    request: Request,
    contact_id: str,
    service: ContactService = Depends(get_contact_service),
):
    contact = await service.get_contact(contact_id)
    if contact is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Contact not found")
    return render(
        request,
        "contact/edit.html",
        {"title": EDIT_TITLE, "errors": [], "contact": contact, "old_email": contact.email},
    )


@router.get("/{contact_id}", response_class=HTMLResponse)
async def contact_detail(
    request: Request,
    contact_id: str,
    service: ContactService = Depends(get_contact_service),
):
    """Show a single contact."""
    contact = await service.get_contact(contact_id)
    if contact is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Contact not found")
    return render(request, "contact/detail.html", {"title": "Contact's Detail", "contact": contact})
