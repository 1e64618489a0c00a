"""FastAPI dependencies shared by the route modules."""

from fastapi import Request

from ..services.contact_service import ContactService


def get_contact_service(request: Request) -> ContactService:
    """Return the service built by ``create_app`` for this application."""
    return request.app.state.contact_service
