"""
Top-level router.

Aggregates the static page routes and the contact routes.  When a new
area is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import contacts, pages

router = APIRouter()

router.include_router(pages.router, tags=["pages"])
router.include_router(contacts.router, prefix="/contact", tags=["contacts"])
