"""
Web routes.

``router`` aggregates the page routers defined in ``endpoints``.  Each
area (static pages, contacts) lives in its own module and exposes an
``APIRouter`` named ``router``.
"""
