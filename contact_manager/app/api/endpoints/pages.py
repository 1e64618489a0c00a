"""
Static pages: the landing page and the about page.

Neither page touches the contact store.
"""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from ...core.templates import render

router = APIRouter()

SAMPLE_STUDENTS = [
    {"name": "Satria", "email": "satria@example.com"},
    {"name": "Aji", "email": "aji@example.com"},
    {"name": "Rama", "email": "rama@example.com"},
]


@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """Landing page with a fixed sample list."""
    return render(
        request,
        "index.html",
        {"title": "Home", "name": "Satria", "students": SAMPLE_STUDENTS},
    )


@router.get("/about", response_class=HTMLResponse)
async def about(request: Request):
    return render(request, "about.html", {"title": "About"})
