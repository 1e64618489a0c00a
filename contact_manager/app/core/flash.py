"""
One-shot flash messages kept in the user's session.

A message is stored under a single session key and removed by the
first read, so it shows up on exactly one rendered page.  Requires
Starlette's ``SessionMiddleware``.
"""

from typing import Optional

from fastapi import Request


FLASH_KEY = "msg"


def flash(request: Request, message: str) -> None:
    """Queue ``message`` for the next page this session renders."""
    request.session[FLASH_KEY] = message


def pop_flash(request: Request) -> Optional[str]:
    """Return the pending message, if any, and clear it."""
    return request.session.pop(FLASH_KEY, None)
