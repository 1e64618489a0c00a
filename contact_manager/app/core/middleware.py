"""
HTTP method override for HTML forms.

Browsers can only submit forms with GET or POST.  Forms that need to
update or delete a contact post to ``/contact?_method=PUT`` (or
``DELETE``) and this middleware rewrites the request method before
routing takes place.
"""

import logging
from urllib.parse import parse_qs

from starlette.types import ASGIApp, Receive, Scope, Send


logger = logging.getLogger(__name__)

OVERRIDE_PARAM = "_method"
ALLOWED_METHODS = {"PUT", "PATCH", "DELETE"}


class MethodOverrideMiddleware:
    """Pure ASGI middleware that honours ``?_method=`` on POST requests."""

    def __init__(self, app: ASGIApp, param: str = OVERRIDE_PARAM) -> None:
        self.app = app
        self.param = param

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["method"] == "POST":
            query = parse_qs(scope.get("query_string", b"").decode("latin-1"))
            values = query.get(self.param)
            if values:
                method = values[0].upper()
                if method in ALLOWED_METHODS:
                    logger.debug("Overriding POST %s as %s", scope["path"], method)
                    scope = dict(scope, method=method)
        await self.app(scope, receive, send)
