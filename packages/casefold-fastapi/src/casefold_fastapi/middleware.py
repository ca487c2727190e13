"""FastAPI ASGI middleware for case-insensitive request paths.

CasefoldMiddleware rewrites the request path before routing so that
routes and static file mounts match regardless of the casing a client
used. When a path is rewritten, the original path is exposed in an
X-Original-URI header on both the request (for handlers) and the
response (for the client).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from starlette.concurrency import run_in_threadpool
from starlette.datastructures import MutableHeaders

from casefold.domain.rewrite import RewriteOutcome, quote_path
from casefold.factories import create_path_rewriter

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Message, Receive, Scope, Send
    from casefold.domain.settings import CasefoldSettings
    from casefold.usecases.path_rewriter import PathRewriter

logger = logging.getLogger(__name__)


class CasefoldMiddleware:
    """ASGI middleware that rewrites request paths case-insensitively.

    The middleware operates by:
    1. Deciding the routing path via PathRewriter for each HTTP request
    2. Replacing scope["path"] and scope["raw_path"] when rewritten
    3. Adding the original-path header to the request and the response
    4. Failing open (leaving the path alone) if the decision fails

    The part of the path below scope["root_path"] is rewritten; the mount
    prefix itself is kept as received. The query string is never touched.

    A rewritten raw_path is re-encoded from the decoded path, which would
    turn an encoded slash into a real one. Requests whose raw_path contains
    %2F are therefore passed through unrewritten.

    In "fs" mode the decision reads directories, so it runs in the
    threadpool instead of on the event loop.

    Usage:
        from casefold import load_settings
        from casefold_fastapi.middleware import CasefoldMiddleware

        app.add_middleware(
            CasefoldMiddleware,
            settings=load_settings(mode="fold", exclude=["/api/CaseSensitive/*"]),
        )
    """

    def __init__(
        self,
        app: "ASGIApp",
        settings: CasefoldSettings | None = None,
        rewriter: PathRewriter | None = None,
    ) -> None:
        """Initialize the casefold middleware.

        Args:
            app: ASGI application to wrap
            settings: Casefold settings used to build a PathRewriter.
            rewriter: Prebuilt PathRewriter; takes precedence over settings.
                     If both are None, middleware passes all requests through.
        """
        self.app = app
        if rewriter is None and settings is not None:
            rewriter = create_path_rewriter(settings)
        self.rewriter = rewriter

        if self.rewriter is None:
            logger.debug("No casefold settings given. Path rewriting disabled.")

    async def __call__(self, scope: "Scope", receive: "Receive", send: "Send") -> None:
        """Process request through path rewriting.

        Non-HTTP scopes (websocket, lifespan) pass through unchanged.

        Args:
            scope: ASGI scope dictionary
            receive: ASGI receive callable
            send: ASGI send callable
        """
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        if self.rewriter is None or self.rewriter.is_passthrough:
            await self.app(scope, receive, send)
            return

        raw_path = scope.get("raw_path")
        if raw_path and b"%2f" in raw_path.lower():
            logger.debug(f"Casefold skipped {raw_path!r}: encoded slash in path")
            await self.app(scope, receive, send)
            return

        original = scope.get("path", "")
        root_path = scope.get("root_path", "")
        if root_path and original.startswith(root_path):
            route_path = original[len(root_path) :]
        else:
            root_path = ""
            route_path = original

        try:
            outcome = await self._decide(self.rewriter, route_path)
        except Exception as e:
            # Fail open: serve the path as received
            logger.warning(f"Casefold decision failed for {original!r}: {e}. Path unchanged.")
            await self.app(scope, receive, send)
            return

        if not outcome.rewritten:
            await self.app(scope, receive, send)
            return

        header_name = self.rewriter.settings.header_name
        header_value = quote_path(original)
        new_path = root_path + outcome.path

        scope = dict(scope)
        scope["path"] = new_path
        scope["raw_path"] = quote_path(new_path).encode("ascii")
        request_headers = MutableHeaders(scope=scope)
        request_headers[header_name] = header_value

        async def send_with_original_header(message: "Message") -> None:
            if message["type"] == "http.response.start":
                MutableHeaders(scope=message)[header_name] = header_value
            await send(message)

        logger.debug(f"Casefold rewrote {original!r} to {new_path!r}")
        await self.app(scope, receive, send_with_original_header)

    async def _decide(self, rewriter: PathRewriter, route_path: str) -> RewriteOutcome:
        """Run the rewrite decision, off the event loop if it reads directories.

        Args:
            rewriter: Rewriter deciding the path
            route_path: Path relative to the application's root_path

        Returns:
            RewriteOutcome for route_path
        """
        if rewriter.performs_io:
            return await run_in_threadpool(rewriter.decide, route_path)
        return rewriter.decide(route_path)
