"""Transport-level request limits applied before any route runs."""
from starlette.requests import Request
from starlette.responses import PlainTextResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from App.Services.utility import logging_function


class ContentLengthLimitMiddleware:
    """Reject requests whose body exceeds ``max_body_bytes``.

    A declared ``Content-Length`` is checked up front. Bodies sent without
    one (chunked) are buffered until they end or pass the limit, then
    replayed to the application.
    """

    def __init__(self, app: ASGIApp, max_body_bytes: int):
        if max_body_bytes <= 0:
            raise ValueError(f"max_body_bytes must be positive, got {max_body_bytes}")
        self.app = app
        self.max_body_bytes = max_body_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request(scope)
        declared = request.headers.get("content-length")
        if declared is not None:
            try:
                size = int(declared)
            except ValueError:
                await PlainTextResponse("Invalid Content-Length\n", status_code=400)(scope, receive, send)
                return
            if size > self.max_body_bytes:
                await self._reject(scope, receive, send, size)
                return
            await self.app(scope, receive, send)
            return

        buffered: list[Message] = []
        total = 0
        while True:
            message = await receive()
            buffered.append(message)
            if message["type"] != "http.request":
                break
            total += len(message.get("body", b""))
            if total > self.max_body_bytes:
                await self._reject(scope, receive, send, total)
                return
            if not message.get("more_body", False):
                break

        async def replay() -> Message:
            if buffered:
                return buffered.pop(0)
            return await receive()

        await self.app(scope, replay, send)

    async def _reject(self, scope: Scope, receive: Receive, send: Send, size: int) -> None:
        logging_function(
            f"Rejected {scope['method']} {scope['path']}: body of at least {size} bytes "
            f"exceeds limit of {self.max_body_bytes}",
            level="warning",
        )
        await PlainTextResponse("Payload too large\n", status_code=413)(scope, receive, send)
