from fastapi import HTTPException
from starlette.datastructures import Headers, MutableHeaders
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from grok_proxy.core.config import settings


class PermissiveCORSMiddleware(CORSMiddleware):
    """
    CORSMiddleware that never refuses.

    - every OPTIONS request is a successful preflight: 204, empty body
    - every other response gets the CORS headers, Origin header or not
    """

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_headers = Headers(scope=scope)
        if scope["method"] == "OPTIONS":
            response = self.preflight_response(request_headers=request_headers)
            await response(scope, receive, send)
            return

        await self.simple_response(scope, receive, send, request_headers=request_headers)

    def preflight_response(self, request_headers: Headers) -> Response:
        headers = dict(self.preflight_headers)
        origin = request_headers.get("origin")
        if not self.allow_all_origins and origin and self.is_allowed_origin(origin):
            headers["Access-Control-Allow-Origin"] = origin
        return Response(status_code=204, headers=headers)

    async def send(self, message: Message, send: Send, request_headers: Headers) -> None:
        if "origin" in request_headers:
            await super().send(message, send, request_headers)
            return

        if message["type"] == "http.response.start":
            message.setdefault("headers", [])
            MutableHeaders(scope=message).update(self.simple_headers)
        await send(message)


class PayloadTooLargeError(HTTPException):
    def __init__(self) -> None:
        super().__init__(status_code=413, detail="request entity too large")


class BodySizeLimitMiddleware:
    """
    Enforce settings.MAX_BODY_SIZE while the body is read.

    A declared Content-Length over the limit fails on the first read; chunked
    bodies fail as soon as the running byte count passes it. The error is
    raised into the route so the app's exception handlers answer it.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        limit = settings.MAX_BODY_SIZE
        declared = Headers(scope=scope).get("content-length", "")
        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            if declared.isdigit() and int(declared) > limit:
                raise PayloadTooLargeError()

            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > limit:
                    raise PayloadTooLargeError()
            return message

        await self.app(scope, limited_receive, send)
