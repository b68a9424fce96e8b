"""Exact-path routes that answer every HTTP method."""

from starlette.routing import Route, request_response


class AnyMethodEndpoint:
    """ASGI wrapper around a ``Request -> Response`` handler.

    Starlette pins plain function endpoints to GET; an ASGI callable object
    keeps ``methods=None`` so the route matches any method.
    """

    def __init__(self, handler):
        self.handler = handler
        self.app = request_response(handler)

    async def __call__(self, scope, receive, send):
        await self.app(scope, receive, send)


def any_method_route(path: str, handler) -> Route:
    return Route(path, AnyMethodEndpoint(handler), name=handler.__name__)
