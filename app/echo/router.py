"""Echo endpoint: reflects the ``input`` query parameter back as HTML.

Intentionally vulnerable (reflected XSS) for training. Students fix it by
escaping the value before it reaches the response.
"""

from fastapi import Request
from fastapi.responses import HTMLResponse
from markupsafe import escape as html_escape

from app.routing import any_method_route

ECHO_PREFIX = "You said: "


def reflect(value: str, escape: bool = False) -> str:
    """Build the echo body. ``escape=True`` is the remediated form."""
    if escape:
        value = str(html_escape(value))
    return f"{ECHO_PREFIX}{value}"


async def echo(request: Request) -> HTMLResponse:
    values = request.query_params.getlist("input")
    value = values[0] if values else ""
    # VULN: directly writing unsanitized input
    return HTMLResponse(reflect(value))


route = any_method_route("/echo", echo)
