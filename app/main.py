import logging
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from app.config import LISTEN_HOST, get_settings
from app.credentials import announce
from app.echo.router import route as echo_route
from app.routing import any_method_route

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).parent
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))

INDEX_TEMPLATE = "index.html"
XSS_DEMO_PAYLOAD = "<script>alert(1)</script>"


@asynccontextmanager
async def lifespan(app: FastAPI):
    announce()
    logger.info("ship-securely demo started")
    yield


app = FastAPI(title="ship-securely demo", version="0.1.0", lifespan=lifespan)


async def healthz(request: Request) -> PlainTextResponse:
    return PlainTextResponse("ok")


async def index(request: Request):
    try:
        return templates.TemplateResponse(
            request,
            INDEX_TEMPLATE,
            {"xss_payload": XSS_DEMO_PAYLOAD},
        )
    except TemplateError:
        logger.exception("Failed to render %s", INDEX_TEMPLATE)
        return PlainTextResponse("template error", status_code=500)


app.router.routes.extend(
    [
        any_method_route("/", index),
        any_method_route("/healthz", healthz),
        echo_route,
    ]
)


def run():
    settings = get_settings()
    logger.info("listening on %s", settings.address)
    # uvicorn exits non-zero if the port cannot be bound
    uvicorn.run(app, host=LISTEN_HOST, port=settings.listen_port)


if __name__ == "__main__":
    run()
