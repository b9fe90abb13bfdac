"""Shared pytest fixtures for embedui tests."""

import os
from typing import AsyncGenerator

import httpx
import pytest
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

# Ensure the developer environment does not leak into the app under test.
for k in list(os.environ):
    if k.startswith("EMBEDUI_"):
        os.environ.pop(k, None)

from embedui.middleware import EmbeddedUIMiddleware
from embedui.resources import ResourceSet

NAMESPACE = "Company.Product.wwwroot"

INDEX_HTML = b"<!doctype html><html><head><title>Bundle</title></head><body></body></html>"
APP_JS = "console.log('héllo ✓');\n".encode("utf-8")
APP_CSS = b"body { margin: 0; }\n"
VENDOR_JS = b"export const vendor = 1;\n"
# PNG signature followed by bytes that are not valid UTF-8.
LOGO_PNG = b"\x89PNG\r\n\x1a\n" + bytes(range(256))


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Force the AnyIO pytest plugin to run tests under asyncio."""
    return "asyncio"


@pytest.fixture
def bundle_files() -> dict[str, bytes]:
    return {
        "index.html": INDEX_HTML,
        "app.js": APP_JS,
        "app.css": APP_CSS,
        "logo.png": LOGO_PNG,
        "assets/vendor.js": VENDOR_JS,
    }


@pytest.fixture
def bundle(bundle_files) -> ResourceSet:
    """In-memory UI bundle with the usual SPA assets."""
    return ResourceSet.from_mapping(NAMESPACE, bundle_files)


def build_host_app(resources: ResourceSet, **options) -> FastAPI:
    """Host app with a few downstream routes behind the embedded UI."""
    app = FastAPI()

    @app.get("/other/route")
    async def other_route():
        return PlainTextResponse("downstream body", headers={"X-Downstream": "1"})

    @app.get("/custom/ui/missing.js")
    async def downstream_missing():
        return PlainTextResponse("served downstream", status_code=200)

    @app.get("/js")
    async def downstream_js():
        return PlainTextResponse("scripts listing")

    @app.get("/html")
    async def downstream_html():
        return PlainTextResponse("pages listing")

    @app.post("/custom/ui/app.js")
    async def post_app_js():
        return PlainTextResponse("posted", status_code=201)

    app.add_middleware(EmbeddedUIMiddleware, resources=resources, **options)
    return app


@pytest.fixture
async def ui_client(bundle) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Async client against a host app serving the in-memory bundle."""
    transport = httpx.ASGITransport(app=build_host_app(bundle, route_prefix="custom/ui"))
    async with httpx.AsyncClient(transport=transport, base_url="http://host") as client:
        yield client
