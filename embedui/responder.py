"""Turn a resolved embedded resource into an HTTP response."""

from __future__ import annotations

import structlog
from anyio import to_thread
from starlette.responses import Response

from embedui import mime
from embedui.errors import ResourceReadError
from embedui.resources import EmbeddedResource

logger = structlog.get_logger(__name__)


def content_type_for(resource: EmbeddedResource) -> str:
    # The charset is advertised for every asset, images included.
    return f"{mime.lookup(resource.extension)};charset=utf-8"


def _read_payload(resource: EmbeddedResource, binary: bool) -> bytes:
    """Read a resource fully; the stream never outlives this call."""
    with resource.open() as stream:
        data = stream.read()
    if binary:
        return data
    return data.decode("utf-8").encode("utf-8")


async def read_resource(resource: EmbeddedResource) -> bytes:
    """Read an embedded resource on a worker thread.

    Raises:
        ResourceReadError: the stream could not be opened or read, or a text
            asset is not valid UTF-8.
    """
    binary = mime.is_binary(resource.extension)
    try:
        return await to_thread.run_sync(_read_payload, resource, binary)
    except (OSError, UnicodeDecodeError) as exc:
        logger.exception("Failed to read embedded resource", identifier=resource.identifier)
        raise ResourceReadError(resource.identifier, str(exc)) from exc


async def respond(resource: EmbeddedResource) -> Response:
    """Build the 200 response for an embedded asset."""
    body = await read_resource(resource)
    return Response(
        content=body,
        status_code=200,
        headers={"content-type": content_type_for(resource)},
    )
