"""Serve a single-page UI bundled as package data from an ASGI pipeline."""

__version__ = "0.1.0"

from embedui.config import UIConfig  # noqa: E402
from embedui.middleware import EmbeddedUIMiddleware, embedded_ui  # noqa: E402
from embedui.resources import EmbeddedResource, ResourceIndex, ResourceSet  # noqa: E402

__all__ = [
    "EmbeddedResource",
    "EmbeddedUIMiddleware",
    "ResourceIndex",
    "ResourceSet",
    "UIConfig",
    "embedded_ui",
]
