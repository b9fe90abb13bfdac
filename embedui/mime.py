"""Extension to content-type table for embedded UI assets.

A single table answers both questions the responder asks about an asset:
which MIME type to advertise, and whether the payload is passed through as
raw bytes or round-tripped as UTF-8 text. Only the text types listed here are
round-tripped; images, fonts, wasm and any extension missing from the table
are passed through unchanged.
"""

from __future__ import annotations

from typing import NamedTuple

DEFAULT_MIME_TYPE = "application/octet-stream"


class MimeEntry(NamedTuple):
    mime_type: str
    binary: bool = False


_TABLE: dict[str, MimeEntry] = {
    # Documents and scripts
    "html": MimeEntry("text/html"),
    "htm": MimeEntry("text/html"),
    "js": MimeEntry("application/javascript"),
    "mjs": MimeEntry("application/javascript"),
    "css": MimeEntry("text/css"),
    "json": MimeEntry("application/json"),
    "map": MimeEntry("application/json"),
    "webmanifest": MimeEntry("application/manifest+json"),
    "txt": MimeEntry("text/plain"),
    "xml": MimeEntry("application/xml"),
    "csv": MimeEntry("text/csv"),
    "md": MimeEntry("text/markdown"),
    # Fonts and wasm modules
    "wasm": MimeEntry("application/wasm", binary=True),
    "woff": MimeEntry("font/woff", binary=True),
    "woff2": MimeEntry("font/woff2", binary=True),
    "ttf": MimeEntry("font/ttf", binary=True),
    "otf": MimeEntry("font/otf", binary=True),
    "eot": MimeEntry("application/vnd.ms-fontobject", binary=True),
    # Images (passed through as raw bytes)
    "apng": MimeEntry("image/apng", binary=True),
    "bmp": MimeEntry("image/bmp", binary=True),
    "gif": MimeEntry("image/gif", binary=True),
    "ico": MimeEntry("image/x-icon", binary=True),
    "cur": MimeEntry("image/x-icon", binary=True),
    "jpg": MimeEntry("image/jpeg", binary=True),
    "jpeg": MimeEntry("image/jpeg", binary=True),
    "jfif": MimeEntry("image/jpeg", binary=True),
    "pjpeg": MimeEntry("image/jpeg", binary=True),
    "pjp": MimeEntry("image/jpeg", binary=True),
    "png": MimeEntry("image/png", binary=True),
    "svg": MimeEntry("image/svg+xml", binary=True),
    "tif": MimeEntry("image/tiff", binary=True),
    "tiff": MimeEntry("image/tiff", binary=True),
    "webp": MimeEntry("image/webp", binary=True),
}

BINARY_EXTENSIONS = frozenset(ext for ext, entry in _TABLE.items() if entry.binary)


def _key(extension: str) -> str:
    return extension.strip().lstrip(".").lower()


def lookup(extension: str) -> str:
    """Return the MIME type for a file extension.

    The extension is matched case-insensitively, with or without a leading
    dot. Unknown extensions map to ``application/octet-stream``.
    """
    entry = _TABLE.get(_key(extension))
    return entry.mime_type if entry else DEFAULT_MIME_TYPE


def is_binary(extension: str) -> bool:
    """Return True when assets with this extension are served as raw bytes.

    Unknown extensions count as binary: a pdf or avif must not be forced
    through a UTF-8 decode.
    """
    entry = _TABLE.get(_key(extension))
    return entry is None or entry.binary


def extension_of(name: str) -> str:
    """Return the lower-cased extension of a resource name, without the dot."""
    tail = name.rsplit("/", 1)[-1]
    if "." not in tail:
        return ""
    return tail.rsplit(".", 1)[1].lower()
