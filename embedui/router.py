"""Request classification for the embedded UI.

Every request ends in exactly one outcome, checked in this order:

1. ``Redirect``: ``GET /<prefix>`` (optionally with a trailing slash) goes
   to ``/<prefix>/index``.
2. ``ServeEntry``: ``GET /<prefix>/index...`` renders the SPA entry document.
3. ``ServeAsset``: any GET path that resolves to an embedded resource. This also
   covers paths outside the prefix, so client-side routes that name a bundle
   file are answered from the bundle.
4. ``Delegate``: everything else, including every non-GET request, goes to
   the next handler unchanged.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import urlsplit, urlunsplit

from embedui.config import validate_route_prefix
from embedui.resources import EmbeddedResource, ResourceIndex

INDEX_SEGMENT = "index"


@dataclass(frozen=True)
class Redirect:
    location: str


@dataclass(frozen=True)
class ServeEntry:
    path: str


@dataclass(frozen=True)
class ServeAsset:
    path: str
    resource: EmbeddedResource


@dataclass(frozen=True)
class Delegate:
    pass


Outcome = Redirect | ServeEntry | ServeAsset | Delegate


def index_url(url: str) -> str:
    """Return ``url`` with trailing slashes trimmed from its path plus ``/index``.

    The query string and fragment are kept.
    """
    parts = urlsplit(url)
    return urlunsplit(parts._replace(path=parts.path.rstrip("/") + "/" + INDEX_SEGMENT))


class Router:
    """Classify requests against a route prefix and a resource index."""

    def __init__(self, route_prefix: str, index: ResourceIndex) -> None:
        self.route_prefix = validate_route_prefix(route_prefix)
        self.index = index
        escaped = re.escape(route_prefix)
        self._root_pattern = re.compile(rf"^/?{escaped}/?$", re.IGNORECASE)
        self._entry_pattern = re.compile(rf"^/{escaped}/?{INDEX_SEGMENT}", re.IGNORECASE)
        self._namespace_pattern = re.compile(rf"^/{escaped}(/|$)", re.IGNORECASE)

    def is_root(self, path: str) -> bool:
        return bool(self._root_pattern.match(path))

    def is_entry(self, path: str) -> bool:
        return bool(self._entry_pattern.match(path))

    def in_namespace(self, path: str) -> bool:
        """True when ``path`` is the prefix itself or lies underneath it."""
        return bool(self._namespace_pattern.match(path))

    def classify(self, method: str, path: str, url: str) -> Outcome:
        """Pick the outcome for one request.

        Args:
            method: HTTP method.
            path: URL-decoded request path.
            url: Full request URL, used to build the redirect location.
        """
        is_get = method.upper() == "GET"
        if is_get and self.is_root(path):
            return Redirect(location=index_url(url))
        if is_get and self.is_entry(path):
            return ServeEntry(path=path)
        resource = self.index.resolve(path) if is_get else None
        if resource is not None:
            return ServeAsset(path=path, resource=resource)
        return Delegate()
