"""Embedded UI bundle: resource enumeration and path resolution.

Resources are shipped as package data and addressed two ways:

- by their bundle-relative path (``assets/app.js``), which is exact and
  unambiguous;
- by their flattened, dot-joined identifier
  (``embedui.static_ui.assets.app.js``), the naming convention used by
  bundles that only expose a list of names.

``ResourceIndex`` resolves request paths against both, preferring the exact
relative path.
"""

from __future__ import annotations

import io
import re
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from functools import partial
from importlib import resources as importlib_resources
from typing import BinaryIO

import structlog

from embedui.errors import ResourceBundleError
from embedui.mime import extension_of

logger = structlog.get_logger(__name__)

_SKIPPED_SUFFIXES = (".py", ".pyc", ".pyo")
_SKIPPED_DIRS = {"__pycache__"}

Opener = Callable[[], BinaryIO]


@dataclass(frozen=True)
class EmbeddedResource:
    """One named byte payload in the bundle.

    ``open()`` returns a new stream on every call; callers own and close it.
    """

    identifier: str
    relative_path: str | None
    opener: Opener = field(repr=False, compare=False)

    @property
    def extension(self) -> str:
        return extension_of(self.relative_path or self.identifier)

    def open(self) -> BinaryIO:
        return self.opener()


def _flatten(namespace: str, relative_path: str) -> str:
    dotted = relative_path.strip("/").replace("/", ".")
    return f"{namespace}.{dotted}" if namespace else dotted


class ResourceSet:
    """Ordered, read-only collection of embedded resources."""

    __slots__ = ("_resources",)

    def __init__(self, resources: Iterable[EmbeddedResource]) -> None:
        self._resources = tuple(resources)

    def __iter__(self) -> Iterator[EmbeddedResource]:
        return iter(self._resources)

    def __len__(self) -> int:
        return len(self._resources)

    def __repr__(self) -> str:
        return f"ResourceSet({len(self._resources)} resources)"

    def identifiers(self) -> list[str]:
        return [resource.identifier for resource in self._resources]

    @classmethod
    def from_package(cls, package: str, *, subdirectory: str | None = None) -> ResourceSet:
        """Collect every data file shipped inside ``package``.

        Args:
            package: Importable package name that carries the bundle.
            subdirectory: Optional directory inside the package holding the
                bundle; paths are made relative to it.

        Raises:
            ResourceBundleError: the package cannot be imported or the bundle
                directory holds no files.
        """
        try:
            root = importlib_resources.files(package)
        except ModuleNotFoundError as exc:
            raise ResourceBundleError(f"UI bundle package not found: {package}") from exc

        namespace = package
        if subdirectory:
            subdirectory = subdirectory.strip("/")
            for part in subdirectory.split("/"):
                root = root.joinpath(part)
            namespace = _flatten(package, subdirectory)
        if not root.is_dir():
            raise ResourceBundleError(f"UI bundle directory not found: {namespace}")

        found: list[EmbeddedResource] = []
        stack = [(root, "")]
        while stack:
            directory, base = stack.pop()
            entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
            subdirs = []
            for entry in entries:
                if entry.name.startswith("."):
                    continue
                if entry.is_dir():
                    if entry.name not in _SKIPPED_DIRS:
                        subdirs.append((entry, f"{base}{entry.name}/"))
                    continue
                if entry.name.endswith(_SKIPPED_SUFFIXES):
                    continue
                relative_path = f"{base}{entry.name}"
                found.append(
                    EmbeddedResource(
                        identifier=_flatten(namespace, relative_path),
                        relative_path=relative_path,
                        opener=partial(entry.open, "rb"),
                    )
                )
            # Reversed so that subdirectories are visited in name order.
            stack.extend(reversed(subdirs))

        if not found:
            raise ResourceBundleError(f"UI bundle is empty: {namespace}")
        return cls(found)

    @classmethod
    def from_mapping(cls, namespace: str, files: Mapping[str, bytes]) -> ResourceSet:
        """Build an in-memory bundle from ``{relative_path: payload}``."""
        found = []
        for relative_path, payload in files.items():
            relative_path = relative_path.strip("/")
            found.append(
                EmbeddedResource(
                    identifier=_flatten(namespace, relative_path),
                    relative_path=relative_path,
                    opener=partial(io.BytesIO, payload),
                )
            )
        return cls(found)

    @classmethod
    def from_identifiers(
        cls, names: Iterable[str], opener: Callable[[str], BinaryIO]
    ) -> ResourceSet:
        """Wrap a flat list of dot-joined resource names.

        Only identifier suffix matching applies to these resources since their
        directory structure is unknown.
        """
        return cls(
            EmbeddedResource(identifier=name, relative_path=None, opener=partial(opener, name))
            for name in names
        )


class ResourceIndex:
    """Resolve request paths to embedded resources.

    Built once per middleware instance and shared read-only between
    concurrent requests.
    """

    def __init__(self, resources: ResourceSet, route_prefix: str) -> None:
        self._resources = resources
        self._prefix_pattern = re.compile(
            rf"(?<![^/]){re.escape(route_prefix)}(?![^/])", re.IGNORECASE
        )
        self._by_path: dict[str, EmbeddedResource] = {}
        for resource in resources:
            if resource.relative_path is None:
                continue
            existing = self._by_path.get(resource.relative_path)
            if existing is not None:
                logger.warning(
                    "Duplicate embedded resource path",
                    relative_path=resource.relative_path,
                    kept=existing.identifier,
                    ignored=resource.identifier,
                )
                continue
            self._by_path[resource.relative_path] = resource
        logger.debug(
            "Embedded resource index built",
            route_prefix=route_prefix,
            resources=len(resources),
        )

    @property
    def resources(self) -> ResourceSet:
        return self._resources

    def normalize_path(self, path: str) -> str:
        """Strip the route prefix and surrounding slashes from a request path.

        ``/custom/ui/assets/app.js`` becomes ``assets/app.js``. The prefix is
        only removed where it spans whole path segments, so ``/lib/uikit.js``
        keeps its name under a ``ui`` prefix.
        """
        stripped = self._prefix_pattern.sub("", path)
        return "/".join(segment for segment in stripped.split("/") if segment)

    def resolve(self, path: str) -> EmbeddedResource | None:
        """Return the resource a request path refers to, or None.

        An exact bundle-relative path wins. Otherwise the first resource, in
        bundle order, whose relative path ends with the request path on a
        ``/`` boundary is returned. Resources known only by a flat identifier
        match on a ``.`` boundary, and only when the request names a file
        with an extension, so ``/js`` never matches ``app.js``.
        """
        relative = self.normalize_path(path)
        if not relative:
            return None

        resource = self._by_path.get(relative)
        if resource is not None:
            return resource

        segment_suffix = "/" + relative
        dotted = relative.replace("/", ".")
        dotted_suffix = "." + dotted
        named_file = "." in relative.rsplit("/", 1)[-1]
        for resource in self._resources:
            if resource.relative_path is not None:
                if resource.relative_path.endswith(segment_suffix):
                    return resource
            elif named_file and (
                resource.identifier == dotted or resource.identifier.endswith(dotted_suffix)
            ):
                return resource
        return None
