"""Exception types raised by the embedded UI component."""

from __future__ import annotations


class EmbeddedUIError(Exception):
    """Base class for embedded UI failures."""


class InvalidRoutePrefixError(EmbeddedUIError, ValueError):
    """The configured route prefix is empty or carries surrounding slashes."""


class ResourceBundleError(EmbeddedUIError):
    """The embedded resource bundle could not be loaded."""


class ResourceReadError(EmbeddedUIError):
    """Reading an embedded resource failed.

    Embedded assets are static, so a failed read points at a packaging
    defect rather than a transient condition. It is never retried.
    """

    def __init__(self, identifier: str, message: str) -> None:
        super().__init__(f"{identifier}: {message}")
        self.identifier = identifier
