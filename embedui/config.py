"""Construction-time configuration for the embedded UI middleware."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

from embedui.errors import InvalidRoutePrefixError
from embedui.settings import settings

OnMissing = Literal["not_found", "delegate"]


def validate_route_prefix(value: str) -> str:
    """Check a route prefix and return it unchanged.

    Raises:
        InvalidRoutePrefixError: the prefix is empty, contains whitespace, or
            begins or ends with ``/``.
    """
    if not value:
        raise InvalidRoutePrefixError("route prefix must not be empty")
    if value != value.strip() or any(ch.isspace() for ch in value):
        raise InvalidRoutePrefixError(f"route prefix must not contain whitespace: {value!r}")
    if value.startswith("/") or value.endswith("/"):
        raise InvalidRoutePrefixError(
            f"route prefix must not begin or end with '/': {value!r}"
        )
    return value


class UIConfig(BaseModel):
    """Immutable configuration for one embedded UI mount."""

    model_config = ConfigDict(frozen=True)

    route_prefix: str = "custom/ui"
    entry_document: str = "index.html"
    on_missing: OnMissing = "not_found"
    resource_package: str = "embedui"
    resource_root: str | None = "static_ui"

    @field_validator("route_prefix")
    @classmethod
    def _check_route_prefix(cls, value: str) -> str:
        return validate_route_prefix(value)

    @field_validator("entry_document")
    @classmethod
    def _strip_entry_document(cls, value: str) -> str:
        value = value.strip("/")
        if not value:
            raise ValueError("entry document must not be empty")
        return value

    @classmethod
    def from_settings(cls) -> "UIConfig":
        """Build a config from EMBEDUI_* environment variables."""
        return cls(
            route_prefix=settings.route_prefix(),
            entry_document=settings.entry_document(),
            on_missing=settings.on_missing(),
            resource_package=settings.resource_package(),
            resource_root=settings.resource_root() or None,
        )
