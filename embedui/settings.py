"""Centralized environment configuration for the embedded UI host.

All environment variables are read through this module using the EMBEDUI_
prefix for consistency.

Usage:
    from embedui.settings import settings

    prefix = settings.route_prefix()
    port = settings.port()
"""

from __future__ import annotations

import os


def _get(name: str, default: str = "") -> str:
    """Get an environment variable value."""
    return os.environ.get(name, "").strip() or default


def _get_bool(name: str, default: bool = False) -> bool:
    """Get a boolean environment variable."""
    value = os.environ.get(name, "").strip()
    if not value:
        return default
    return value.lower() in ("1", "true", "yes")


def _get_int(name: str, default: int = 0) -> int:
    """Get an integer environment variable."""
    value = os.environ.get(name, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


class Settings:
    """Centralized settings for the embedded UI host.

    Environment variables use the EMBEDUI_ prefix.
    """

    # -------------------------------------------------------------------------
    # UI Bundle Settings
    # -------------------------------------------------------------------------

    @staticmethod
    def route_prefix() -> str:
        """URL namespace claimed by the embedded UI, without surrounding slashes.

        Env: EMBEDUI_ROUTE_PREFIX (default: custom/ui)
        """
        return _get("EMBEDUI_ROUTE_PREFIX", default="custom/ui")

    @staticmethod
    def resource_package() -> str:
        """Importable package holding the UI bundle as package data.

        Env: EMBEDUI_RESOURCE_PACKAGE (default: embedui)
        """
        return _get("EMBEDUI_RESOURCE_PACKAGE", default="embedui")

    @staticmethod
    def resource_root() -> str:
        """Directory inside the resource package that holds the bundle.

        Env: EMBEDUI_RESOURCE_ROOT (default: static_ui)
        """
        return _get("EMBEDUI_RESOURCE_ROOT", default="static_ui")

    @staticmethod
    def entry_document() -> str:
        """Bundle-relative path of the SPA entry document.

        Env: EMBEDUI_ENTRY_DOCUMENT (default: index.html)
        """
        return _get("EMBEDUI_ENTRY_DOCUMENT", default="index.html")

    @staticmethod
    def on_missing() -> str:
        """What to do with prefix requests that match no embedded asset.

        ``not_found`` answers 404; ``delegate`` passes the request on.

        Env: EMBEDUI_ON_MISSING (default: not_found)
        """
        return _get("EMBEDUI_ON_MISSING", default="not_found").lower()

    @staticmethod
    def static_dir() -> str:
        """Optional on-disk directory served downstream of the embedded UI.

        Env: EMBEDUI_STATIC_DIR
        """
        value = _get("EMBEDUI_STATIC_DIR")
        return os.path.abspath(value) if value else ""

    # -------------------------------------------------------------------------
    # Server Settings
    # -------------------------------------------------------------------------

    @staticmethod
    def host() -> str:
        """Host to bind the HTTP server to.

        Env: EMBEDUI_HOST (default: 127.0.0.1)
        """
        return _get("EMBEDUI_HOST", default="127.0.0.1")

    @staticmethod
    def port() -> int:
        """Port to bind the HTTP server to.

        Env: EMBEDUI_PORT (default: 8790)
        """
        return _get_int("EMBEDUI_PORT", default=8790)

    @staticmethod
    def reload() -> bool:
        """Enable uvicorn auto-reload for local development.

        Env: EMBEDUI_RELOAD
        """
        return _get_bool("EMBEDUI_RELOAD")

    # -------------------------------------------------------------------------
    # Logging Settings
    # -------------------------------------------------------------------------

    @staticmethod
    def log_level() -> str:
        """Log level name.

        Env: EMBEDUI_LOG_LEVEL (default: INFO)
        """
        return _get("EMBEDUI_LOG_LEVEL", default="INFO").upper()

    @staticmethod
    def log_format() -> str:
        """Log output format: ``console`` or ``json``.

        Env: EMBEDUI_LOG_FORMAT (default: console)
        """
        return _get("EMBEDUI_LOG_FORMAT", default="console").lower()


# Singleton instance for convenient imports
settings = Settings()
