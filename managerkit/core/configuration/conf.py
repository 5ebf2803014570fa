# -*- coding: utf-8 -*-
"""
conf

Runtime configuration utilities for the ManagerKit package.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from threading import RLock
from typing import Callable, Mapping

from ...meta import __version__


@dataclass
class ManagerSettings:
    """Container for manager configuration derived from environment variables."""

    manager_path: Path = field(default_factory=lambda: Path.cwd() / "manager")
    manager_url: str = "/manager/"
    router_prefix: str = "/manager"
    manager_theme: str = "default"
    manager_language: str = "en"
    lexicon_path: Path | None = None
    compress_js: bool = True
    compress_css: bool = True
    concat_js: bool = False
    version: str = __version__
    database_url: str | None = None

    def __post_init__(self) -> None:
        """Normalise paths and URL prefixes after construction."""
        if not isinstance(self.manager_path, Path):
            self.manager_path = Path(str(self.manager_path))
        if self.lexicon_path is not None and not isinstance(self.lexicon_path, Path):
            self.lexicon_path = Path(str(self.lexicon_path))
        self.manager_url = self._normalize_prefix(self.manager_url)
        if not self.manager_url.endswith("/"):
            self.manager_url += "/"
        self.router_prefix = self._normalize_prefix(self.router_prefix).rstrip("/")
        if not self.manager_theme.strip():
            self.manager_theme = "default"

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        *,
        prefix: str = "MANAGERKIT_",
    ) -> "ManagerSettings":
        """Build a settings instance from environment variables."""
        source = env or os.environ
        data = {key[len(prefix) :]: value for key, value in source.items() if key.startswith(prefix)}
        manager_path = data.get("MANAGER_PATH") or (Path.cwd() / "manager")
        lexicon_path = data.get("LEXICON_PATH")
        return cls(
            manager_path=Path(manager_path),
            manager_url=data.get("MANAGER_URL") or "/manager/",
            router_prefix=data.get("ROUTER_PREFIX") or "/manager",
            manager_theme=data.get("MANAGER_THEME") or "default",
            manager_language=data.get("MANAGER_LANGUAGE") or "en",
            lexicon_path=Path(lexicon_path) if lexicon_path else None,
            compress_js=cls._to_bool(data.get("COMPRESS_JS"), default=True),
            compress_css=cls._to_bool(data.get("COMPRESS_CSS"), default=True),
            concat_js=cls._to_bool(data.get("CONCAT_JS"), default=False),
            version=data.get("VERSION") or __version__,
            database_url=data.get("DATABASE_URL") or source.get("DATABASE_URL"),
        )

    @staticmethod
    def _to_bool(value: str | None, *, default: bool = False) -> bool:
        """Return a boolean parsed from ``value`` with a ``default`` fallback."""

        if value is None:
            return default
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        return default

    @staticmethod
    def _normalize_prefix(value: str) -> str:
        """Ensure paths always contain a single leading slash."""
        normalized = value.strip()
        stripped = normalized.strip("/")
        if not stripped:
            return "/"
        cleaned = "/" + stripped
        if normalized.endswith("/") and stripped:
            cleaned += "/"
        return cleaned


class SettingsManager:
    """Central storage for the active ``ManagerSettings`` instance."""

    def __init__(self, initial: ManagerSettings | None = None) -> None:
        """Prepare storage with an optional preconfigured ``initial`` settings."""

        self._lock = RLock()
        self._settings = initial
        self._callbacks: list[Callable[[ManagerSettings], None]] = []

    def configure(self, settings: ManagerSettings) -> None:
        """Install a new settings instance and notify observers."""
        with self._lock:
            self._settings = settings
            for callback in list(self._callbacks):
                callback(settings)

    def current(self) -> ManagerSettings:
        """Return the active settings, lazily initializing from the environment."""
        with self._lock:
            if self._settings is None:
                self._settings = ManagerSettings.from_env()
            return self._settings

    def register(self, callback: Callable[[ManagerSettings], None]) -> None:
        """Register a callback invoked whenever settings change."""
        with self._lock:
            self._callbacks.append(callback)

    def unregister(self, callback: Callable[[ManagerSettings], None]) -> None:
        """Remove a previously registered settings change callback if present."""
        with self._lock:
            if callback in self._callbacks:
                self._callbacks.remove(callback)


_settings_manager = SettingsManager()


def configure(settings: ManagerSettings) -> None:
    """Public entry point to install application specific settings."""
    _settings_manager.configure(settings)


def current_settings() -> ManagerSettings:
    """Return the active settings instance used by ManagerKit components."""
    return _settings_manager.current()


def register_settings_observer(callback: Callable[[ManagerSettings], None]) -> None:
    """Subscribe to configuration changes for global singletons."""
    _settings_manager.register(callback)


def unregister_settings_observer(callback: Callable[[ManagerSettings], None]) -> None:
    """Unsubscribe from configuration changes previously registered."""
    _settings_manager.unregister(callback)


__all__ = [
    "ManagerSettings",
    "SettingsManager",
    "configure",
    "current_settings",
    "register_settings_observer",
    "unregister_settings_observer",
]


# The End
