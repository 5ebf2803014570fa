# -*- coding: utf-8 -*-
"""
config

Cached access to system options backed by the ``SystemSetting`` table.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any

from tortoise.exceptions import DBConnectionError, OperationalError

from .defaults import DEFAULT_SETTINGS
from .keys import SettingsKey


logger = logging.getLogger(__name__)

DATABASE_OPERATION_ERRORS = (OperationalError, DBConnectionError)


class SystemConfig:
    """Keep system options in memory and synchronise them with the database."""

    def __init__(self) -> None:
        """Start with an empty option cache."""
        self._cache: dict[str, Any] = {}

    @property
    def model(self) -> Any:
        """Return the Tortoise model storing system options."""
        from ..models.setting import SystemSetting

        return SystemSetting

    def get_cached(self, key: SettingsKey | str, default: Any = None) -> Any:
        """Return the cached value for ``key`` or ``default`` when unset."""
        return self._cache.get(str(key), default)

    def set(self, key: SettingsKey | str, value: Any) -> None:
        """Override ``key`` for the lifetime of this process."""
        self._cache[str(key)] = value

    def snapshot(self) -> dict[str, Any]:
        """Return defaults overlaid with every cached option."""
        data: dict[str, Any] = {str(key): value for key, (value, _kind) in DEFAULT_SETTINGS.items()}
        data.update(self._cache)
        return data

    async def ensure_seed(self) -> None:
        """Create rows for default options missing from the database."""
        model = self.model
        try:
            for key, (value, kind) in DEFAULT_SETTINGS.items():
                exists = await model.filter(key=str(key)).exists()
                if not exists:
                    await model.create(key=str(key), value=self._dump(value), value_type=kind)
        except DATABASE_OPERATION_ERRORS as exc:
            logger.warning(
                "Skipping system configuration seed: %s. "
                "Run your migrations before starting ManagerKit.",
                exc,
            )

    async def reload(self) -> None:
        """Replace the cache with the options stored in the database."""
        model = self.model
        try:
            rows = await model.all().values("key", "value", "value_type")
        except DATABASE_OPERATION_ERRORS as exc:
            logger.warning(
                "Skipping system configuration reload: %s. "
                "Run your migrations before starting ManagerKit.",
                exc,
            )
            return
        self._cache = {
            row["key"]: self._load(row["value"], str(row["value_type"])) for row in rows
        }

    @staticmethod
    def _dump(value: Any) -> str:
        if isinstance(value, bool):
            return "1" if value else "0"
        return str(value)

    @staticmethod
    def _load(raw: str, kind: str) -> Any:
        if kind == "bool":
            return raw.strip().lower() in {"1", "true", "yes", "on"}
        if kind == "int":
            try:
                return int(raw)
            except (TypeError, ValueError):
                logger.warning("Invalid integer option value %r", raw)
                return 0
        return raw


system_config = SystemConfig()

__all__ = ["SystemConfig", "system_config", "DATABASE_OPERATION_ERRORS", "logger"]


# The End
