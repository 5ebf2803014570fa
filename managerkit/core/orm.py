# -*- coding: utf-8 -*-
"""
orm

Tortoise ORM configuration and lifecycle for the manager tables.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from tortoise import Tortoise
from tortoise import exceptions as tortoise_exceptions

from .configuration.conf import ManagerSettings, current_settings
from .models import MODEL_MODULES
from .settings.config import SystemConfig, system_config


@dataclass
class ORMConfig:
    """Describe the database connection and the model modules to register."""

    dsn: str = "sqlite://:memory:"
    modules: dict[str, list[str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Always register the manager models under the ``manager`` label."""
        self.modules.setdefault("manager", list(MODEL_MODULES))

    @classmethod
    def from_settings(cls, settings: ManagerSettings | None = None) -> "ORMConfig":
        """Build a configuration from the active manager settings."""
        active = settings or current_settings()
        return cls(dsn=active.database_url or "sqlite://:memory:")

    def tortoise_config(self) -> dict[str, Any]:
        """Return keyword arguments accepted by ``Tortoise.init``."""
        return {"db_url": self.dsn, "modules": dict(self.modules)}


class ORMLifecycle:
    """Start and stop Tortoise ORM and warm the system option cache."""

    _logger = logging.getLogger(__name__)

    def __init__(
        self,
        *,
        config: ORMConfig | None = None,
        options: SystemConfig | None = None,
        generate_schemas: bool = False,
    ) -> None:
        """Store the configuration used at startup."""
        self._config = config or ORMConfig.from_settings()
        self._options = options or system_config
        self._generate_schemas = generate_schemas
        self._started = False

    @property
    def started(self) -> bool:
        return self._started

    async def startup(self) -> None:
        """Initialise the ORM, logging a hint when the schema is missing."""
        try:
            await Tortoise.init(**self._config.tortoise_config())
            if self._generate_schemas:
                await Tortoise.generate_schemas()
        except (tortoise_exceptions.OperationalError, tortoise_exceptions.ConfigurationError) as exc:
            self._logger.error(
                "Failed to initialise ORM: %s. Run your migrations before starting ManagerKit.",
                exc,
            )
            return
        self._started = True
        await self._options.reload()

    async def shutdown(self) -> None:
        """Close every open database connection."""
        if not self._started:
            return
        await Tortoise.close_connections()
        self._started = False


__all__ = ["ORMConfig", "ORMLifecycle", "Tortoise", "tortoise_exceptions"]


# The End
