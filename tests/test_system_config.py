# -*- coding: utf-8 -*-
"""
tests.test_system_config

System option cache and its database synchronisation.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging

import pytest
from tortoise import Tortoise
from tortoise.exceptions import OperationalError

from managerkit.core.models import MODEL_MODULES, SystemSetting
from managerkit.core.orm import ORMConfig, ORMLifecycle
from managerkit.core.orm import Tortoise as orm_tortoise
from managerkit.core.settings import SettingsKey
from managerkit.core.settings import config as config_module
from managerkit.core.settings.config import SystemConfig


class MissingTableModel:
    """Stand-in for the settings model before migrations ran."""

    @staticmethod
    def all():
        raise OperationalError("no such table: manager_system_settings")

    @staticmethod
    def filter(**kwargs):
        raise OperationalError("no such table: manager_system_settings")


@pytest.mark.asyncio
async def test_reload_logs_hint_when_table_missing(monkeypatch, caplog) -> None:
    options = SystemConfig()
    options.set("site_name", "Kept")
    monkeypatch.setattr(SystemConfig, "model", property(lambda self: MissingTableModel))
    caplog.set_level(logging.WARNING, logger=config_module.logger.name)

    await options.reload()
    await options.ensure_seed()

    assert "Skipping system configuration reload" in caplog.text
    assert "Skipping system configuration seed" in caplog.text
    assert "Run your migrations before starting ManagerKit." in caplog.text
    assert options.get_cached("site_name") == "Kept"


@pytest.mark.asyncio
async def test_seed_and_reload_round_trip() -> None:
    await Tortoise.init(db_url="sqlite://:memory:", modules={"manager": MODEL_MODULES})
    await Tortoise.generate_schemas()
    try:
        options = SystemConfig()
        await options.ensure_seed()
        await SystemSetting.filter(key="manager_theme").update(value="dark")
        await options.reload()
    finally:
        await Tortoise.close_connections()

    assert options.get_cached(SettingsKey.MANAGER_THEME) == "dark"
    assert options.get_cached(SettingsKey.COMPRESS_JS) is True
    assert options.get_cached(SettingsKey.CONCAT_JS) is False
    assert options.snapshot()["site_name"] == "ManagerKit"


def test_snapshot_overlays_cache() -> None:
    options = SystemConfig()
    options.set(SettingsKey.MANAGER_THEME, "dark")

    snapshot = options.snapshot()

    assert snapshot["manager_theme"] == "dark"
    assert snapshot["manager_url"] == "/manager/"


def test_orm_config_registers_manager_models() -> None:
    config = ORMConfig(dsn="sqlite://:memory:", modules={"app": ["app.models"]})

    assert config.tortoise_config() == {
        "db_url": "sqlite://:memory:",
        "modules": {"app": ["app.models"], "manager": MODEL_MODULES},
    }


@pytest.mark.asyncio
async def test_startup_logs_hint_when_migrations_missing(monkeypatch, caplog) -> None:
    lifecycle = ORMLifecycle(config=ORMConfig(dsn="sqlite://:memory:"))
    error = OperationalError("missing table manager_actiondom")

    async def failing_init(*args, **kwargs):
        raise error

    monkeypatch.setattr(orm_tortoise, "init", failing_init)
    caplog.set_level(logging.ERROR, logger=ORMLifecycle._logger.name)

    await lifecycle.startup()

    assert not lifecycle.started
    assert "Failed to initialise ORM" in caplog.text
    assert "Run your migrations before starting ManagerKit." in caplog.text
    assert str(error) in caplog.text


@pytest.mark.asyncio
async def test_startup_and_shutdown() -> None:
    options = SystemConfig()
    lifecycle = ORMLifecycle(
        config=ORMConfig(dsn="sqlite://:memory:"), options=options, generate_schemas=True
    )

    await lifecycle.startup()
    try:
        assert lifecycle.started
        assert options.get_cached("manager_theme") is None
    finally:
        await lifecycle.shutdown()

    assert not lifecycle.started


# The End
