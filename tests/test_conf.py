# -*- coding: utf-8 -*-
"""
tests.test_conf

Environment driven settings and observers.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from pathlib import Path

from managerkit.core.configuration.conf import ManagerSettings, SettingsManager
from managerkit.core.runtime import ManagerRuntime
from managerkit.core.settings import SettingsKey, system_config
from managerkit.core.templates import TemplateService


def test_from_env_reads_prefixed_variables() -> None:
    settings = ManagerSettings.from_env(
        {
            "MANAGERKIT_MANAGER_PATH": "/srv/manager",
            "MANAGERKIT_MANAGER_URL": "backend",
            "MANAGERKIT_COMPRESS_JS": "off",
            "MANAGERKIT_CONCAT_JS": "yes",
            "MANAGERKIT_MANAGER_THEME": "dark",
            "DATABASE_URL": "sqlite://db.sqlite3",
        }
    )

    assert settings.manager_path == Path("/srv/manager")
    assert settings.manager_url == "/backend/"
    assert settings.compress_js is False
    assert settings.compress_css is True
    assert settings.concat_js is True
    assert settings.manager_theme == "dark"
    assert settings.database_url == "sqlite://db.sqlite3"


def test_prefixes_are_normalised() -> None:
    settings = ManagerSettings(manager_url="manager", router_prefix="panel/", manager_theme=" ")

    assert settings.manager_url == "/manager/"
    assert settings.router_prefix == "/panel"
    assert settings.manager_theme == "default"


def test_settings_manager_notifies_observers() -> None:
    manager = SettingsManager()
    seen = []
    manager.register(seen.append)
    replacement = ManagerSettings(manager_theme="dark")

    manager.configure(replacement)
    manager.unregister(seen.append)
    manager.configure(ManagerSettings())

    assert seen == [replacement]


def test_template_service_follows_settings(tmp_path: Path) -> None:
    service = TemplateService(settings=ManagerSettings(manager_theme="light"))
    templates = service.get_templates(tmp_path)
    replacement = ManagerSettings(manager_theme="dark")

    service._apply_settings(replacement)

    assert service.get_templates(tmp_path) is templates
    assert templates.env.globals["settings"] is replacement


def test_runtime_options_fall_back_to_settings(manager_settings) -> None:
    runtime = ManagerRuntime(settings=manager_settings)

    assert runtime.get_option(SettingsKey.MANAGER_PATH) == manager_settings.manager_path
    assert runtime.get_option("site_name", "Site") == "Site"

    runtime.set_option(SettingsKey.COMPRESS_JS, True)

    assert runtime.get_option(SettingsKey.COMPRESS_JS) is True
    assert system_config.get_cached("compress_js") is True


# The End
