# -*- coding: utf-8 -*-
"""conftest

Shared testing utilities for ManagerKit test-suite fixtures.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import asyncio
import inspect
from pathlib import Path

import pytest

from managerkit.core.configuration.conf import ManagerSettings
from managerkit.core.loader import controller_loader
from managerkit.core.settings import system_config


class ManagerState:
    """Manage global manager singletons during tests."""

    def __init__(self) -> None:
        """Capture references to mutable singletons used by the manager."""

        self._system_config = system_config
        self._loader = controller_loader

    def reset(self) -> None:
        """Clear the option cache and the loaded controller modules."""

        self._system_config._cache.clear()  # type: ignore[attr-defined]
        self._loader.clear()


class AsyncioTestPlugin:
    """Minimal asyncio runner enabling ``async def`` tests without extras."""

    def __init__(self) -> None:
        """Configure the event-loop factory used for async test execution."""

        self._loop_factory = asyncio.new_event_loop

    def pytest_pyfunc_call(self, pyfuncitem: pytest.Function) -> bool | None:
        """Execute coroutine test functions inside a dedicated event loop."""

        if not inspect.iscoroutinefunction(pyfuncitem.obj):
            return None
        signature = inspect.signature(pyfuncitem.obj)
        kwargs = {
            name: pyfuncitem.funcargs[name]
            for name in signature.parameters
            if name in pyfuncitem.funcargs
        }
        loop = self._loop_factory()
        try:
            loop.run_until_complete(pyfuncitem.obj(**kwargs))
            pending = [task for task in asyncio.all_tasks(loop) if not task.done()]
            if pending:
                for task in pending:
                    task.cancel()
                loop.run_until_complete(asyncio.gather(*pending, return_exceptions=True))
            loop.run_until_complete(loop.shutdown_asyncgens())
        finally:
            loop.close()
        return True


class PytestPluginRegistrar:
    """Register custom pytest plugins following project conventions."""

    def __init__(self) -> None:
        """Instantiate and expose plugin objects for registration."""

        self.asyncio_plugin = AsyncioTestPlugin()

    def configure(self, config: pytest.Config) -> None:
        """Register required plugins with the pytest plugin manager."""

        config.addinivalue_line(
            "markers", "asyncio: execute test using the built-in asyncio loop"
        )
        config.pluginmanager.register(self.asyncio_plugin, "managerkit-asyncio-plugin")


manager_state = ManagerState()
_plugin_registrar = PytestPluginRegistrar()


def pytest_configure(config: pytest.Config) -> None:
    """Integrate custom plugins with pytest's plugin manager."""

    _plugin_registrar.configure(config)


@pytest.fixture(autouse=True)
def _reset_manager_state():
    manager_state.reset()
    yield
    manager_state.reset()


@pytest.fixture
def manager_root(tmp_path: Path) -> Path:
    """Create a manager tree with default header, footer and error templates."""

    templates = tmp_path / "manager" / "templates" / "default"
    templates.mkdir(parents=True)
    (templates / "header.tpl").write_text(
        "<head>{{ _pagetitle }}|{% for tag in cssjs %}{{ tag|safe }}{% endfor %}</head>",
        encoding="utf-8",
    )
    (templates / "footer.tpl").write_text("<footer/>", encoding="utf-8")
    (templates / "error.tpl").write_text("<error>{{ _e|safe }}</error>", encoding="utf-8")
    (tmp_path / "manager" / "controllers" / "default").mkdir(parents=True)
    return tmp_path / "manager"


@pytest.fixture
def manager_settings(manager_root: Path) -> ManagerSettings:
    return ManagerSettings(manager_path=manager_root, compress_js=False, compress_css=False)


__all__ = ["manager_state"]


# The End
