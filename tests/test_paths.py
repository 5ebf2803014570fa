# -*- coding: utf-8 -*-
"""
tests.test_paths

Controller and template search path precedence.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from pathlib import Path

from managerkit.core.paths import ManagerPaths


def test_core_controllers_prefer_theme() -> None:
    paths = ManagerPaths("/srv/manager", "dark")

    assert paths.controllers() == [
        Path("/srv/manager/controllers/dark"),
        Path("/srv/manager/controllers/default"),
    ]


def test_namespace_controllers_come_first() -> None:
    paths = ManagerPaths("/srv/manager", "dark").controllers("shop", "/srv/extras/shop")

    assert paths[:6] == [
        Path("/srv/extras/shop/controllers/dark"),
        Path("/srv/extras/shop/controllers/default"),
        Path("/srv/extras/shop/controllers"),
        Path("/srv/extras/shop/dark"),
        Path("/srv/extras/shop/default"),
        Path("/srv/extras/shop"),
    ]
    assert paths[6:] == [
        Path("/srv/manager/controllers/dark"),
        Path("/srv/manager/controllers/default"),
    ]


def test_core_only_ignores_namespace() -> None:
    paths = ManagerPaths("/srv/manager").controllers("shop", "/srv/extras/shop", core_only=True)

    assert all(str(path).startswith("/srv/manager") for path in paths)


def test_templates() -> None:
    paths = ManagerPaths("/srv/manager", "dark")

    assert paths.templates() == [
        Path("/srv/manager/templates/dark"),
        Path("/srv/manager/templates/default"),
    ]
    assert paths.templates("shop")[-1] == Path("/srv/manager/templates")
    assert paths.theme == "dark"


# The End
