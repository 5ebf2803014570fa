# -*- coding: utf-8 -*-
"""
paths

Search path lists for manager controllers and templates.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from pathlib import Path

CORE_NAMESPACE = "core"


class ManagerPaths:
    """Build ordered search paths; earlier entries take precedence.

    Theme directories come before ``default`` ones. Controllers of other
    namespaces are looked up in the namespace directory before the manager's.
    """

    def __init__(self, manager_path: str | Path, theme: str = "default") -> None:
        """Remember the manager root and the active theme."""
        self._manager_path = Path(manager_path)
        self._theme = theme or "default"

    @property
    def theme(self) -> str:
        return self._theme

    def controllers(
        self,
        namespace: str = CORE_NAMESPACE,
        namespace_path: str | Path | None = None,
        *,
        core_only: bool = False,
    ) -> list[Path]:
        manager = self._manager_path
        paths: list[Path] = []
        if namespace != CORE_NAMESPACE and not core_only:
            base = Path(namespace_path) if namespace_path is not None else manager
            paths.extend(
                [
                    base / "controllers" / self._theme,
                    base / "controllers" / "default",
                    base / "controllers",
                    base / self._theme,
                    base / "default",
                    base,
                ]
            )
        paths.extend(
            [
                manager / "controllers" / self._theme,
                manager / "controllers" / "default",
            ]
        )
        return paths

    def templates(
        self,
        namespace: str = CORE_NAMESPACE,
        *,
        core_only: bool = False,
    ) -> list[Path]:
        manager = self._manager_path / "templates"
        paths = [manager / self._theme, manager / "default"]
        if namespace != CORE_NAMESPACE and not core_only:
            paths.append(manager)
        return paths


__all__ = ["CORE_NAMESPACE", "ManagerPaths"]


# The End
