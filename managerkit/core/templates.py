# -*- coding: utf-8 -*-
"""
templates

Template lookup across ordered search paths and Jinja2 rendering.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Mapping

from fastapi.templating import Jinja2Templates

from .configuration.conf import (
    ManagerSettings,
    current_settings,
    register_settings_observer,
)
from .exceptions import TemplateNotFoundError


class TemplateService:
    """Resolve templates against search paths and cache one environment per path."""

    def __init__(self, *, settings: ManagerSettings | None = None) -> None:
        """Configure the service with the active settings."""
        self._settings = settings or current_settings()
        self._templates: dict[str, Jinja2Templates] = {}
        if settings is None:
            register_settings_observer(self._apply_settings)

    def get_templates(self, directory: str | Path) -> Jinja2Templates:
        """Return the cached ``Jinja2Templates`` environment for ``directory``."""
        key = str(directory)
        templates = self._templates.get(key)
        if templates is None:
            templates = Jinja2Templates(directory=key)
            templates.env.globals["settings"] = self._settings
            self._templates[key] = templates
        return templates

    @staticmethod
    def locate(template: str, paths: Iterable[str | Path]) -> Path | None:
        """Return the first search path containing ``template``."""
        for path in paths:
            candidate = Path(path)
            if (candidate / template).is_file():
                return candidate
        return None

    def fetch(
        self,
        template: str,
        paths: Iterable[str | Path],
        context: Mapping[str, Any],
    ) -> str:
        """Render ``template`` from the first path that provides it."""
        search = list(paths)
        directory = self.locate(template, search)
        if directory is None:
            raise TemplateNotFoundError(template, [str(path) for path in search])
        jinja_template = self.get_templates(directory).get_template(template)
        return jinja_template.render(dict(context))

    def _apply_settings(self, settings: ManagerSettings) -> None:
        """Update cached environments when global settings change."""
        self._settings = settings
        for templates in self._templates.values():
            templates.env.globals["settings"] = settings


__all__ = ["TemplateService"]


# The End
