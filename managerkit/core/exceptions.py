# -*- coding: utf-8 -*-
"""
exceptions

Custom domain exceptions for the manager core.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations


class ManagerError(Exception):
    """Base class for manager-specific exceptions."""


class PermissionDenied(ManagerError):
    """Raised when a user lacks permission for a manager page."""


class ControllerNotFound(ManagerError):
    """Raised when no controller is registered or loadable for an action."""


class TemplateNotFoundError(ManagerError):
    """Raised when a template is absent from every search path."""

    def __init__(self, template: str, paths: list[str] | tuple[str, ...]) -> None:
        super().__init__(f"Template '{template}' not found in {list(paths)!r}")
        self.template = template
        self.paths = tuple(paths)


# The End
