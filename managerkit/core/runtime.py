# -*- coding: utf-8 -*-
"""
runtime

Per-request collaborators shared by manager controllers.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from .configuration.conf import ManagerSettings, current_settings
from .events import EventDispatcher
from .formcustomization.store import MemoryRuleStore, RuleStore
from .lexicon import Lexicon
from .loader import ControllerModuleLoader, controller_loader
from .settings import SettingsKey
from .settings.config import SystemConfig, system_config
from .templates import TemplateService


@dataclass(frozen=True)
class ManagerUser:
    """The authenticated manager user as seen by controllers."""

    id: int | None = None
    username: str = ""
    user_groups: frozenset[int] = frozenset()
    permissions: frozenset[str] = frozenset()
    is_sudo: bool = False

    def has_permission(self, name: str) -> bool:
        return self.is_sudo or name in self.permissions


@dataclass(frozen=True)
class ManagerContext:
    """A working context pages can operate on."""

    key: str
    name: str = ""


@dataclass
class ManagerRuntime:
    """Bundle settings, options, lexicon, templates, events and the user."""

    settings: ManagerSettings = field(default_factory=current_settings)
    options: SystemConfig = field(default_factory=lambda: system_config)
    lexicon: Lexicon = field(default_factory=Lexicon)
    events: EventDispatcher = field(default_factory=EventDispatcher)
    templates: TemplateService | None = None
    rule_store: RuleStore = field(default_factory=MemoryRuleStore)
    user: ManagerUser = field(default_factory=ManagerUser)
    context_key: str = "mgr"
    contexts: dict[str, ManagerContext] = field(default_factory=dict)
    session: dict[str, Any] = field(default_factory=dict)
    client_scripts: list[str] = field(default_factory=list)
    loader: ControllerModuleLoader = field(default_factory=lambda: controller_loader)

    def __post_init__(self) -> None:
        """Fill in the template service and the current context."""
        if self.templates is None:
            self.templates = TemplateService(settings=self.settings)
        self.contexts.setdefault(self.context_key, ManagerContext(key=self.context_key))

    @property
    def context(self) -> ManagerContext:
        return self.contexts[self.context_key]

    @property
    def version(self) -> str:
        return self.settings.version

    @property
    def session_token(self) -> str:
        return str(self.session.get(f"manager.{self.context_key}.user.token", ""))

    def get_option(self, key: SettingsKey | str, default: Any = None) -> Any:
        """Return a system option, falling back to the matching settings field."""
        if default is None:
            default = getattr(self.settings, str(key), None)
        return self.options.get_cached(key, default)

    def set_option(self, key: SettingsKey | str, value: Any) -> None:
        self.options.set(key, value)

    def get_context(self, key: str) -> ManagerContext | None:
        return self.contexts.get(key)

    @staticmethod
    def failure(message: str) -> str:
        """Return the JSON failure payload sent instead of a page."""
        return json.dumps(
            {"success": False, "message": message, "total": 0, "errors": [], "object": []}
        )


__all__ = ["ManagerContext", "ManagerRuntime", "ManagerUser"]


# The End
