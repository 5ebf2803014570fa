# -*- coding: utf-8 -*-
"""
controller

Base controller for manager pages.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import inspect
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Mapping

from .assets import AssetTagBuilder, HeadAssets, postfix_version_to_script, version_postfix
from .exceptions import ControllerNotFound
from .formcustomization.resolver import FormCustomizationResolver
from .formcustomization.shapes import FormTarget
from .paths import CORE_NAMESPACE, ManagerPaths
from .runtime import ManagerContext, ManagerRuntime
from .settings import SettingsKey


logger = logging.getLogger(__name__)

BEFORE_PAGE_INIT_EVENT = "OnBeforeManagerPageInit"


async def _maybe_await(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


class ManagerController(ABC):
    """Render a manager page from a controller subclass.

    Subclasses decide who may see the page (:meth:`check_permissions`), compute
    placeholders in :meth:`process`, register their own assets in
    :meth:`load_custom_css_js` and name the body template in
    :meth:`get_template_file`. :meth:`render` runs the whole pipeline: lexicon
    topics, search paths, base scripts, form customization rules, processing,
    head assets, then header, body and footer templates.

    ``process``, ``check_permissions`` and the event hooks may be plain or
    ``async`` methods.
    """

    load_header: bool = True
    load_footer: bool = True
    load_base_javascript: bool = True

    def __init__(self, runtime: ManagerRuntime, config: Mapping[str, Any] | None = None) -> None:
        """Bind the controller to ``runtime`` and its action ``config``."""

        self.runtime = runtime
        self.config: dict[str, Any] = dict(config) if config else {}
        self.templates_paths: list[Path] = []
        self.controllers_paths: list[Path] = []
        self.working_context: ManagerContext | None = None
        self.content = ""
        self.script_properties: dict[str, Any] = {}
        self.head = HeadAssets()
        self.placeholders: dict[str, Any] = {}
        self.template_vars: dict[str, Any] = {}
        self.rule_output: list[str] = []
        self.theme = "default"
        self.is_failure = False
        self.failure_message = ""

    def initialize(self) -> None:
        """Hook run by the router before rendering."""

    @classmethod
    def get_instance(
        cls,
        runtime: ManagerRuntime,
        controller_cls: type["ManagerController"],
        config: Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> "ManagerController":
        """Return a new ``controller_cls`` bound to ``runtime``."""

        return controller_cls(runtime, config)

    def set_properties(self, properties: Mapping[str, Any]) -> None:
        self.script_properties = dict(properties)

    def set_property(self, key: str, value: Any) -> None:
        self.script_properties[key] = value

    @property
    def namespace(self) -> str:
        return str(self.config.get("namespace") or CORE_NAMESPACE)

    async def render(self) -> str:
        """Run the page pipeline and return the page markup."""

        runtime = self.runtime
        if not await _maybe_await(self.check_permissions()):
            return runtime.failure(runtime.lexicon("access_denied"))

        self.theme = runtime.get_option(SettingsKey.MANAGER_THEME, "default") or "default"

        runtime.lexicon.load("action")
        topics = list(self.get_language_topics())
        for topic in topics:
            runtime.lexicon.load(topic)
        self.set_placeholder("_lang_topics", ",".join(topics))
        self.set_placeholder("_lang", runtime.lexicon.fetch())
        self.set_placeholder("_ctx", runtime.context_key)

        self.load_controllers_path()
        self.load_templates_path()
        content: Any = ""

        self.register_base_scripts()

        await self.check_form_customization_rules()

        self.set_placeholder("_config", runtime.options.snapshot())

        await runtime.events.invoke(BEFORE_PAGE_INIT_EVENT, {"action": self.config})
        placeholders = await _maybe_await(self.process(self.script_properties))
        if not self.is_failure and placeholders and isinstance(placeholders, Mapping):
            self.set_placeholders(placeholders)
        elif placeholders:
            content = placeholders
        if not self.is_failure:
            await _maybe_await(self.load_custom_css_js())
        await _maybe_await(self.fire_pre_render_events())

        if self.rule_output:
            self.add_html("\n".join(self.rule_output))

        self.register_css_js()

        self.set_placeholder("_pagetitle", self.get_page_title())

        self.content = ""
        if self.load_header:
            self.content += self.get_header()

        template = self.get_template_file()
        if self.is_failure:
            self.set_placeholder("_e", runtime.failure(self.failure_message))
            content = self.fetch_template("error.tpl")
        elif template:
            content = self.fetch_template(template)

        self.content += str(content)

        if self.load_footer:
            self.content += self.get_footer()

        await _maybe_await(self.fire_post_render_events())
        return self.content

    # --- Placeholders ---------------------------------------------------

    def set_placeholder(self, key: str, value: Any) -> None:
        """Set a placeholder, also exposing it to templates."""
        self.placeholders[key] = value
        self.template_vars[key] = value

    def set_placeholders(self, values: Mapping[str, Any]) -> None:
        for key, value in values.items():
            self.set_placeholder(key, value)

    def get_placeholders(self) -> dict[str, Any]:
        return self.placeholders

    def get_placeholder(self, key: str, default: Any = None) -> Any:
        return self.placeholders.get(key, default)

    # --- Templates and controllers ---------------------------------------

    def fetch_template(self, template: str) -> str:
        """Render ``template`` from the first templates path that has it."""
        return self.runtime.templates.fetch(template, self.templates_paths, self.template_vars)

    def load_controller(self, controller: str, core_only: bool = False) -> Any:
        """Run ``controller`` from the first controllers path that has it.

        The file's ``run(controller)`` function receives this controller;
        its return value is passed back. Returns ``""`` when no path has
        the file.
        """
        for path in self.get_controllers_paths(core_only):
            candidate = path / controller
            if candidate.is_file():
                module = self.runtime.loader.load(candidate)
                run = getattr(module, "run", None)
                if run is None:
                    raise ControllerNotFound(f"Controller file '{candidate}' defines no run()")
                return run(self)
        return ""

    def failure(self, message: str) -> None:
        """Mark the page as failed; the error template replaces the body."""
        self.is_failure = True
        self.failure_message += message

    def load_templates_path(self) -> list[Path]:
        if not self.templates_paths:
            self.set_template_paths(self.get_templates_paths())
        return self.templates_paths

    def set_template_paths(self, paths: list[str | Path] | str | Path) -> None:
        if isinstance(paths, (str, Path)):
            paths = [paths]
        self.templates_paths = [Path(path) for path in paths]

    def load_controllers_path(self) -> list[Path]:
        if not self.controllers_paths:
            self.controllers_paths = self.get_controllers_paths()
        return self.controllers_paths

    def get_controllers_paths(self, core_only: bool = False) -> list[Path]:
        """Return the controller search paths; override to add directories."""
        return self._paths().controllers(
            self.namespace, self.config.get("namespace_path"), core_only=core_only
        )

    def get_templates_paths(self, core_only: bool = False) -> list[Path]:
        """Return the template search paths; override to add directories."""
        return self._paths().templates(self.namespace, core_only=core_only)

    def _paths(self) -> ManagerPaths:
        manager_path = self.runtime.get_option(SettingsKey.MANAGER_PATH)
        return ManagerPaths(manager_path, self.theme)

    # --- Abstract page API ------------------------------------------------

    @abstractmethod
    def check_permissions(self) -> bool:
        """Return ``False`` to answer with an access denied failure."""

    @abstractmethod
    def process(self, script_properties: Mapping[str, Any]) -> Any:
        """Return placeholders to set, or an output string."""

    @abstractmethod
    def get_page_title(self) -> str:
        ...

    @abstractmethod
    def load_custom_css_js(self) -> None:
        ...

    @abstractmethod
    def get_template_file(self) -> str:
        """Return the body template name, or ``""`` for no template."""

    def get_language_topics(self) -> list[str]:
        return []

    def fire_pre_render_events(self) -> None:
        """Hook run once assets are registered, before page assembly."""

    def fire_post_render_events(self) -> None:
        """Hook run after the page markup is assembled."""

    def get_header(self) -> str:
        self.load_controller("header.py", True)
        return self.fetch_template("header.tpl")

    def get_footer(self) -> str:
        self.load_controller("footer.py", True)
        return self.fetch_template("footer.tpl")

    # --- Assets -----------------------------------------------------------

    def _tag_builder(self) -> AssetTagBuilder:
        runtime = self.runtime
        return AssetTagBuilder(
            runtime.get_option(SettingsKey.MANAGER_URL),
            compress_js=bool(runtime.get_option(SettingsKey.COMPRESS_JS)),
            compress_css=bool(runtime.get_option(SettingsKey.COMPRESS_CSS)),
        )

    def register_base_scripts(self) -> None:
        """Expose the core manager scripts to templates as ``maincssjs``."""
        if not self.load_base_javascript:
            return
        output = self._tag_builder().base_scripts(
            concat_js=bool(self.runtime.get_option(SettingsKey.CONCAT_JS)),
            auth_token=self.runtime.session_token,
        )
        self.template_vars["maincssjs"] = output

    def register_css_js(self) -> None:
        """Expose the queued head entries to templates as ``cssjs``."""
        self.head.prepare()
        builder = self._tag_builder()
        version = version_postfix(self.runtime.version)

        cssjs: list[str] = []
        cssjs.extend(builder.scripts(self.head.js))
        cssjs.extend(builder.stylesheets(self.head.css))
        cssjs.extend(self.head.html)
        cssjs.extend(
            postfix_version_to_script(script, version) for script in self.runtime.client_scripts
        )
        cssjs.extend(builder.last_scripts(self.head.lastjs))
        self.template_vars["cssjs"] = cssjs

    def add_javascript(self, script: str) -> None:
        self.head.js.append(script)

    def add_html(self, html: str) -> None:
        self.head.html.append(html)

    def add_css(self, stylesheet: str) -> None:
        self.head.css.append(stylesheet)

    def add_last_javascript(self, script: str) -> None:
        self.head.lastjs.append(script)

    # --- Form customization -------------------------------------------------

    async def check_form_customization_rules(
        self,
        obj: FormTarget | None = None,
        for_parent: bool = False,
    ) -> dict[str, Any]:
        """Return field overrides for ``obj``; rule scripts join the page head."""
        resolver = FormCustomizationResolver(self.runtime.rule_store)
        return await resolver.resolve(
            obj,
            for_parent,
            str(self.config.get("id", "")),
            self.runtime.user.user_groups,
            sink=self.rule_output,
        )

    # --- Contexts -----------------------------------------------------------

    def load_working_context(self, wctx: str | None = None) -> ManagerContext | None:
        """Select the context to work on, failing when it is unknown."""
        runtime = self.runtime
        key = wctx or self.script_properties.get("wctx") or runtime.context_key
        if key:
            self.working_context = runtime.get_context(str(key))
            if self.working_context is None:
                logger.debug("Unknown working context %s", key)
                self.failure(runtime.lexicon("permission_denied"))
        else:
            self.working_context = runtime.context
        return self.working_context


__all__ = ["BEFORE_PAGE_INIT_EVENT", "ManagerController"]


# The End
