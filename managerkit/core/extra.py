# -*- coding: utf-8 -*-
"""
extra

Controller base for extras that route sub-pages through the ``action`` parameter.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from .controller import ManagerController
from .exceptions import ControllerNotFound
from .runtime import ManagerRuntime


logger = logging.getLogger(__name__)

_UNSAFE_ACTION_PARTS = ("../", "./", ".", "-", "@")


class ExtraManagerController(ManagerController):
    """Controller of an extra; subclasses override only what they need.

    :meth:`get_instance` picks the sub-controller from the ``action``
    parameter, loading ``<namespace_path>/controllers/<action>.py`` and
    instantiating the class named by :meth:`get_controller_class_name`.
    """

    @classmethod
    def get_default_controller(cls) -> str:
        return "index"

    @classmethod
    def get_instance(
        cls,
        runtime: ManagerRuntime,
        controller_cls: type[ManagerController],
        config: Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> ManagerController:
        """Return the sub-controller selected by the ``action`` parameter."""

        config = dict(config or {})
        getter = getattr(controller_cls, "get_default_controller", cls.get_default_controller)
        action = getter()
        if params and params.get("action"):
            action = cls.sanitize_action(str(params["action"]))
        class_name = cls.get_controller_class_name(action, str(config.get("namespace", "")))
        namespace_path = config.get("namespace_path")
        if not namespace_path:
            raise ControllerNotFound(f"Namespace of {class_name} has no path")
        controllers_root = (Path(namespace_path) / "controllers").resolve()
        class_path = controllers_root / f"{action}.py"
        if not action or not class_path.resolve().is_relative_to(controllers_root):
            raise ControllerNotFound(f"Action '{action}' is outside {controllers_root}")
        module = runtime.loader.load(class_path)
        controller_type = getattr(module, class_name, None)
        if controller_type is None:
            raise ControllerNotFound(f"Class {class_name} not found in {class_path}")
        logger.debug("Routing action %s to %s", action, class_name)
        return controller_type(runtime, config)

    @staticmethod
    def sanitize_action(action: str) -> str:
        """Strip path traversal and separator characters from ``action``."""
        for part in _UNSAFE_ACTION_PARTS:
            action = action.replace(part, "")
        return action.lstrip("/")

    @staticmethod
    def get_controller_class_name(
        action: str,
        namespace: str = "",
        post_fix: str = "ManagerController",
    ) -> str:
        """Return the class name for ``action``, e.g. ``DemoMgrHomeManagerController``."""
        parts = []
        for part in action.split("/"):
            cleaned = part.replace(".", "").replace("_", "").replace("-", "")
            parts.append(cleaned[:1].upper() + cleaned[1:])
        return namespace[:1].upper() + namespace[1:] + "".join(parts) + post_fix

    def process(self, script_properties: Mapping[str, Any]) -> Any:
        return None

    def get_page_title(self) -> str:
        return ""

    def load_custom_css_js(self) -> None:
        return None

    def get_template_file(self) -> str:
        return ""

    def check_permissions(self) -> bool:
        return True


__all__ = ["ExtraManagerController"]


# The End
