# -*- coding: utf-8 -*-
"""
scripts

Client-side enforcement fragments for form customization rules.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import json
from typing import Callable

from ..settings.choices import StrChoices
from .comparison import to_bool


class RuleKind(StrChoices):
    """Rule kinds understood by the manager forms."""

    FIELD_DEFAULT = ("fieldDefault", "Field default value")
    FIELD_VISIBLE = ("fieldVisible", "Field visible")
    FIELD_LABEL = ("fieldLabel", "Field label")
    FIELD_TITLE = ("fieldTitle", "Field title")
    FIELD_DESCRIPTION = ("fieldDescription", "Field description")
    TAB_VISIBLE = ("tabVisible", "Tab visible")
    TAB_NEW = ("tabNew", "New tab")
    TAB_LABEL = ("tabLabel", "Tab label")
    TAB_TITLE = ("tabTitle", "Tab title")
    PANEL_TITLE = ("panelTitle", "Panel title")
    TV_VISIBLE = ("tvVisible", "TV visible")
    TV_LABEL = ("tvLabel", "TV label")
    TV_TITLE = ("tvTitle", "TV title")
    TV_DEFAULT = ("tvDefault", "TV default value")
    TV_MOVE = ("tvMove", "Move TV to tab")


Renderer = Callable[[str, str, str], str]


def _js(value: object) -> str:
    """Encode ``value`` as a JavaScript literal safe inside a script element."""
    return json.dumps(value, separators=(",", ":")).replace("</", "<\\/")


def _names(name: str) -> list[str]:
    return [part.strip() for part in name.split(",") if part.strip()]


class RuleScriptRenderer:
    """Translate a rule into the manager's client API calls."""

    def __init__(self) -> None:
        """Register the renderer of every rule kind that emits a script."""
        self._renderers: dict[str, Renderer] = {
            RuleKind.FIELD_VISIBLE.value: self._field_visible,
            RuleKind.FIELD_LABEL.value: self._field_label,
            RuleKind.FIELD_TITLE.value: self._field_label,
            RuleKind.FIELD_DESCRIPTION.value: self._field_description,
            RuleKind.TAB_VISIBLE.value: self._tab_visible,
            RuleKind.TAB_NEW.value: self._tab_new,
            RuleKind.TAB_LABEL.value: self._tab_label,
            RuleKind.TAB_TITLE.value: self._tab_label,
            RuleKind.PANEL_TITLE.value: self._tab_label,
            RuleKind.TV_VISIBLE.value: self._tv_visible,
            RuleKind.TV_LABEL.value: self._tv_label,
            RuleKind.TV_TITLE.value: self._tv_label,
            RuleKind.TV_MOVE.value: self._tv_move,
        }

    def register(self, kind: str, renderer: Renderer) -> None:
        """Install ``renderer`` for rules of ``kind``."""
        self._renderers[str(kind)] = renderer

    def render(self, kind: str, *, name: str, container: str = "", value: str = "") -> str:
        """Return the fragment for a rule, or ``""`` when it has none."""
        renderer = self._renderers.get(str(kind))
        if renderer is None:
            return ""
        return renderer(name or "", container or "", "" if value is None else str(value))

    @staticmethod
    def _field_visible(name: str, container: str, value: str) -> str:
        if to_bool(value):
            return ""
        return f"MODx.hideField({_js(container)},{_js(_names(name))});"

    @staticmethod
    def _field_label(name: str, container: str, value: str) -> str:
        return f"MODx.renameLabel({_js(container)},{_js(_names(name))},{_js(value.split(','))});"

    @staticmethod
    def _field_description(name: str, container: str, value: str) -> str:
        return f"MODx.setFieldDescription({_js(container)},{_js(name)},{_js(value)});"

    @staticmethod
    def _tab_visible(name: str, container: str, value: str) -> str:
        if to_bool(value):
            return ""
        return f"MODx.hideRegion({_js(container)},{_js(name)});"

    @staticmethod
    def _tab_new(name: str, container: str, value: str) -> str:
        return f"MODx.addTab({_js(container)},{{title:{_js(value)},id:{_js(name)}}});"

    @staticmethod
    def _tab_label(name: str, container: str, value: str) -> str:
        return f"MODx.renameTab({_js(name)},{_js(value)});"

    @staticmethod
    def _tv_visible(name: str, container: str, value: str) -> str:
        if to_bool(value):
            return ""
        return f"MODx.hideTVs({_js(_names(name))});"

    @staticmethod
    def _tv_label(name: str, container: str, value: str) -> str:
        return f"MODx.renameTV({_js(name)},{_js(value)});"

    @staticmethod
    def _tv_move(name: str, container: str, value: str) -> str:
        return f"MODx.moveTV({_js(_names(name))},{_js(value)});"


rule_script_renderer = RuleScriptRenderer()

__all__ = ["RuleKind", "RuleScriptRenderer", "rule_script_renderer"]


# The End
