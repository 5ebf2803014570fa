# -*- coding: utf-8 -*-
"""
assets

Registration and tag building for manager page CSS and JavaScript.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable


BASE_BUNDLE = "assets/modext/modext.js"

BASE_SCRIPTS_EARLY: tuple[str, ...] = (
    "assets/modext/core/modx.localization.js",
    "assets/modext/util/utilities.js",
    "assets/modext/core/modx.component.js",
    "assets/modext/widgets/core/modx.panel.js",
    "assets/modext/widgets/core/modx.tabs.js",
    "assets/modext/widgets/core/modx.window.js",
    "assets/modext/widgets/core/modx.tree.js",
    "assets/modext/widgets/core/modx.combo.js",
)

BASE_SCRIPTS_LATE: tuple[str, ...] = (
    "assets/modext/widgets/core/modx.grid.js",
    "assets/modext/widgets/core/modx.console.js",
    "assets/modext/widgets/core/modx.portal.js",
    "assets/modext/widgets/modx.treedrop.js",
    "assets/modext/widgets/windows.js",
    "assets/modext/widgets/resource/modx.tree.resource.js",
    "assets/modext/widgets/element/modx.tree.element.js",
    "assets/modext/widgets/system/modx.tree.directory.js",
    "assets/modext/core/modx.view.js",
)

LAYOUT_SCRIPT = "assets/modext/core/modx.layout.js"

LAYOUT_BOOTSTRAP = """<script type="text/javascript">Ext.onReady(function() {
    MODx.load({xtype: "modx-layout",accordionPanels: MODx.accordionPanels || [],auth: "%s"});
});</script>"""


@dataclass
class HeadAssets:
    """CSS, JavaScript and raw HTML queued for the page head."""

    css: list[str] = field(default_factory=list)
    js: list[str] = field(default_factory=list)
    html: list[str] = field(default_factory=list)
    lastjs: list[str] = field(default_factory=list)

    def prepare(self) -> None:
        """Drop repeated entries, keeping the first occurrence of each."""
        self.css = list(dict.fromkeys(self.css))
        self.js = list(dict.fromkeys(self.js))
        self.html = list(dict.fromkeys(self.html))
        self.lastjs = list(dict.fromkeys(self.lastjs))


class AssetTagBuilder:
    """Produce script and link tags, optionally routed through the minifier."""

    def __init__(
        self,
        manager_url: str,
        *,
        compress_js: bool = True,
        compress_css: bool = True,
    ) -> None:
        self._manager_url = manager_url
        self.compress_js = compress_js
        self.compress_css = compress_css

    @property
    def min_url(self) -> str:
        return f"{self._manager_url}min/"

    def scripts(self, files: Iterable[str]) -> list[str]:
        """Return tags loading ``files`` before the page body."""
        files = list(files)
        if not files:
            return []
        if self.compress_js:
            return [f'<script src="{self.min_url}?f={",".join(files)}" type="text/javascript"></script>']
        return [f'<script src="{src}" type="text/javascript"></script>' for src in files]

    def last_scripts(self, files: Iterable[str]) -> list[str]:
        """Return tags loading ``files`` after every other head entry."""
        files = list(files)
        if not files:
            return []
        if self.compress_js:
            return [f'<script type="text/javascript" src="{self.min_url}?f={",".join(files)}"></script>']
        return [f'<script src="{src}" type="text/javascript"></script>' for src in files]

    def stylesheets(self, files: Iterable[str]) -> list[str]:
        files = list(files)
        if not files:
            return []
        if self.compress_css:
            return [f'<link href="{self.min_url}?f={",".join(files)}" rel="stylesheet" type="text/css" />']
        return [f'<link href="{href}" rel="stylesheet" type="text/css" />' for href in files]

    def base_scripts(self, *, concat_js: bool, auth_token: str) -> str:
        """Return the markup loading the core manager scripts and layout."""
        url = self._manager_url
        early: list[str] = []
        late: list[str] = []
        if concat_js:
            early.append(url + BASE_BUNDLE)
        else:
            early.extend(url + path for path in BASE_SCRIPTS_EARLY)
            late.extend(url + path for path in BASE_SCRIPTS_LATE)
        late.append(url + LAYOUT_SCRIPT)

        output = ""
        if self.compress_js:
            if early:
                output += f'<script type="text/javascript" src="{self.min_url}?f={",".join(early)}"></script>'
                output += f'<script type="text/javascript" src="{self.min_url}?f={",".join(late)}"></script>'
        else:
            for src in early + late:
                output += f'<script type="text/javascript" src="{src}"></script>\n'
        return output + LAYOUT_BOOTSTRAP % auth_token


def version_postfix(full_version: str) -> str:
    """Return ``full_version`` stripped of dots and dashes."""
    return full_version.replace(".", "").replace("-", "")


def postfix_version_to_script(tag: str, version: str) -> str:
    """Append ``?v=<version>`` to the source of an external ``.js`` script tag."""
    if tag.find(".js") > 0 and tag.find('src="') > 0:
        end = tag.find('"></script>')
        source = tag[:end] if end >= 0 else ""
        if source and source.endswith(".js"):
            return f'{source}?v={version}"></script>'
    return tag


__all__ = [
    "AssetTagBuilder",
    "BASE_BUNDLE",
    "BASE_SCRIPTS_EARLY",
    "BASE_SCRIPTS_LATE",
    "HeadAssets",
    "LAYOUT_SCRIPT",
    "postfix_version_to_script",
    "version_postfix",
]


# The End
