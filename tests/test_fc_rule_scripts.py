# -*- coding: utf-8 -*-
"""
tests.test_fc_rule_scripts

Client-side fragments produced for each rule kind.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import pytest

from managerkit.core.formcustomization import (
    FormCustomizationResolver,
    MemoryRuleStore,
    RuleKind,
    RuleRow,
    RuleScriptRenderer,
)


@pytest.mark.parametrize(
    ("kind", "name", "container", "value", "expected"),
    [
        ("fieldVisible", "alias,menutitle", "modx-panel-resource", "0",
         'MODx.hideField("modx-panel-resource",["alias","menutitle"]);'),
        ("fieldVisible", "alias", "modx-panel-resource", "1", ""),
        ("fieldLabel", "pagetitle", "modx-panel-resource", "Headline",
         'MODx.renameLabel("modx-panel-resource",["pagetitle"],["Headline"]);'),
        ("fieldTitle", "pagetitle", "modx-panel-resource", "Headline",
         'MODx.renameLabel("modx-panel-resource",["pagetitle"],["Headline"]);'),
        ("fieldDescription", "longtitle", "modx-panel-resource", "Shown in the browser",
         'MODx.setFieldDescription("modx-panel-resource","longtitle","Shown in the browser");'),
        ("tabVisible", "modx-resource-access", "modx-resource-tabs", "",
         'MODx.hideRegion("modx-resource-tabs","modx-resource-access");'),
        ("tabNew", "seo", "modx-resource-tabs", "SEO",
         'MODx.addTab("modx-resource-tabs",{title:"SEO",id:"seo"});'),
        ("tabLabel", "modx-resource-settings", "", "Options",
         'MODx.renameTab("modx-resource-settings","Options");'),
        ("panelTitle", "modx-resource-header", "", "Page",
         'MODx.renameTab("modx-resource-header","Page");'),
        ("tvVisible", "tv1, tv2", "", "0", 'MODx.hideTVs(["tv1","tv2"]);'),
        ("tvLabel", "tv3", "", "Price", 'MODx.renameTV("tv3","Price");'),
        ("tvMove", "tv4,tv5", "", "seo", 'MODx.moveTV(["tv4","tv5"],"seo");'),
        ("fieldDefault", "pagetitle", "", "Draft", ""),
        ("tvDefault", "tv1", "", "x", ""),
        ("noSuchRule", "pagetitle", "", "x", ""),
    ],
)
def test_rule_fragments(kind, name, container, value, expected) -> None:
    assert RuleScriptRenderer().render(kind, name=name, container=container, value=value) == expected


def test_values_are_json_encoded() -> None:
    fragment = RuleScriptRenderer().render(
        RuleKind.TAB_LABEL, name="tab", value='Say "hi"</script>'
    )

    assert fragment == 'MODx.renameTab("tab","Say \\"hi\\"<\\/script>");'


def test_list_values_are_compact() -> None:
    fragment = RuleScriptRenderer().render(
        RuleKind.TV_MOVE, name="tv1,tv2,tv3", value="seo"
    )

    assert fragment == 'MODx.moveTV(["tv1","tv2","tv3"],"seo");'


def test_closing_tags_stay_inside_one_script_block() -> None:
    rules = [
        RuleRow(id=1, rank=0, rule="tabLabel", name="t", value="</script><script>alert(1)</script>"),
        RuleRow(id=2, rank=1, rule="fieldLabel", name="</script>", container="c", value="x"),
    ]
    sink: list[str] = []

    FormCustomizationResolver(MemoryRuleStore()).apply(rules, None, sink=sink)

    assert len(sink) == 1
    assert sink[0].count("</script>") == 1
    assert sink[0].endswith("});</script>")
    assert '"<\\/script><script>alert(1)<\\/script>"' in sink[0]


def test_rows_render_through_their_renderer() -> None:
    renderer = RuleScriptRenderer()
    renderer.register("fieldDefault", lambda name, container, value: f"set({name}={value})")
    row = RuleRow(id=1, rank=0, rule="fieldDefault", name="title", value="A", renderer=renderer)

    assert row.render() == "set(title=A)"
    assert RuleRow(id=2, rank=0, rule="fieldDefault", name="title").render() == ""


# The End
