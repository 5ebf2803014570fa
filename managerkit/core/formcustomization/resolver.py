# -*- coding: utf-8 -*-
"""
resolver

Form customization rule resolution: field overrides and enforcement scripts.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from operator import attrgetter
from typing import Any, Iterable, MutableSequence, Protocol

from tortoise.exceptions import BaseORMException

from .comparison import FieldKind, coerce_int, values_equal
from .scripts import RuleKind
from .shapes import FormTarget, ShapeId
from .store import RuleRow, RuleStore


logger = logging.getLogger(__name__)

RULE_SCRIPT_WRAPPER = (
    '<script type="text/javascript">Ext.onReady(function() {{{body}}});</script>'
)
FIELD_ALIASES: dict[str, str] = {"modx-resource-content": "content"}
PARENT_COMBO_FIELD = "parent-cmb"


class ScriptSink(Protocol):
    def append(self, fragment: str) -> None:
        ...


class FormCustomizationResolver:
    """Resolve the form customization rules of an action for one caller.

    Candidate rules come from ``store`` already limited to active sets and
    profiles visible to the caller's user groups. They are processed by
    ascending rank: template and object constraints gate each rule,
    ``fieldDefault`` rules contribute field overrides (later ranks win) and
    every surviving rule may contribute a script fragment. Fragments are
    wrapped in a single ``Ext.onReady`` block appended to ``sink``.
    """

    def __init__(self, store: RuleStore) -> None:
        """Bind the resolver to the rule ``store``."""
        self._store = store

    async def resolve(
        self,
        target: FormTarget | None,
        for_parent: bool,
        action_id: str,
        user_groups: Iterable[int],
        *,
        sink: MutableSequence[str] | ScriptSink | None = None,
    ) -> dict[str, Any]:
        """Return field overrides for ``target`` and emit scripts to ``sink``."""

        groups = frozenset(user_groups)
        try:
            rules = await self._store.fetch(action_id, for_parent, groups)
        except BaseORMException as exc:
            logger.warning(
                "Form customization rules unavailable for action %s: %s",
                action_id,
                exc,
            )
            return {}
        return self.apply(rules, target, sink=sink)

    def apply(
        self,
        rules: Iterable[RuleRow],
        target: FormTarget | None,
        *,
        sink: MutableSequence[str] | ScriptSink | None = None,
    ) -> dict[str, Any]:
        """Evaluate already fetched ``rules`` against ``target``."""

        overrides: dict[str, Any] = {}
        fragments: list[str] = []
        for rule in sorted(rules, key=attrgetter("rank")):
            if not self.matches(rule, target):
                continue
            if rule.rule == RuleKind.FIELD_DEFAULT.value:
                self._apply_default(rule, overrides)
            fragment = rule.render()
            if fragment:
                fragments.append(fragment)
        if fragments and sink is not None:
            sink.append(RULE_SCRIPT_WRAPPER.format(body="\n".join(fragments)))
        return overrides

    def matches(self, rule: RuleRow, target: FormTarget | None) -> bool:
        """Return ``True`` when ``rule`` passes its template and object gates."""

        if rule.template and target is not None:
            if not values_equal(FieldKind.INTEGER, target.template, rule.template):
                logger.debug("Rule %s skipped: template mismatch", rule.id)
                return False
        if not rule.constraint_class:
            return True
        if target is None:
            logger.debug("Rule %s skipped: constraint requires an object", rule.id)
            return False
        shape = ShapeId.resolve(rule.constraint_class)
        if shape is None:
            logger.warning(
                "Rule %s skipped: unknown constraint class %r",
                rule.id,
                rule.constraint_class,
            )
            return False
        if not target.shape.is_a(shape):
            logger.debug("Rule %s skipped: object is not a %s", rule.id, shape)
            return False
        field_name = rule.constraint_field
        if not values_equal(target.kind_of(field_name), target.get(field_name), rule.constraint):
            logger.debug("Rule %s skipped: %s constraint not met", rule.id, field_name)
            return False
        return True

    @staticmethod
    def _apply_default(rule: RuleRow, overrides: dict[str, Any]) -> None:
        field_name = FIELD_ALIASES.get(rule.name, rule.name)
        overrides[field_name] = rule.value
        if field_name == PARENT_COMBO_FIELD:
            parent = coerce_int(rule.value)
            overrides["parent"] = parent
            overrides[PARENT_COMBO_FIELD] = parent


__all__ = [
    "FIELD_ALIASES",
    "FormCustomizationResolver",
    "PARENT_COMBO_FIELD",
    "RULE_SCRIPT_WRAPPER",
    "ScriptSink",
]


# The End
