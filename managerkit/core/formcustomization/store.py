# -*- coding: utf-8 -*-
"""
store

Rule stores supplying candidate form customization rules for an action.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable, Protocol, Sequence

from .scripts import RuleScriptRenderer, rule_script_renderer


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleRow:
    """A rule joined with the template and constraint columns of its set."""

    id: int
    rank: int
    rule: str
    name: str
    value: str = ""
    container: str = ""
    template: int | None = None
    constraint_class: str = ""
    constraint_field: str = ""
    constraint: str = ""
    renderer: RuleScriptRenderer = field(
        default=rule_script_renderer, compare=False, repr=False
    )

    def render(self) -> str:
        """Return the client-side fragment enforcing this rule."""
        return self.renderer.render(
            self.rule, name=self.name, container=self.container, value=self.value
        )


@dataclass(frozen=True)
class ProfileGroupLink:
    """One profile/user-group association row as seen through a left join."""

    group_id: int | None
    profile_active: bool | None


class ProfileAccessPredicate:
    """Decide whether a profile applies to a caller from its group links.

    Each association row passes when
    ``(group IN user_groups AND (group IS NULL OR profile_active)) OR group IS NULL``.
    A profile without rows behaves as one row whose group is ``NULL``. The
    profile applies when any row passes.
    """

    def row_matches(self, link: ProfileGroupLink, user_groups: frozenset[int]) -> bool:
        group = link.group_id
        return (
            group in user_groups and (group is None or bool(link.profile_active))
        ) or group is None

    def allows(
        self, links: Iterable[ProfileGroupLink], user_groups: frozenset[int]
    ) -> bool:
        """Return ``True`` when the profile described by ``links`` applies."""
        rows = list(links) or [ProfileGroupLink(group_id=None, profile_active=None)]
        return any(self.row_matches(link, user_groups) for link in rows)


class RuleStore(Protocol):
    """Source of candidate rules for one manager action."""

    async def fetch(
        self, action_id: str, for_parent: bool, user_groups: frozenset[int]
    ) -> Sequence[RuleRow]:
        ...


@dataclass
class StoredRule:
    rule: RuleRow
    action: str
    for_parent: bool = False
    set_active: bool = True
    profile_active: bool = True
    links: tuple[ProfileGroupLink, ...] = ()


class MemoryRuleStore:
    """In-process rule store applying the same filters as the database store."""

    def __init__(self, predicate: ProfileAccessPredicate | None = None) -> None:
        """Create an empty store."""
        self._predicate = predicate or ProfileAccessPredicate()
        self._rules: list[StoredRule] = []

    def add(
        self,
        rule: RuleRow,
        *,
        action: str,
        for_parent: bool = False,
        set_active: bool = True,
        profile_active: bool = True,
        user_groups: Iterable[int] = (),
    ) -> RuleRow:
        """Store ``rule`` for ``action`` under a profile limited to ``user_groups``."""
        links = tuple(
            ProfileGroupLink(group_id=group, profile_active=profile_active)
            for group in user_groups
        )
        self._rules.append(
            StoredRule(
                rule=rule,
                action=action,
                for_parent=for_parent,
                set_active=set_active,
                profile_active=profile_active,
                links=links,
            )
        )
        return rule

    async def fetch(
        self, action_id: str, for_parent: bool, user_groups: frozenset[int]
    ) -> list[RuleRow]:
        """Return active rules of ``action_id`` visible to ``user_groups``."""
        selected = [
            entry.rule
            for entry in self._rules
            if entry.action == action_id
            and entry.for_parent == for_parent
            and entry.set_active
            and entry.profile_active
            and self._predicate.allows(entry.links, user_groups)
        ]
        return sorted(selected, key=lambda row: (row.rank, row.id))


class TortoiseRuleStore:
    """Rule store reading the form customization tables through Tortoise ORM."""

    def __init__(
        self,
        predicate: ProfileAccessPredicate | None = None,
        *,
        renderer: RuleScriptRenderer | None = None,
    ) -> None:
        """Configure the group predicate and the renderer attached to rows."""
        self._predicate = predicate or ProfileAccessPredicate()
        self._renderer = renderer or rule_script_renderer

    async def fetch(
        self, action_id: str, for_parent: bool, user_groups: frozenset[int]
    ) -> list[RuleRow]:
        """Return active rules of ``action_id`` visible to ``user_groups``."""
        from ..models.formcustomization import (
            ActionDom,
            FormCustomizationProfileUserGroup,
        )

        rules = (
            await ActionDom.filter(
                action=action_id,
                for_parent=for_parent,
                rule_set__active=True,
                rule_set__profile__active=True,
            )
            .select_related("rule_set")
            .order_by("rank", "id")
        )
        if not rules:
            return []
        profile_ids = {rule.rule_set.profile_id for rule in rules}
        links_by_profile: dict[int, list[ProfileGroupLink]] = defaultdict(list)
        associations = await FormCustomizationProfileUserGroup.filter(
            profile_id__in=profile_ids
        ).select_related("profile")
        for association in associations:
            links_by_profile[association.profile_id].append(
                ProfileGroupLink(
                    group_id=association.usergroup_id,
                    profile_active=association.profile.active,
                )
            )

        rows: list[RuleRow] = []
        for rule in rules:
            rule_set = rule.rule_set
            if not self._predicate.allows(links_by_profile[rule_set.profile_id], user_groups):
                logger.debug(
                    "Rule %s hidden by profile user groups",
                    rule.id,
                    extra={"profile_id": rule_set.profile_id},
                )
                continue
            rows.append(
                RuleRow(
                    id=rule.id,
                    rank=rule.rank,
                    rule=rule.rule,
                    name=rule.name,
                    value=rule.value,
                    container=rule.container,
                    template=rule_set.template or None,
                    constraint_class=rule_set.constraint_class,
                    constraint_field=rule_set.constraint_field,
                    constraint=rule_set.constraint,
                    renderer=self._renderer,
                )
            )
        return rows


__all__ = [
    "MemoryRuleStore",
    "ProfileAccessPredicate",
    "ProfileGroupLink",
    "RuleRow",
    "RuleStore",
    "StoredRule",
    "TortoiseRuleStore",
]


# The End
