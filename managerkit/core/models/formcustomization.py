# -*- coding: utf-8 -*-
"""
formcustomization

Form Customization tables: profiles, their user groups, rule sets and rules.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from tortoise import fields
from tortoise.models import Model

from .groups import UserGroup


class FormCustomizationProfile(Model):
    """Activatable grouping of rule sets, optionally scoped to user groups."""

    id = fields.IntField(pk=True)
    name = fields.CharField(max_length=255)
    description = fields.TextField(null=True)
    active = fields.BooleanField(default=False, index=True)
    rank = fields.IntField(default=0)

    class Meta:
        table = "manager_fc_profiles"
        verbose_name = "Form customization profile"
        verbose_name_plural = "Form customization profiles"

    def __str__(self) -> str:
        return self.name


class FormCustomizationProfileUserGroup(Model):
    """Association row restricting a profile to a user group."""

    id = fields.IntField(pk=True)
    usergroup: fields.ForeignKeyRelation[UserGroup] = fields.ForeignKeyField(
        "manager.UserGroup", related_name="fc_profiles", on_delete=fields.CASCADE
    )
    profile: fields.ForeignKeyRelation[FormCustomizationProfile] = fields.ForeignKeyField(
        "manager.FormCustomizationProfile", related_name="user_groups", on_delete=fields.CASCADE
    )
    authority = fields.IntField(default=9999)

    class Meta:
        table = "manager_fc_profiles_usergroups"
        unique_together = (("usergroup", "profile"),)

    def __str__(self) -> str:
        return f"{self.profile_id}:{self.usergroup_id}"


class FormCustomizationSet(Model):
    """Activatable set of rules for one action, with object constraints."""

    id = fields.IntField(pk=True)
    profile: fields.ForeignKeyRelation[FormCustomizationProfile] = fields.ForeignKeyField(
        "manager.FormCustomizationProfile", related_name="sets", on_delete=fields.CASCADE
    )
    action = fields.CharField(max_length=255, index=True)
    description = fields.TextField(null=True)
    template = fields.IntField(default=0)
    active = fields.BooleanField(default=False, index=True)
    constraint_field = fields.CharField(max_length=100, default="")
    constraint = fields.CharField(max_length=255, default="")
    constraint_class = fields.CharField(max_length=100, default="")

    class Meta:
        table = "manager_fc_sets"
        verbose_name = "Form customization set"
        verbose_name_plural = "Form customization sets"

    def __str__(self) -> str:
        return f"{self.action}#{self.id}"


class ActionDom(Model):
    """A single DOM rule of a form customization set."""

    id = fields.IntField(pk=True)
    rule_set: fields.ForeignKeyRelation[FormCustomizationSet] = fields.ForeignKeyField(
        "manager.FormCustomizationSet",
        related_name="rules",
        source_field="set",
        on_delete=fields.CASCADE,
    )
    action = fields.CharField(max_length=255, index=True)
    name = fields.CharField(max_length=255)
    description = fields.TextField(null=True)
    xtype = fields.CharField(max_length=100, default="")
    container = fields.CharField(max_length=255, default="")
    rule = fields.CharField(max_length=100)
    value = fields.TextField(default="")
    for_parent = fields.BooleanField(default=False)
    rank = fields.IntField(default=0, index=True)

    class Meta:
        table = "manager_actiondom"
        verbose_name = "Form customization rule"
        verbose_name_plural = "Form customization rules"

    def __str__(self) -> str:
        return f"{self.rule}:{self.name}"

# The End
