# -*- coding: utf-8 -*-
"""
setting

System options stored in the database.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from tortoise import fields
from tortoise.models import Model

from ..settings.choices import StrChoices


class SettingValueType(StrChoices):
    STRING = ("string", "String")
    INT = ("int", "Integer")
    BOOL = ("bool", "Boolean")


class SystemSetting(Model):
    """A single system option row, keyed by its option name."""

    key = fields.CharField(max_length=100, pk=True)
    value = fields.TextField(default="")
    value_type = fields.CharEnumField(SettingValueType, default=SettingValueType.STRING)

    class Meta:
        table = "manager_system_settings"
        verbose_name = "System setting"
        verbose_name_plural = "System settings"

    def __str__(self) -> str:
        return self.key

# The End
