# -*- coding: utf-8 -*-
"""
groups

Manager user groups referenced by form customization profiles.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from tortoise import fields
from tortoise.models import Model


class UserGroup(Model):
    id = fields.IntField(pk=True)
    name = fields.CharField(max_length=150, unique=True)
    description = fields.CharField(max_length=512, null=True)
    rank = fields.IntField(default=0)

    class Meta:
        table = "manager_user_group"
        verbose_name = "User group"
        verbose_name_plural = "User groups"

    def __str__(self) -> str:
        return self.name

# The End
