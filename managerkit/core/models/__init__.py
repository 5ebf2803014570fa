# -*- coding: utf-8 -*-
"""
models

Tortoise models of the manager, registered under the ``manager`` app label.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .formcustomization import (
    ActionDom,
    FormCustomizationProfile,
    FormCustomizationProfileUserGroup,
    FormCustomizationSet,
)
from .groups import UserGroup
from .setting import SettingValueType, SystemSetting

MODEL_MODULES = ["managerkit.core.models"]

__all__ = [
    "ActionDom",
    "FormCustomizationProfile",
    "FormCustomizationProfileUserGroup",
    "FormCustomizationSet",
    "MODEL_MODULES",
    "SettingValueType",
    "SystemSetting",
    "UserGroup",
]

# The End
