# -*- coding: utf-8 -*-
"""
formcustomization

Form Customization rule resolution for manager forms.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .comparison import FieldKind, values_equal
from .resolver import FormCustomizationResolver
from .scripts import RuleKind, RuleScriptRenderer, rule_script_renderer
from .shapes import FormTarget, ShapeId
from .store import (
    MemoryRuleStore,
    ProfileAccessPredicate,
    ProfileGroupLink,
    RuleRow,
    RuleStore,
    TortoiseRuleStore,
)

__all__ = [
    "FieldKind",
    "FormCustomizationResolver",
    "FormTarget",
    "MemoryRuleStore",
    "ProfileAccessPredicate",
    "ProfileGroupLink",
    "RuleKind",
    "RuleRow",
    "RuleScriptRenderer",
    "RuleStore",
    "ShapeId",
    "TortoiseRuleStore",
    "rule_script_renderer",
    "values_equal",
]


# The End
