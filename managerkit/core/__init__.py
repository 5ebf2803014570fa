# -*- coding: utf-8 -*-
"""
core

Manager controllers, form customization and their collaborators.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .controller import ManagerController
from .extra import ExtraManagerController
from .runtime import ManagerContext, ManagerRuntime, ManagerUser

__all__ = [
    "ExtraManagerController",
    "ManagerContext",
    "ManagerController",
    "ManagerRuntime",
    "ManagerUser",
]


# The End
