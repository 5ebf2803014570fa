# -*- coding: utf-8 -*-
"""
configuration

Configuration helpers for ManagerKit core.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .conf import ManagerSettings, configure, current_settings

__all__ = ["ManagerSettings", "configure", "current_settings"]


# The End
