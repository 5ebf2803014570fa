# -*- coding: utf-8 -*-
"""
defaults

Default settings mapping.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .keys import SettingsKey

DEFAULT_SETTINGS: dict[SettingsKey, tuple[object, str]] = {
    # Paths / URLs
    SettingsKey.MANAGER_PATH:      ("manager/", "string"),
    SettingsKey.MANAGER_URL:       ("/manager/", "string"),

    # Look and feel
    SettingsKey.MANAGER_THEME:     ("default", "string"),
    SettingsKey.MANAGER_LANGUAGE:  ("en", "string"),
    SettingsKey.SITE_NAME:         ("ManagerKit", "string"),

    # Assets
    SettingsKey.COMPRESS_JS:       (True, "bool"),
    SettingsKey.COMPRESS_CSS:      (True, "bool"),
    SettingsKey.CONCAT_JS:         (False, "bool"),
}

# The End
