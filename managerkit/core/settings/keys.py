# -*- coding: utf-8 -*-
"""
keys

Available system option keys for the manager.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .choices import StrChoices


class SettingsKey(StrChoices):
    """Available system option keys."""

    # --- Paths / URLs ---
    MANAGER_PATH         = ("manager_path", "Manager filesystem root")
    MANAGER_URL          = ("manager_url", "Manager base URL")

    # --- Look and feel ---
    MANAGER_THEME        = ("manager_theme", "Manager theme directory")
    MANAGER_LANGUAGE     = ("manager_language", "Manager language")
    SITE_NAME            = ("site_name", "Site name")

    # --- Assets ---
    COMPRESS_JS          = ("compress_js", "Serve scripts through the minifier")
    COMPRESS_CSS         = ("compress_css", "Serve stylesheets through the minifier")
    CONCAT_JS            = ("concat_js", "Use the single concatenated core bundle")


# The End
